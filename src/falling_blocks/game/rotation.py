from __future__ import annotations

import numpy as np

from .collision import collides
from .grid import GameGrid
from .pieces import Piece, Shape

# Horizontal offsets tried in order: center, left, right, two left, two right
KICKS = (0, -1, 1, -2, 2)


def rotate_cw(shape: Shape) -> Shape:
    # new[i][j] = old[3 - j][i]
    return np.rot90(shape, k=1, axes=(1, 0)).copy()


def try_rotate(grid: GameGrid, piece: Piece) -> bool:
    """Rotate ``piece`` clockwise in place using the first kick that fits.

    Returns False and leaves the piece untouched when every kick collides.
    """
    rotated = Piece(piece.kind, rotate_cw(piece.shape), piece.x, piece.y)
    for dx in KICKS:
        if not collides(grid, rotated, dx, 0):
            piece.shape = rotated.shape
            piece.x += dx
            return True
    return False
