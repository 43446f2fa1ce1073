from __future__ import annotations

from .grid import GameGrid
from .pieces import Piece


def collides(grid: GameGrid, piece: Piece, dx: int = 0, dy: int = 0) -> bool:
    """Test ``piece`` shifted by (dx, dy) against walls, floor and locked cells.

    Cells above row 0 still have to respect the side walls but are never
    checked for occupancy, which lets a piece spawn or rotate partly off the
    top of the board.
    """
    for x, y in piece.cells(dx, dy):
        if x < 0 or x >= grid.width:
            return True
        if y >= grid.height:
            return True
        if y >= 0 and not grid.is_empty(x, y):
            return True
    return False


def merge(grid: GameGrid, piece: Piece) -> None:
    value = int(piece.kind) + 1
    for x, y in piece.cells():
        if grid.is_inside(x, y):
            grid.grid[y, x] = value
