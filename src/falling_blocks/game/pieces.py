from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterator, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 0
    O = 1
    T = 2
    S = 3
    Z = 4
    J = 5
    L = 6


Shape = np.ndarray
Color = Tuple[int, int, int]


def _template(rows: list[list[int]]) -> Shape:
    return np.array(rows, dtype=np.int8)


# Every template lives in a 4x4 box so rotation never changes the footprint size
SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: _template([[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]]),
    TetrominoType.O: _template([[0, 0, 0, 0], [0, 1, 1, 0], [0, 1, 1, 0], [0, 0, 0, 0]]),
    TetrominoType.T: _template([[0, 0, 0, 0], [0, 1, 0, 0], [1, 1, 1, 0], [0, 0, 0, 0]]),
    TetrominoType.S: _template([[0, 0, 0, 0], [0, 1, 1, 0], [1, 1, 0, 0], [0, 0, 0, 0]]),
    TetrominoType.Z: _template([[0, 0, 0, 0], [1, 1, 0, 0], [0, 1, 1, 0], [0, 0, 0, 0]]),
    TetrominoType.J: _template([[0, 0, 0, 0], [1, 0, 0, 0], [1, 1, 1, 0], [0, 0, 0, 0]]),
    TetrominoType.L: _template([[0, 0, 0, 0], [0, 0, 1, 0], [1, 1, 1, 0], [0, 0, 0, 0]]),
}

COLORS: Dict[TetrominoType, Color] = {
    TetrominoType.I: (0, 255, 255),
    TetrominoType.O: (255, 255, 0),
    TetrominoType.T: (128, 0, 128),
    TetrominoType.S: (0, 255, 0),
    TetrominoType.Z: (255, 0, 0),
    TetrominoType.J: (0, 0, 255),
    TetrominoType.L: (255, 165, 0),
}


@dataclass
class Piece:
    """The falling tetromino: a 4x4 local shape placed at a board origin."""

    kind: TetrominoType
    shape: Shape = field(repr=False, compare=False)
    x: int = 0
    y: int = 0

    def cells(self, dx: int = 0, dy: int = 0) -> Iterator[Tuple[int, int]]:
        """Yield absolute (x, y) of occupied cells, shifted by (dx, dy)."""
        for i, j in zip(*np.nonzero(self.shape)):
            yield self.x + int(j) + dx, self.y + int(i) + dy


def spawn_piece(kind: TetrominoType | int, board_width: int = 10) -> Piece:
    kind = TetrominoType(kind)
    return Piece(kind=kind, shape=SHAPES[kind].copy(), x=board_width // 2 - 2, y=0)
