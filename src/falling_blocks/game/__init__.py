"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- GameGrid: Grid representation and line clearing
- Piece: Tetromino piece with its 4x4 shape and board origin
- TetrominoType: Enum of available piece types
- collides / merge: Placement checks against the grid
- try_rotate: Clockwise rotation with horizontal kicks
- ScoringRules: Simple scoring configuration and helpers
- TetrisGame: Phase machine, fall timer and state management
"""

from .grid import GameGrid
from .pieces import COLORS, SHAPES, Piece, TetrominoType, spawn_piece
from .collision import collides, merge
from .rotation import KICKS, rotate_cw, try_rotate
from .rules import ScoringRules
from .core import Action, GameConfig, GameSnapshot, Phase, TetrisGame

__all__ = [
    "GameGrid",
    "COLORS",
    "SHAPES",
    "Piece",
    "TetrominoType",
    "spawn_piece",
    "collides",
    "merge",
    "KICKS",
    "rotate_cw",
    "try_rotate",
    "ScoringRules",
    "Action",
    "GameConfig",
    "GameSnapshot",
    "Phase",
    "TetrisGame",
]
