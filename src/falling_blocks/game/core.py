from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, Iterable, Optional, Protocol

import numpy as np

from falling_blocks.storage import HighScoreStore, ScoreStore

from .collision import collides, merge
from .grid import GameGrid
from .pieces import Piece, TetrominoType, spawn_piece
from .rotation import try_rotate
from .rules import ScoringRules

logger = logging.getLogger(__name__)


class Action(IntEnum):
    START = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    SOFT_DROP = 3
    ROTATE = 4
    QUIT = 5


class Phase(Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


Clock = Callable[[], int]


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    fall_interval_ms: int = 500
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < 4 or self.height < 4:
            raise ValueError(f"board must be at least 4x4, got {self.width}x{self.height}")
        if self.fall_interval_ms <= 0:
            raise ValueError(f"fall_interval_ms must be positive, got {self.fall_interval_ms}")


@dataclass(frozen=True)
class GameSnapshot:
    board: np.ndarray = field(compare=False)
    piece_kind: TetrominoType
    piece_shape: np.ndarray = field(compare=False)
    piece_x: int
    piece_y: int
    score: int
    high_score: int
    phase: Phase


class TetrisGame:
    """Owns the board, the falling piece, the score and the game phase.

    The game is advanced by two inputs only: discrete actions through
    :meth:`handle_action` and elapsed time through :meth:`update`. Time is
    read from ``clock`` in milliseconds; piece types are drawn from ``rng``.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        store: Optional[ScoreStore] = None,
        rng: Optional[RandomSource] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.store = store if store is not None else HighScoreStore()
        self.rng = rng if rng is not None else random.Random(self.config.random_seed)
        self.clock = clock or monotonic_ms
        self.grid = GameGrid(self.config.width, self.config.height)
        self.phase = Phase.NOT_STARTED
        self.score = 0
        self.high_score = self.store.load()
        self.current_piece: Piece = self._random_piece()
        self.last_fall = self.clock()
        self.fall_interval_ms = self.config.fall_interval_ms
        self.quit_requested = False

    def reset(self) -> None:
        self.grid.reset()
        self.score = 0
        self.current_piece = self._random_piece()
        self.last_fall = self.clock()
        self.fall_interval_ms = self.config.fall_interval_ms
        self.phase = Phase.PLAYING

    def _random_piece(self) -> Piece:
        kind = TetrominoType(self.rng.randrange(len(TetrominoType)))
        return spawn_piece(kind, self.grid.width)

    def _move(self, dx: int, dy: int) -> bool:
        if collides(self.grid, self.current_piece, dx, dy):
            return False
        self.current_piece.x += dx
        self.current_piece.y += dy
        return True

    def _soft_drop(self) -> bool:
        if not self._move(0, 1):
            return False
        self.score += self.rules.soft_drop_points
        return True

    def _lock_piece(self) -> int:
        merge(self.grid, self.current_piece)
        lines = self.grid.clear_full_lines()
        self.score += self.rules.score_for_lines(lines)
        self.current_piece = self._random_piece()
        if collides(self.grid, self.current_piece, 0, 0):
            self._enter_game_over()
        return lines

    def _enter_game_over(self) -> None:
        self.phase = Phase.GAME_OVER
        logger.info("Game over, final score %d", self.score)
        if self.score > self.high_score:
            self.high_score = self.score
            logger.info("New high score %d", self.high_score)
            self.store.save(self.high_score)

    def handle_action(self, action: Action) -> bool:
        """Apply one action; return True when it changed the game."""
        if action == Action.QUIT:
            self.quit_requested = True
            return True
        if action == Action.START:
            if self.phase == Phase.PLAYING:
                return False
            self.reset()
            return True
        if self.phase != Phase.PLAYING:
            return False

        if action == Action.MOVE_LEFT:
            return self._move(-1, 0)
        if action == Action.MOVE_RIGHT:
            return self._move(1, 0)
        if action == Action.SOFT_DROP:
            return self._soft_drop()
        if action == Action.ROTATE:
            return try_rotate(self.grid, self.current_piece)
        return False

    def handle_actions(self, actions: Iterable[Action]) -> None:
        for action in actions:
            self.handle_action(action)

    def update(self) -> int:
        """Run the fall timer; return the number of lines cleared this call."""
        if self.phase != Phase.PLAYING:
            return 0
        now = self.clock()
        if now - self.last_fall < self.fall_interval_ms:
            return 0
        lines = 0
        if not self._move(0, 1):
            lines = self._lock_piece()
        self.last_fall = now
        return lines

    def step(self, actions: Iterable[Action] = ()) -> int:
        self.handle_actions(actions)
        return self.update()

    def snapshot(self) -> GameSnapshot:
        piece = self.current_piece
        return GameSnapshot(
            board=self.grid.clone_state(),
            piece_kind=piece.kind,
            piece_shape=piece.shape.copy(),
            piece_x=piece.x,
            piece_y=piece.y,
            score=self.score,
            high_score=self.high_score,
            phase=self.phase,
        )
