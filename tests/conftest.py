import sys, os

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from falling_blocks.game import GameConfig, TetrisGame
from falling_blocks.storage import MemoryScoreStore


class FakeClock:
    def __init__(self) -> None:
        self.value = 0

    def advance(self, amount: int) -> None:
        self.value += amount

    def __call__(self) -> int:
        return self.value


class ScriptedRandom:
    """Returns the queued piece indices in order, then repeats the last one."""

    def __init__(self, *values: int) -> None:
        self.values = list(values) or [0]
        self.calls = 0

    def push(self, *values: int) -> None:
        self.values.extend(values)

    def randrange(self, stop: int) -> int:
        idx = min(self.calls, len(self.values) - 1)
        self.calls += 1
        value = self.values[idx]
        assert 0 <= value < stop
        return value


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def make_game(clock, store):
    def _make(*pieces: int, high_score: int = 0, **config) -> TetrisGame:
        store.value = high_score
        return TetrisGame(
            config=GameConfig(**config),
            store=store,
            rng=ScriptedRandom(*pieces),
            clock=clock,
        )
    return _make
