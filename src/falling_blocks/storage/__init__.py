"""Persistence for the single high-score value."""

from .highscore import DEFAULT_HIGHSCORE_FILE, HighScoreStore, MemoryScoreStore, ScoreStore

__all__ = [
    "DEFAULT_HIGHSCORE_FILE",
    "HighScoreStore",
    "MemoryScoreStore",
    "ScoreStore",
]
