from __future__ import annotations

import logging
import os
from typing import Protocol, Union

logger = logging.getLogger(__name__)

DEFAULT_HIGHSCORE_FILE = "highscore.txt"

PathLike = Union[str, "os.PathLike[str]"]


class ScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, value: int) -> bool: ...


class HighScoreStore:
    """Keeps a single non-negative integer in a plain text file.

    Neither operation raises: a missing or unreadable file loads as 0 and a
    failed write is logged and reported as ``False``.
    """

    def __init__(self, path: PathLike = DEFAULT_HIGHSCORE_FILE) -> None:
        self.path = os.fspath(path)

    def load(self) -> int:
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                text = fh.read().strip()
        except FileNotFoundError:
            return 0
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read high score file %s: %s", self.path, exc)
            return 0
        try:
            value = int(text)
        except ValueError:
            logger.warning("Ignoring malformed high score file %s", self.path)
            return 0
        return max(value, 0)

    def save(self, value: int) -> bool:
        try:
            with open(self.path, "w", encoding="utf-8") as fh:
                fh.write(str(int(value)))
        except OSError as exc:
            logger.warning("Could not save high score file %s: %s", self.path, exc)
            return False
        return True


class MemoryScoreStore:
    """In-process store, used when no file should be touched."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.saves: list[int] = []

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> bool:
        self.value = value
        self.saves.append(value)
        return True
