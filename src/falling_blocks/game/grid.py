from __future__ import annotations

import numpy as np


class GameGrid:
    """Discrete 2D grid of locked cells.

    The grid uses 0 for empty cells and ``piece type + 1`` for filled cells,
    so the stored value doubles as a color index for the renderer.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_empty(self, x: int, y: int) -> bool:
        return self.grid[y, x] == 0

    def full_rows(self) -> np.ndarray:
        return np.where(np.all(self.grid != 0, axis=1))[0]

    def clear_full_lines(self) -> int:
        """Remove full rows, drop everything above them and return the count."""
        full_rows = self.full_rows()
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        remaining = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        # Write back in place so outside references to the array stay valid
        self.grid[:] = np.vstack((new_rows, remaining))
        return num

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
