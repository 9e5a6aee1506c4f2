from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

import numpy as np


Coordinate = Tuple[int, int]

EMPTY = 0


class GameGrid:
    """Fixed-size grid of settled cells.

    The grid uses 0 for empty cells and a ``ShapeKind`` id for settled cells,
    so the color of a settled cell is the color of the kind that left it.
    Rows grow downwards: row 0 is the top of the well.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def is_illegal(self, cells: Iterable[Coordinate]) -> bool:
        # Rows above the top (negative) are legal while a piece falls in.
        for x, y in cells:
            if x < 0 or x >= self.width or y >= self.height:
                return True
            if y >= 0 and self.grid[y, x] != EMPTY:
                return True
        return False

    def is_settled(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height and self.grid[y, x] != EMPTY

    def settle(self, cells: Iterable[Coordinate], value: int) -> None:
        """Write `value` at every cell; callers pass cells that are legal."""
        for x, y in cells:
            if y >= 0:
                self.grid[y, x] = value

    def full_rows(self) -> List[int]:
        """Indices of full rows, scanned top to bottom."""
        return [int(y) for y in np.flatnonzero(np.all(self.grid != EMPTY, axis=1))]

    def clear_rows(self, rows: List[int]) -> int:
        """Remove `rows` and drop everything above them into the gap."""
        if not rows:
            return 0
        num = len(rows)
        kept = np.delete(self.grid, rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        return num

    def settled(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(column, row, value)`` for every settled cell."""
        for y, x in zip(*np.nonzero(self.grid)):
            yield int(x), int(y), int(self.grid[y, x])

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
