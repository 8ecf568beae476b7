from __future__ import annotations

from typing import Iterable, Tuple, Union

import numpy as np

from .errors import InvalidRotation, OutOfBounds


Coordinate = Tuple[int, int]


class Grid:
    """Fixed-size boolean occupancy map.

    Cells live in a flat row-major array indexed as ``y * width + x``. The
    origin is the bottom-left cell and row indices grow upward, so row 0 is
    the floor of the playing field.
    """

    def __init__(self, width: int, height: int) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._cells = np.zeros(self.width * self.height, dtype=np.bool_)

    def _index(self, x: int, y: int) -> int:
        if not self.is_in_bounds(x, y):
            raise OutOfBounds(x, y)
        return y * self.width + x

    def _check_row(self, y: int) -> None:
        if not 0 <= y < self.height:
            raise OutOfBounds(0, y)

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_set(self, x: int, y: int) -> bool:
        return bool(self._cells[self._index(x, y)])

    def set(self, x: int, y: int, value: bool = True) -> None:
        self._cells[self._index(x, y)] = bool(value)

    def unset(self, x: int, y: int) -> None:
        self.set(x, y, False)

    def reset(self) -> None:
        self._cells.fill(False)

    def row(self, y: int) -> np.ndarray:
        """Copy of row ``y``, one boolean per column."""
        self._check_row(y)
        start = y * self.width
        return self._cells[start : start + self.width].copy()

    def set_row(self, y: int, values: Union[bool, Iterable[bool], np.ndarray]) -> None:
        self._check_row(y)
        start = y * self.width
        self._cells[start : start + self.width] = np.asarray(values, dtype=np.bool_)

    def top_row(self) -> int:
        """Index of the highest row holding an occupied cell, -1 when empty."""
        occupied = np.flatnonzero(self._cells)
        if occupied.size == 0:
            return -1
        return int(occupied[-1]) // self.width

    def count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def as_array(self) -> np.ndarray:
        # Row 0 (the bottom of the field) comes first.
        return self._cells.reshape(self.height, self.width).copy()

    def copy(self) -> "Grid":
        new_grid = Grid(self.width, self.height)
        new_grid._cells = self._cells.copy()
        return new_grid

    def rotate(self) -> None:
        """Rotate the occupancy in place by 90 degrees.

        Cell ``(x, y)`` moves to ``(y, N - 1 - x)``. Only square grids rotate.
        """
        if self.width != self.height:
            raise InvalidRotation(self.width, self.height)
        square = self._cells.reshape(self.height, self.width)
        self._cells = np.ascontiguousarray(np.rot90(square)).reshape(-1)

    def equals(self, other: "Grid") -> bool:
        if self.width != other.width or self.height != other.height:
            return False
        return bool(np.array_equal(self._cells, other._cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self.width}, {self.height}, set={self.count()})"

    def __str__(self) -> str:
        rows = self.as_array()[::-1]
        return "\n".join("".join("x" if cell else "o" for cell in row) for row in rows)
