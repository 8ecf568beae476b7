"""Row detection and compaction for the playing field.

These functions work on any :class:`Grid` through its public interface; the
grid itself knows nothing about full rows.
"""

from __future__ import annotations

from typing import List

from .grid import Grid


def is_row_full(grid: Grid, y: int) -> bool:
    return bool(grid.row(y).all())


def full_row_indices(grid: Grid) -> List[int]:
    return [y for y in range(grid.height) if is_row_full(grid, y)]


def clear_row(grid: Grid, y: int) -> None:
    grid.set_row(y, False)


def copy_row(grid: Grid, src_y: int, dest_y: int) -> None:
    grid.set_row(dest_y, grid.row(src_y))


def move_rows_down(grid: Grid, y: int) -> None:
    """Shift every row above ``y`` down by one, overwriting row ``y``."""
    for i in range(y + 1, grid.height):
        copy_row(grid, i, i - 1)
        clear_row(grid, i)


def compact_full_rows(grid: Grid) -> None:
    """Remove all full rows and let the rows above fall into the gaps.

    The cursor stays put after a removal so the row that just moved down is
    examined again. Each pass either removes a row or advances, so ``height``
    passes are enough.
    """
    y = 0
    for _ in range(grid.height):
        if is_row_full(grid, y):
            clear_row(grid, y)
            move_rows_down(grid, y)
        else:
            y += 1


def clear_full_rows(grid: Grid) -> List[int]:
    """Compact ``grid`` and return the rows that were full beforehand."""
    rows = full_row_indices(grid)
    if rows:
        compact_full_rows(grid)
    return rows
