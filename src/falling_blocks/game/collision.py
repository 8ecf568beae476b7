from __future__ import annotations

from .figure import Figure
from .grid import Grid


def can_place(grid: Grid, figure: Figure) -> bool:
    """True when every occupied cell of ``figure`` is inside ``grid`` and free."""
    for x, y in figure.cell_points():
        if not grid.is_in_bounds(x, y):
            return False
        if grid.is_set(x, y):
            return False
    return True
