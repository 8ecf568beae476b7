from __future__ import annotations

import pytest

from falling_blocks.game import Figure, can_place


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, -1, True),
        (0, -2, False),
        (-1, -1, False),
        (27, 17, True),
        (28, 17, False),
        (27, 18, False),
    ],
)
def test_boundary_placement(empty_grid, t_shape, x, y, expected):
    assert can_place(empty_grid, Figure(x, y, t_shape)) is expected


def test_occupied_cell_blocks_placement(empty_grid, t_shape):
    figure = Figure(2, 3, t_shape)
    assert can_place(empty_grid, figure)
    empty_grid.set(3, 5)
    assert not can_place(empty_grid, figure)


def test_empty_local_cells_may_overlap_set_cells(empty_grid, t_shape):
    empty_grid.set(2, 5)
    assert can_place(empty_grid, Figure(2, 3, t_shape))
