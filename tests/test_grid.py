from __future__ import annotations

import numpy as np
import pytest

from falling_blocks.game import Grid, InvalidRotation, OutOfBounds, default_shapes, parse_shape


def test_is_unset_by_default(empty_grid):
    assert not empty_grid.is_set(0, 0)
    assert empty_grid.count() == 0


def test_set_and_unset(empty_grid):
    empty_grid.set(0, 0)
    assert empty_grid.is_set(0, 0)
    empty_grid.unset(0, 0)
    assert not empty_grid.is_set(0, 0)


def test_set_with_explicit_value(empty_grid):
    empty_grid.set(29, 19, True)
    assert empty_grid.is_set(29, 19)
    empty_grid.set(29, 19, False)
    assert not empty_grid.is_set(29, 19)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (30, 0), (0, 20), (30, 20), (-5, -5)])
def test_out_of_bounds_access_raises(empty_grid, x, y):
    assert not empty_grid.is_in_bounds(x, y)
    with pytest.raises(OutOfBounds):
        empty_grid.is_set(x, y)
    with pytest.raises(OutOfBounds):
        empty_grid.set(x, y)


def test_out_of_bounds_is_an_index_error(empty_grid):
    with pytest.raises(IndexError):
        empty_grid.unset(30, 0)


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3)])
def test_rejects_non_positive_dimensions(width, height):
    with pytest.raises(ValueError):
        Grid(width, height)


def test_copy_is_independent(empty_grid):
    empty_grid.set(3, 4)
    clone = empty_grid.copy()
    clone.set(5, 6)
    empty_grid.unset(3, 4)
    assert clone.is_set(3, 4)
    assert not empty_grid.is_set(5, 6)


def test_equals_compares_dimensions_and_cells():
    a = Grid(3, 3)
    b = Grid(3, 3)
    assert a == b
    b.set(1, 1)
    assert a != b
    assert not a.equals(Grid(3, 4))


def test_rotate_non_square_raises():
    with pytest.raises(InvalidRotation):
        Grid(2, 3).rotate()


def test_rotate_moves_cell_clockwise():
    grid = Grid(3, 3)
    grid.set(0, 1)
    grid.rotate()
    assert grid.is_set(1, 2)
    assert grid.count() == 1


@pytest.mark.parametrize("index", range(len(default_shapes())))
def test_rotation_is_a_four_cycle(index):
    shape = default_shapes()[index]
    rotated = shape.copy()
    for _ in range(4):
        rotated.rotate()
    assert rotated == shape


def test_row_access_and_top_row():
    grid = parse_shape(
        """
        ooo
        xox
        ooo
        """
    )
    assert grid.top_row() == 1
    assert np.array_equal(grid.row(1), [True, False, True])
    grid.set_row(0, True)
    assert grid.row(0).all()
    assert Grid(4, 4).top_row() == -1
    with pytest.raises(OutOfBounds):
        grid.row(3)


def test_as_array_puts_row_zero_first():
    grid = Grid(2, 3)
    grid.set(1, 0)
    array = grid.as_array()
    assert array.shape == (3, 2)
    assert array[0, 1]
    assert array.sum() == 1


def test_str_draws_top_row_first(t_shape):
    assert str(t_shape) == "oxo\nxxx\nooo"
