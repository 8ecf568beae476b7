from __future__ import annotations

import pytest

from falling_blocks.game import Grid, ShapeLibrary, default_shapes, parse_shape
from falling_blocks.game.shapes import T_PIECE, TETROMINOES


def test_parse_shape_reads_bottom_up(t_shape):
    assert (t_shape.width, t_shape.height) == (3, 3)
    assert [t_shape.is_set(x, 0) for x in range(3)] == [False, False, False]
    assert [t_shape.is_set(x, 1) for x in range(3)] == [True, True, True]
    assert [t_shape.is_set(x, 2) for x in range(3)] == [False, True, False]


def test_parse_shape_ragged_lines_pad_with_empty_cells():
    grid = parse_shape(
        """
        x
        xxx
        """
    )
    assert (grid.width, grid.height) == (3, 2)
    assert grid.is_set(0, 1)
    assert not grid.is_set(1, 1)
    assert not grid.is_set(2, 1)


def test_parse_shape_treats_any_other_character_as_empty():
    grid = parse_shape("x.X#")
    assert grid.is_set(0, 0)
    assert grid.count() == 1


def test_parse_shape_rejects_blank_text():
    with pytest.raises(ValueError):
        parse_shape("\n   \n")


def test_default_library_holds_square_shapes():
    shapes = default_shapes()
    assert len(shapes) == 1 + len(TETROMINOES)
    assert shapes[0] == parse_shape(T_PIECE)
    for shape in shapes:
        assert shape.width == shape.height
        assert shape.count() > 0


def test_library_hands_out_copies():
    shapes = ShapeLibrary.from_text(["xx\nxx"])
    shapes[0].reset()
    assert shapes[0].count() == 4


@pytest.mark.parametrize("shapes", [[], [Grid(2, 3)], [Grid(2, 2)]])
def test_library_rejects_bad_shapes(shapes):
    with pytest.raises(ValueError):
        ShapeLibrary(shapes)


def test_library_slices_return_copies():
    shapes = default_shapes()
    head = shapes[0:2]
    assert len(head) == 2
    assert head[0] == shapes[0]
    head[0].reset()
    assert shapes[0].count() > 0
    assert shapes[5:5] == ()
