from __future__ import annotations

import pytest

from falling_blocks.game import Grid, parse_shape


ROTATION_EXAMPLE = """
    oxo
    xxx
    ooo
"""


@pytest.fixture
def empty_grid() -> Grid:
    return Grid(30, 20)


@pytest.fixture
def t_shape() -> Grid:
    return parse_shape(ROTATION_EXAMPLE)
