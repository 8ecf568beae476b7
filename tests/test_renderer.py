from __future__ import annotations

import pytest

pygame = pytest.importorskip("pygame")

from falling_blocks.game import Engine, GameConfig
from falling_blocks.visualization.renderer import Renderer


def test_row_zero_is_drawn_at_the_bottom():
    engine = Engine(GameConfig(width=4, height=5))
    renderer = Renderer(cell_size=10, margin=5)
    assert renderer.window_size(engine) == (50, 65)
    assert renderer.top_left(engine, 0, 0) == (5, 50)
    assert renderer.top_left(engine, 3, 4) == (35, 10)


def test_draw_on_offscreen_surface():
    pygame.font.init()
    engine = Engine(GameConfig(width=4, height=5, random_seed=0))
    engine.step(by_timer=False)
    renderer = Renderer(cell_size=10, margin=5)
    surface = pygame.Surface(renderer.window_size(engine))
    font = pygame.font.Font(None, 12)
    renderer.draw(surface, engine, font)
