from __future__ import annotations

import pytest

from falling_blocks.game import GameConfig


def test_defaults_are_valid():
    config = GameConfig()
    assert (config.width, config.height) == (15, 22)
    assert config.speed_levels == (20000, 40000, 60000)


def test_speed_levels_are_stored_as_tuple():
    assert GameConfig(speed_levels=[10, 20]).speed_levels == (10, 20)


@pytest.mark.parametrize(
    "overrides",
    [
        {"width": 0},
        {"height": -1},
        {"tick_unit_ms": 0},
        {"max_episode_steps": 0},
        {"score_increment": 0},
        {"score_increment": -100},
        {"speed_levels": (200, 100)},
        {"speed_levels": (100, 100)},
    ],
)
def test_game_config_rejects_bad_values(overrides):
    with pytest.raises(ValueError):
        GameConfig(**overrides)
