from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from .intents import DEFAULT_KEY_MAP, MovementIntent
from .scoring import DEFAULT_SPEED_LEVELS, check_score_increment, check_speed_levels
from .timing import DEFAULT_TICK_UNIT_MS


@dataclass
class GameConfig:
    width: int = 15
    height: int = 22
    score_increment: int = 100
    speed_levels: Tuple[int, ...] = DEFAULT_SPEED_LEVELS
    tick_unit_ms: int = DEFAULT_TICK_UNIT_MS
    random_seed: Optional[int] = None
    max_episode_steps: int = 10000
    key_map: Mapping[str, MovementIntent] = field(default_factory=lambda: dict(DEFAULT_KEY_MAP))

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"field must have positive dimensions, got {self.width}x{self.height}")
        if self.tick_unit_ms <= 0:
            raise ValueError(f"tick_unit_ms must be positive, got {self.tick_unit_ms}")
        if self.max_episode_steps <= 0:
            raise ValueError(f"max_episode_steps must be positive, got {self.max_episode_steps}")
        self.score_increment = check_score_increment(self.score_increment)
        self.speed_levels = check_speed_levels(self.speed_levels)
