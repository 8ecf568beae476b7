from __future__ import annotations

from typing import Sequence, Tuple


DEFAULT_SPEED_LEVELS: Tuple[int, ...] = (20000, 40000, 60000)


def check_score_increment(score_increment: int) -> int:
    if score_increment <= 0:
        raise ValueError(f"score_increment must be positive, got {score_increment}")
    return int(score_increment)


def check_speed_levels(speed_levels: Sequence[int]) -> Tuple[int, ...]:
    """Thresholds as a tuple; repeated or descending values are rejected."""
    levels = tuple(int(level) for level in speed_levels)
    if any(a >= b for a, b in zip(levels, levels[1:])):
        raise ValueError(f"speed_levels must be strictly ascending, got {levels}")
    return levels


class Scorer:
    """Score accumulator with a speed level derived from the score."""

    def __init__(self, score_increment: int = 100, speed_levels: Sequence[int] = DEFAULT_SPEED_LEVELS) -> None:
        self.score_increment = check_score_increment(score_increment)
        self.speed_levels = check_speed_levels(speed_levels)
        self.score = 0

    def on_filled_line(self) -> None:
        self.score += self.score_increment

    def on_filled_lines(self, count: int) -> None:
        for _ in range(count):
            self.on_filled_line()

    @property
    def speed_level(self) -> int:
        for i, level in enumerate(self.speed_levels):
            if self.score < level:
                return i
        return len(self.speed_levels)

    def reset(self) -> None:
        self.score = 0
