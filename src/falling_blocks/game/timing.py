"""Tick scheduling helpers for the caller that drives the engine.

The engine never schedules itself. A UI loop asks :class:`TickClock` whether
a gravity tick is due and calls ``Engine.tick()`` when it is.
"""

from __future__ import annotations

from typing import Optional


BASE_TICK_UNITS = 4
DEFAULT_TICK_UNIT_MS = 250


def tick_interval_ms(speed_level: int, unit_ms: int = DEFAULT_TICK_UNIT_MS) -> int:
    return max(1, BASE_TICK_UNITS - speed_level) * unit_ms


class TickClock:
    def __init__(self, unit_ms: int = DEFAULT_TICK_UNIT_MS) -> None:
        self.unit_ms = int(unit_ms)
        self.last_tick_ms: Optional[int] = None

    def due(self, now_ms: int, speed_level: int) -> bool:
        """True (and restart the interval) when a tick should fire at ``now_ms``."""
        if self.last_tick_ms is None:
            self.last_tick_ms = now_ms
            return False
        if now_ms - self.last_tick_ms >= tick_interval_ms(speed_level, self.unit_ms):
            self.last_tick_ms = now_ms
            return True
        return False

    def reset(self) -> None:
        self.last_tick_ms = None
