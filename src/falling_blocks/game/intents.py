from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class MovementIntent:
    delta_x: int
    delta_y: int
    has_rotation: bool = False


LEFT = MovementIntent(-1, 0)
RIGHT = MovementIntent(1, 0)
SOFT_DROP = MovementIntent(0, -1)
ROTATE = MovementIntent(0, 0, True)

# The timer applies the same intent as a soft drop.
GRAVITY = SOFT_DROP

# Key names as reported by pygame.key.name().
DEFAULT_KEY_MAP: Mapping[str, MovementIntent] = {
    "down": SOFT_DROP,
    "left": LEFT,
    "right": RIGHT,
    "up": ROTATE,
}


def intent_for_key(key: str, key_map: Mapping[str, MovementIntent] = DEFAULT_KEY_MAP) -> Optional[MovementIntent]:
    return key_map.get(key)
