"""Game module for Falling Blocks.

Exports the core engine and supporting classes:
- Grid: Bounded boolean occupancy map
- Figure: The falling piece with rotation and translation
- MovementIntent: Discrete input events (left, right, soft drop, rotate)
- can_place: Collision test between a grid and a figure
- compact_full_rows / clear_full_rows: Line detection and compaction
- Scorer: Score accumulator and speed level
- Engine: Step-driven game loop and state machine
"""

from .errors import FallingBlocksError, InvalidRotation, OutOfBounds
from .grid import Grid
from .shapes import ShapeLibrary, default_shapes, parse_shape
from .intents import DEFAULT_KEY_MAP, GRAVITY, LEFT, RIGHT, ROTATE, SOFT_DROP, MovementIntent, intent_for_key
from .figure import Figure
from .collision import can_place
from .lines import clear_full_rows, compact_full_rows, full_row_indices, is_row_full
from .scoring import Scorer
from .timing import TickClock, tick_interval_ms
from .config import GameConfig
from .engine import Engine, EngineState, StepResult

__all__ = [
    "FallingBlocksError",
    "InvalidRotation",
    "OutOfBounds",
    "Grid",
    "ShapeLibrary",
    "default_shapes",
    "parse_shape",
    "DEFAULT_KEY_MAP",
    "GRAVITY",
    "LEFT",
    "RIGHT",
    "ROTATE",
    "SOFT_DROP",
    "MovementIntent",
    "intent_for_key",
    "Figure",
    "can_place",
    "clear_full_rows",
    "compact_full_rows",
    "full_row_indices",
    "is_row_full",
    "Scorer",
    "TickClock",
    "tick_interval_ms",
    "GameConfig",
    "Engine",
    "EngineState",
    "StepResult",
]
