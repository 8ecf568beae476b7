from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Deque, Optional

import numpy as np

from .collision import can_place
from .config import GameConfig
from .figure import Figure
from .grid import Grid
from .intents import GRAVITY, SOFT_DROP, MovementIntent, intent_for_key
from .lines import clear_full_rows
from .scoring import Scorer
from .shapes import ShapeLibrary, default_shapes


logger = logging.getLogger(__name__)


EMPTY_CELL = 0
LOCKED_CELL = 1
FIGURE_CELL = 2


class EngineState(IntEnum):
    SPAWNING = 0
    ACTIVE = 1
    LOCKING = 2
    GAME_OVER = 3


@dataclass
class StepResult:
    state: EngineState
    locked: bool = False
    lines_cleared: int = 0
    score_delta: int = 0

    @property
    def game_over(self) -> bool:
        return self.state == EngineState.GAME_OVER


class Engine:
    """Step-driven game controller.

    The engine owns the field grid, the falling figure and the scorer. It is
    advanced from outside: ``tick()`` for a timer-driven gravity step,
    ``on_intent()`` or ``on_key()`` for input events. Intents are queued and
    drained one per step, oldest first, before gravity is applied.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        shapes: Optional[ShapeLibrary] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.shapes = shapes if shapes is not None else default_shapes()
        self.rng = rng or random.Random(self.config.random_seed)
        self.grid = Grid(self.config.width, self.config.height)
        self.scorer = Scorer(self.config.score_increment, self.config.speed_levels)
        self.figure: Optional[Figure] = None
        self.state = EngineState.SPAWNING
        self.lines_cleared_total = 0
        self.figures_locked = 0
        self._intents: Deque[MovementIntent] = deque()

    def reset(self) -> None:
        self.grid.reset()
        self.scorer.reset()
        self.figure = None
        self.state = EngineState.SPAWNING
        self.lines_cleared_total = 0
        self.figures_locked = 0
        self._intents.clear()

    # Read-only surface for renderers and agents

    @property
    def score(self) -> int:
        return self.scorer.score

    @property
    def speed_level(self) -> int:
        return self.scorer.speed_level

    @property
    def is_over(self) -> bool:
        return self.state == EngineState.GAME_OVER

    @property
    def pending_intents(self) -> int:
        return len(self._intents)

    def get_state(self) -> np.ndarray:
        """Field as a ``(height, width)`` int8 array, row 0 first, figure overlaid."""
        state = self.grid.as_array().astype(np.int8) * LOCKED_CELL
        if self.figure is not None:
            for x, y in self.figure.cell_points():
                if self.grid.is_in_bounds(x, y):
                    state[y, x] = FIGURE_CELL
        return state

    # Input

    def push_intent(self, intent: MovementIntent) -> None:
        if self.is_over:
            logger.debug(f"Ignoring {intent}, game is over")
            return
        self._intents.append(intent)

    def on_intent(self, intent: MovementIntent) -> StepResult:
        self.push_intent(intent)
        return self.step(by_timer=False)

    def on_key(self, key: str) -> Optional[StepResult]:
        intent = intent_for_key(key, self.config.key_map)
        if intent is None:
            return None
        return self.on_intent(intent)

    def tick(self) -> StepResult:
        return self.step(by_timer=True)

    # Stepping

    def step(self, by_timer: bool = True) -> StepResult:
        if self.figure is None and not self.is_over:
            self._spawn()
        if self.is_over:
            return StepResult(self.state)

        result = StepResult(self.state)
        if self._intents:
            result = self._try_move(self._intents.popleft())
        if by_timer and not result.locked and not self.is_over:
            result = self._try_move(GRAVITY)
        return result

    def _random_shape(self) -> Grid:
        return self.shapes[self.rng.randrange(len(self.shapes))]

    def _spawn(self) -> None:
        self.state = EngineState.SPAWNING
        shape = self._random_shape()
        x = (self.grid.width - shape.width) // 2
        y = self.grid.height - (shape.top_row() + 1)
        self.figure = Figure(x, y, shape)
        logger.debug(f"Spawning figure at ({x}, {y})")
        if not can_place(self.grid, self.figure):
            self.state = EngineState.GAME_OVER
            logger.info(f"Game over: spawn at ({x}, {y}) is blocked, final score {self.score}")
            return
        self.state = EngineState.ACTIVE

    def _try_move(self, intent: MovementIntent) -> StepResult:
        assert self.figure is not None
        candidate = self.figure.apply_intent(intent)
        if can_place(self.grid, candidate):
            self.figure = candidate
            return StepResult(self.state)
        if intent == SOFT_DROP:
            return self._lock()
        return StepResult(self.state)

    def _lock(self) -> StepResult:
        assert self.figure is not None
        self.state = EngineState.LOCKING
        for x, y in self.figure.cell_points():
            self.grid.set(x, y)
        score_before = self.score
        rows = clear_full_rows(self.grid)
        for y in rows:
            logger.debug(f"Row {y} was filled")
            self.scorer.on_filled_line()
        self.lines_cleared_total += len(rows)
        self.figures_locked += 1
        self.figure = None
        self._spawn()
        return StepResult(
            self.state,
            locked=True,
            lines_cleared=len(rows),
            score_delta=self.score - score_before,
        )
