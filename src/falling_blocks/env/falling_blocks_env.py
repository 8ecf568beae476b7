from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import LEFT, RIGHT, ROTATE, SOFT_DROP, Engine, GameConfig
from falling_blocks.game.engine import FIGURE_CELL


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    SOFT_DROP = 3
    ROTATE = 4


ACTION_TO_INTENT = {
    Action.LEFT: LEFT,
    Action.RIGHT: RIGHT,
    Action.SOFT_DROP: SOFT_DROP,
    Action.ROTATE: ROTATE,
}


class FallingBlocksEnv(gym.Env):
    """One env step applies the chosen intent and then one gravity tick."""

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 step_penalty: float = 0.0,
                 terminal_penalty: float = 0.0) -> None:
        super().__init__()
        self.engine = Engine(config)
        self.render_mode = render_mode
        self.step_penalty = float(step_penalty)
        self.terminal_penalty = float(terminal_penalty)

        width = self.engine.config.width
        height = self.engine.config.height
        # Observation: field with the falling figure overlaid, row 0 at the bottom
        self.observation_space = spaces.Box(low=0, high=FIGURE_CELL, shape=(height, width), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.engine.get_state()

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.engine.score,
            "speed_level": self.engine.speed_level,
            "lines_cleared_total": self.engine.lines_cleared_total,
            "figures_locked": self.engine.figures_locked,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.engine.rng.seed(seed)
        self.engine.reset()
        self._steps = 0
        # Spawn the first figure without moving it
        self.engine.step(by_timer=False)
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = Action(int(action))
        score_before = self.engine.score

        intent = ACTION_TO_INTENT.get(action)
        if intent is not None:
            self.engine.on_intent(intent)
        if not self.engine.is_over:
            self.engine.tick()

        self._steps += 1
        terminated = self.engine.is_over
        truncated = self._steps >= self.engine.config.max_episode_steps and not terminated

        reward = float(self.engine.score - score_before) + self.step_penalty
        if terminated:
            reward += self.terminal_penalty

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            # Flip so the bottom row of the field is drawn last
            state = self._get_obs()[::-1]
            cell = 12
            h, w = state.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            palette = {0: (30, 30, 36), 1: (70, 200, 120), 2: (200, 180, 60)}
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = palette[int(state[y, x])]
            return img
        # human rendering delegated to external UI; noop
        return None

    def close(self) -> None:
        pass
