from __future__ import annotations

from typing import Tuple

import pygame

from falling_blocks.game import Engine


BACKGROUND = (10, 10, 14)
FIELD = (30, 30, 36)
LOCKED = (70, 200, 120)
FALLING = (200, 180, 60)
TEXT = (255, 255, 255)


class Renderer:
    """Draws an engine's field and figure onto a pygame surface.

    The engine's row 0 is the bottom of the field, so rows are flipped when
    converted to screen pixels.
    """

    def __init__(self, cell_size: int = 20, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin

    def window_size(self, engine: Engine) -> Tuple[int, int]:
        width = engine.grid.width * self.cell_size + self.margin * 2
        height = engine.grid.height * self.cell_size + self.margin * 3
        return width, height

    def top_left(self, engine: Engine, x: int, y: int) -> Tuple[int, int]:
        pixel_x = self.margin + x * self.cell_size
        pixel_y = self.margin * 2 + (engine.grid.height - y - 1) * self.cell_size
        return pixel_x, pixel_y

    def _square(self, screen: pygame.Surface, engine: Engine, x: int, y: int, color: Tuple[int, int, int]) -> None:
        left, top = self.top_left(engine, x, y)
        rect = pygame.Rect(left, top, self.cell_size - 1, self.cell_size - 1)
        pygame.draw.rect(screen, color, rect)

    def draw(self, screen: pygame.Surface, engine: Engine, font: pygame.font.Font) -> None:
        screen.fill(BACKGROUND)
        grid = engine.grid
        for y in range(grid.height):
            for x in range(grid.width):
                self._square(screen, engine, x, y, LOCKED if grid.is_set(x, y) else FIELD)
        if engine.figure is not None:
            for x, y in engine.figure.cell_points():
                if grid.is_in_bounds(x, y):
                    self._square(screen, engine, x, y, FALLING)
        score = font.render(f"Score: {engine.score}  Speed: {engine.speed_level}", True, TEXT)
        screen.blit(score, (self.margin, self.margin // 2))
