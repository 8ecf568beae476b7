from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .grid import Coordinate, Grid
from .intents import MovementIntent


@dataclass(frozen=True)
class Figure:
    """The falling piece: a local shape placed at ``(x, y)`` on the field.

    Figures are values. ``translate``, ``rotate`` and ``apply_intent`` return
    new figures with their own copy of the shape, so a candidate move can be
    tested and thrown away without touching the current figure.
    """

    x: int
    y: int
    shape: Grid

    # The shape grid is mutable, so figures compare by value but do not hash.
    __hash__ = None  # type: ignore[assignment]

    @property
    def width(self) -> int:
        return self.shape.width

    @property
    def height(self) -> int:
        return self.shape.height

    def cell_points(self) -> List[Coordinate]:
        points: List[Coordinate] = []
        for local_y in range(self.height):
            for local_x in range(self.width):
                if self.shape.is_set(local_x, local_y):
                    points.append((self.x + local_x, self.y + local_y))
        return points

    def translate(self, dx: int, dy: int) -> "Figure":
        return Figure(self.x + dx, self.y + dy, self.shape.copy())

    def rotate(self) -> "Figure":
        shape = self.shape.copy()
        shape.rotate()
        return Figure(self.x, self.y, shape)

    def apply_intent(self, intent: MovementIntent) -> "Figure":
        moved = self.rotate() if intent.has_rotation else self
        return moved.translate(intent.delta_x, intent.delta_y)
