from __future__ import annotations

from typing import Iterable, Iterator, Sequence, Tuple

from .grid import Grid


OCCUPIED = "x"


def parse_shape(text: str) -> Grid:
    """Build a grid from ASCII art.

    Lines are stripped and blank lines dropped. The last line becomes row 0,
    the width is the longest line, and only ``x`` marks an occupied cell, so
    cells past the end of a short line stay empty.
    """
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise ValueError("shape text has no rows")
    width = max(len(line) for line in lines)
    grid = Grid(width, len(lines))
    for y, line in enumerate(reversed(lines)):
        for x, char in enumerate(line):
            if char == OCCUPIED:
                grid.set(x, y)
    return grid


class ShapeLibrary(Sequence[Grid]):
    """Immutable ordered collection of piece shapes.

    Every shape must be square so that figures built from it can rotate, and
    must occupy at least one cell. Callers receive copies, never the stored
    grids.
    """

    def __init__(self, shapes: Iterable[Grid]) -> None:
        stored = []
        for index, shape in enumerate(shapes):
            if shape.width != shape.height:
                raise ValueError(f"shape {index} is {shape.width}x{shape.height}, expected a square")
            if shape.count() == 0:
                raise ValueError(f"shape {index} has no occupied cells")
            stored.append(shape.copy())
        if not stored:
            raise ValueError("shape library is empty")
        self._shapes: Tuple[Grid, ...] = tuple(stored)

    @classmethod
    def from_text(cls, blocks: Iterable[str]) -> "ShapeLibrary":
        return cls(parse_shape(block) for block in blocks)

    def __getitem__(self, index):  # type: ignore[override]
        if isinstance(index, slice):
            return tuple(shape.copy() for shape in self._shapes[index])
        return self._shapes[index].copy()

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Grid]:
        for shape in self._shapes:
            yield shape.copy()


T_PIECE = """
    ooooo
    ooxoo
    oxxxo
    ooooo
    ooooo
"""

TETROMINOES = {
    "I": """
        oooo
        xxxx
        oooo
        oooo
    """,
    "O": """
        xx
        xx
    """,
    "T": """
        oxo
        xxx
        ooo
    """,
    "S": """
        oxx
        xxo
        ooo
    """,
    "Z": """
        xxo
        oxx
        ooo
    """,
    "J": """
        xoo
        xxx
        ooo
    """,
    "L": """
        oox
        xxx
        ooo
    """,
}


def default_shapes() -> ShapeLibrary:
    return ShapeLibrary.from_text([T_PIECE, *TETROMINOES.values()])
