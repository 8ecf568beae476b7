from __future__ import annotations


class FallingBlocksError(Exception):
    """Base class for engine precondition violations."""


class OutOfBounds(FallingBlocksError, IndexError):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"out of bounds: ({x}, {y})")
        self.x = x
        self.y = y


class InvalidRotation(FallingBlocksError, ValueError):
    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"cannot rotate a {width}x{height} grid, it must be square")
        self.width = width
        self.height = height
