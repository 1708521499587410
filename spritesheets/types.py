# spritesheets/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

SheetPath = NewType("SheetPath", str)  # normalized, no file extension


@dataclass(frozen=True, slots=True)
class Position:
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Rect:
    """Region of a source image, in source pixel coordinates."""

    position: Position
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.position.x < 0 or self.position.y < 0:
            raise ValueError(f"Rect position must be non-negative: {self.position}")
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect size must be non-negative: {self.width}x{self.height}"
            )

    @staticmethod
    def from_xywh(x: int, y: int, width: int, height: int) -> Rect:
        return Rect(Position(x, y), width, height)

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    @property
    def right(self) -> int:
        return self.position.x + self.width

    @property
    def bottom(self) -> int:
        return self.position.y + self.height
