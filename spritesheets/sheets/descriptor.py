# spritesheets/sheets/descriptor.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from spritesheets.types import Rect


@dataclass(frozen=True, slots=True)
class SheetDescriptor:
    """Where each frame of an atlas lies. Order defines frame indices."""

    rects: Tuple[Rect, ...]

    @staticmethod
    def of(rects: Iterable[Rect]) -> SheetDescriptor:
        return SheetDescriptor(tuple(rects))

    def rect_iter(self) -> Iterator[Rect]:
        return iter(self.rects)

    def __len__(self) -> int:
        return len(self.rects)
