# spritesheets/assets/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

import numpy as np


class PixelFormat(StrEnum):
    """Fixed-size-per-pixel formats. Slicing only cares about the byte size."""

    R8 = "r8"
    RG8 = "rg8"
    RGB8 = "rgb8"
    RGBA8 = "rgba8"
    RGBA16F = "rgba16f"
    RGBA32F = "rgba32f"

    @property
    def pixel_size(self) -> int:
        return _PIXEL_SIZES[self]


_PIXEL_SIZES = {
    PixelFormat.R8: 1,
    PixelFormat.RG8: 2,
    PixelFormat.RGB8: 3,
    PixelFormat.RGBA8: 4,
    PixelFormat.RGBA16F: 8,
    PixelFormat.RGBA32F: 16,
}


@dataclass(frozen=True, slots=True)
class PixelBuffer:
    """Raw, row-major, tightly packed image data and metadata."""

    data: bytes
    width: int
    height: int
    format: PixelFormat
    depth: int = 1  # array layers, stored one after another

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or self.depth < 1:
            raise ValueError(
                f"Invalid extent {self.width}x{self.height}x{self.depth}"
            )
        expected = self.layer_bytes * self.depth
        if len(self.data) != expected:
            raise ValueError(
                f"Buffer holds {len(self.data)} bytes, "
                f"expected {expected} for {self.width}x{self.height}x{self.depth} "
                f"{self.format}"
            )

    @property
    def pixel_size(self) -> int:
        return self.format.pixel_size

    @property
    def row_bytes(self) -> int:
        return self.width * self.format.pixel_size

    @property
    def layer_bytes(self) -> int:
        return self.row_bytes * self.height

    def layer(self, index: int) -> bytes:
        if not 0 <= index < self.depth:
            raise IndexError(f"Layer {index} out of range for depth {self.depth}")
        start = index * self.layer_bytes
        return self.data[start : start + self.layer_bytes]

    def to_array(self) -> np.ndarray:
        """View as uint8 array shaped (depth, height, width, pixel_size)."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.depth, self.height, self.width, self.pixel_size
        )
