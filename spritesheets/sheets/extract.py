# spritesheets/sheets/extract.py
from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from spritesheets.assets.types import PixelBuffer
from spritesheets.types import Rect


def extract_rectangle(
    data: bytes, row_width: int, pixel_size: int, rect: Rect
) -> bytes:
    """
    Copy the region `rect` out of a row-major buffer whose rows are
    `row_width` pixels wide. The result is tightly packed: its rows are
    `rect.width * pixel_size` bytes with no gaps.
    """
    if pixel_size <= 0:
        raise ValueError(f"pixel_size must be positive, got {pixel_size}")
    if row_width <= 0:
        raise ValueError(f"row_width must be positive, got {row_width}")

    row_bytes = row_width * pixel_size
    if len(data) % row_bytes:
        raise ValueError(
            f"Buffer of {len(data)} bytes is not a whole number of "
            f"{row_bytes}-byte rows"
        )
    if rect.right > row_width:
        raise IndexError(f"{rect} exceeds row width {row_width}")
    if rect.bottom * row_bytes > len(data):
        raise IndexError(f"{rect} exceeds buffer of {len(data) // row_bytes} rows")

    rows = np.frombuffer(data, dtype=np.uint8).reshape(-1, row_bytes)
    region = rows[
        rect.y : rect.bottom,
        rect.x * pixel_size : rect.right * pixel_size,
    ]
    return region.tobytes()


def split_image_by_rectangles(
    image: PixelBuffer, rectangles: Iterable[Rect]
) -> Iterator[PixelBuffer]:
    """Lazily slice `image` into one sub-image per rectangle, in order."""
    for rect in rectangles:
        if rect.bottom > image.height:
            raise IndexError(f"{rect} exceeds image height {image.height}")

        layers = [
            extract_rectangle(image.layer(i), image.width, image.pixel_size, rect)
            for i in range(image.depth)
        ]

        yield PixelBuffer(
            data=b"".join(layers),
            width=rect.width,
            height=rect.height,
            format=image.format,
            depth=image.depth,
        )
