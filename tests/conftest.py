import pytest

from spritesheets.assets.types import PixelBuffer, PixelFormat


def make_coordinate_atlas(width: int, height: int) -> PixelBuffer:
    """RG8 atlas whose pixel at (x, y) holds the bytes (x, y)."""
    data = bytes(v for y in range(height) for x in range(width) for v in (x, y))
    return PixelBuffer(data=data, width=width, height=height, format=PixelFormat.RG8)


@pytest.fixture
def atlas():
    """A 16x8 coordinate-encoded atlas."""
    return make_coordinate_atlas(16, 8)


@pytest.fixture
def tiny_atlas():
    """The 4x2, one byte per pixel atlas [0..7]."""
    return PixelBuffer(data=bytes(range(8)), width=4, height=2, format=PixelFormat.R8)
