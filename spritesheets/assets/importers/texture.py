# spritesheets/assets/importers/texture.py
from pathlib import Path

from PIL import Image

from spritesheets.assets.importers.base import AssetImporter
from spritesheets.assets.types import PixelBuffer, PixelFormat


class TextureImporter(AssetImporter):
    def import_file(self, path: Path) -> PixelBuffer:
        with Image.open(path) as img:
            converted = img.convert("RGBA")

            width, height = converted.size
            data = converted.tobytes()

        return PixelBuffer(
            data=data, width=width, height=height, format=PixelFormat.RGBA8
        )
