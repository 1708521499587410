# spritesheets/assets/importers/base.py
from abc import ABC, abstractmethod
from pathlib import Path

from spritesheets.assets.types import PixelBuffer


class AssetImporter(ABC):
    """Decodes one image file into a PixelBuffer. Must be thread-safe."""

    @abstractmethod
    def import_file(self, path: Path) -> PixelBuffer: ...
