from spritesheets.assets.handle import AssetHandle, AssetId
from spritesheets.assets.registry import ImageStore
from spritesheets.assets.server import AssetServer
from spritesheets.assets.types import PixelBuffer, PixelFormat

__all__ = [
    "AssetServer",
    "AssetHandle",
    "AssetId",
    "ImageStore",
    "PixelBuffer",
    "PixelFormat",
]
