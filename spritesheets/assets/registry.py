# spritesheets/assets/registry.py
import threading
from typing import Dict, Optional

from spritesheets.assets.handle import AssetHandle, AssetId
from spritesheets.assets.types import PixelBuffer


class ImageStore:
    """
    Stores pixel buffers (CPU side) mapped by AssetId.
    Sheets built against a store hold handles instead of owning pixels.
    """

    def __init__(self) -> None:
        self._storage: Dict[AssetId, PixelBuffer] = {}
        self._next_id: int = 1
        self._lock = threading.Lock()

    def reserve(self) -> AssetId:
        """Allocate an id to be filled later with store()."""
        with self._lock:
            asset_id = AssetId(self._next_id)
            self._next_id += 1
        return asset_id

    def insert(self, image: PixelBuffer, path: str = "") -> AssetHandle[PixelBuffer]:
        """Add a new image and return a handle to it."""
        asset_id = self.reserve()
        with self._lock:
            self._storage[asset_id] = image
        return AssetHandle(asset_id, path)

    def store(self, asset_id: AssetId, image: PixelBuffer) -> None:
        """Register an image under an id chosen by the caller."""
        with self._lock:
            self._storage[asset_id] = image
            # ids handed out by insert() must never land on this one
            self._next_id = max(self._next_id, asset_id + 1)

    def get(self, handle: AssetHandle[PixelBuffer]) -> PixelBuffer:
        """Retrieve the image behind a handle. Raises KeyError if missing."""
        try:
            return self._storage[handle.id]
        except KeyError:
            raise KeyError(f"Image {handle} not found")

    def try_get(self, asset_id: AssetId) -> Optional[PixelBuffer]:
        return self._storage.get(asset_id)

    def __contains__(self, asset_id: AssetId) -> bool:
        return asset_id in self._storage

    def __len__(self) -> int:
        return len(self._storage)
