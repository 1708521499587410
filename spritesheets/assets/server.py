# spritesheets/assets/server.py
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import wait as wait_futures
from pathlib import Path
from queue import Queue
from typing import Dict, Iterator, List, Optional, Set, Tuple

from spritesheets.assets.handle import AssetHandle, AssetId
from spritesheets.assets.importers.base import AssetImporter
from spritesheets.assets.importers.texture import TextureImporter
from spritesheets.assets.registry import ImageStore
from spritesheets.assets.types import PixelBuffer

logger = logging.getLogger(__name__)


class AssetServer:
    """
    Loads atlas images from disk in the background and remembers the
    logical path each one was requested under.
    """

    def __init__(self, asset_root: Path, max_workers: int = 2) -> None:
        self.root = asset_root
        self.store = ImageStore()

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="AssetWorker"
        )
        self._loaded_queue: Queue = Queue()
        self._pending: Set[Future] = set()

        self._handles: Dict[str, AssetHandle] = {}  # Path -> Handle
        self._paths: Dict[AssetId, str] = {}  # Id -> Path

        self._importers: Dict[str, AssetImporter] = {
            ".png": TextureImporter(),
            ".jpg": TextureImporter(),
            ".jpeg": TextureImporter(),
            ".bmp": TextureImporter(),
            ".gif": TextureImporter(),
        }

    def load(self, path: str) -> AssetHandle[PixelBuffer]:
        """
        Non-blocking load request. Return handle instantly.
        """
        if path in self._handles:
            return self._handles[path]

        # Ids come from the store so frames inserted later cannot reuse them
        asset_id = self.store.reserve()
        full_path = self.root / path
        future = self._executor.submit(self._worker_load, asset_id, full_path)
        self._pending.add(future)

        handle: AssetHandle[PixelBuffer] = AssetHandle(asset_id, path)
        self._handles[path] = handle
        self._paths[asset_id] = path

        return handle

    def _worker_load(self, asset_id: AssetId, full_path: Path) -> None:
        """
        Load asset on background thread.
        """
        try:
            ext = full_path.suffix.lower()
            importer = self._importers.get(ext)
            if not importer:
                raise ValueError(f"No importer for {ext}")

            data = importer.import_file(full_path)
            self._loaded_queue.put((asset_id, data))
        except Exception:
            logger.exception("Failed to load %s", full_path)

    def wait(self) -> None:
        """Block until every load requested so far has finished."""
        pending, self._pending = self._pending, set()
        wait_futures(pending)

    def shutdown(self) -> None:
        """Finish outstanding loads and stop the worker threads."""
        self._executor.shutdown(wait=True)

    def update(self) -> List[AssetId]:
        """
        Move finished loads into the store.
        Return list of newly loaded AssetIds.
        """
        loaded_ids = []
        while not self._loaded_queue.empty():
            asset_id, data = self._loaded_queue.get()
            self.store.store(asset_id, data)
            loaded_ids.append(asset_id)

        return loaded_ids

    def get_path(self, asset_id: AssetId) -> Optional[str]:
        return self._paths.get(asset_id)

    def loaded_images(self) -> Iterator[Tuple[Optional[str], PixelBuffer]]:
        """Yield (path, image) for every image currently in the store."""
        for asset_id in sorted(self._paths):
            image = self.store.try_get(asset_id)
            if image is not None:
                yield self._paths[asset_id], image
