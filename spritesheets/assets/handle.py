# spritesheets/assets/handle.py
from dataclasses import dataclass
from typing import Generic, NewType, TypeVar

AssetId = NewType("AssetId", int)  # unique per store
T = TypeVar("T")


@dataclass(frozen=True)
class AssetHandle(Generic[T]):
    """
    Reference to an image owned by an ImageStore or AssetServer.
    `path` is informational: the source file, or "<sheet>#<frame>" for
    frames inserted while building sheets.
    """

    id: AssetId
    path: str

    def __str__(self) -> str:
        return f"{self.path or '<anonymous>'} ({self.id})"
