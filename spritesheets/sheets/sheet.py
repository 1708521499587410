# spritesheets/sheets/sheet.py
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from spritesheets.assets.handle import AssetHandle
from spritesheets.assets.types import PixelBuffer
from spritesheets.sheets.matching import normalize_path

Frame = Union[PixelBuffer, AssetHandle]


class SpriteSheet:
    """Ordered frames cut from one atlas image."""

    __slots__ = ("_frames",)

    def __init__(self, frames: Iterable[Frame]) -> None:
        self._frames: Tuple[Frame, ...] = tuple(frames)

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return self._frames

    def image_at(self, index: int) -> Frame:
        if not 0 <= index < len(self._frames):
            raise IndexError(
                f"Frame {index} out of range for sheet of {len(self._frames)}"
            )
        return self._frames[index]

    def images_at(self, indices: Iterable[int]) -> List[Frame]:
        """Frames for each index in the given order; repeats are allowed."""
        return [self.image_at(i) for i in indices]

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self._frames)

    def __repr__(self) -> str:
        return f"SpriteSheet(frames={len(self._frames)})"


class SpriteSheets:
    """
    Collection of all built sprite sheets, keyed by path without file
    ending. Read-only once constructed.
    """

    __slots__ = ("_sheets",)

    def __init__(self, paths_and_sheets: Iterable[Tuple[str, SpriteSheet]]) -> None:
        sheets: Dict[str, SpriteSheet] = {}
        for path, sheet in paths_and_sheets:
            if path in sheets:
                raise KeyError(f"Sprite sheet '{path}' already exists")
            sheets[path] = sheet
        self._sheets = MappingProxyType(sheets)

    def get_sheet(self, path: str) -> SpriteSheet:
        """
        Return the sheet for `path`.

        The path has no file ending: an atlas "animation/walk.png" described
        by "animation/walk.aseprite.json" is looked up as "animation/walk".
        """
        sheet = self._sheets.get(normalize_path(path))
        if sheet is None:
            raise KeyError(f"sprite sheet '{path}' was not loaded")
        return sheet

    def try_sheet(self, path: str) -> Optional[SpriteSheet]:
        return self._sheets.get(normalize_path(path))

    def paths(self) -> List[str]:
        return list(self._sheets)

    def items(self) -> Iterable[Tuple[str, SpriteSheet]]:
        return self._sheets.items()

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and normalize_path(path) in self._sheets

    def __len__(self) -> int:
        return len(self._sheets)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sheets)
