# spritesheets/sheets/builder.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Tuple

from spritesheets.assets.registry import ImageStore
from spritesheets.assets.types import PixelBuffer
from spritesheets.core.resources import ResourceManager
from spritesheets.sheets.descriptor import SheetDescriptor
from spritesheets.sheets.extract import split_image_by_rectangles
from spritesheets.sheets.matching import MatchedSheet, match_pairs, normalize_path
from spritesheets.sheets.settings import SheetSettings
from spritesheets.sheets.sheet import SpriteSheet, SpriteSheets

logger = logging.getLogger(__name__)


def build_sprite_sheet(
    descriptor: SheetDescriptor,
    image: PixelBuffer,
    store: Optional[ImageStore] = None,
    path: str = "",
) -> SpriteSheet:
    """Slice one atlas. With a store, the sheet holds handles into it."""
    frames = split_image_by_rectangles(image, descriptor.rect_iter())
    if store is None:
        return SpriteSheet(frames)

    return SpriteSheet(
        store.insert(frame, f"{path}#{i}") for i, frame in enumerate(frames)
    )


def build_sprite_sheets(
    triples: Iterable[MatchedSheet],
    store: Optional[ImageStore] = None,
    settings: Optional[SheetSettings] = None,
) -> SpriteSheets:
    settings = settings or SheetSettings()
    triples = list(triples)

    seen = set()
    for triple in triples:
        path = normalize_path(triple.path)
        if path in seen:
            raise KeyError(f"Sprite sheet '{path}' already exists")
        seen.add(path)

    def build(triple: MatchedSheet) -> Tuple[str, SpriteSheet]:
        sheet = build_sprite_sheet(triple.descriptor, triple.image, store, triple.path)
        return normalize_path(triple.path), sheet

    if settings.max_workers > 1 and len(triples) > 1:
        with ThreadPoolExecutor(
            max_workers=settings.max_workers, thread_name_prefix="SheetWorker"
        ) as executor:
            # map() yields in submission order and re-raises the first failure
            built: List[Tuple[str, SpriteSheet]] = list(executor.map(build, triples))
    else:
        built = [build(t) for t in triples]

    return SpriteSheets(built)


def create_sprite_sheets(
    descriptors: Iterable[Tuple[Optional[str], SheetDescriptor]],
    images: Iterable[Tuple[Optional[str], PixelBuffer]],
    store: Optional[ImageStore] = None,
    settings: Optional[SheetSettings] = None,
) -> SpriteSheets:
    """Match descriptors to their atlas images and slice every pair."""
    settings = settings or SheetSettings()
    triples = match_pairs(descriptors, images, settings)
    sheets = build_sprite_sheets(triples, store, settings)

    logger.info(
        "Built %d sprite sheets (%d frames)",
        len(sheets),
        sum(len(sheet) for _, sheet in sheets.items()),
    )
    return sheets


def install_sprite_sheets(
    resources: ResourceManager,
    descriptors: Iterable[Tuple[Optional[str], SheetDescriptor]],
    images: Iterable[Tuple[Optional[str], PixelBuffer]],
    store: Optional[ImageStore] = None,
    settings: Optional[SheetSettings] = None,
) -> SpriteSheets:
    """Build the sheets once and publish them as a shared resource."""
    if SpriteSheets in resources:
        raise RuntimeError("SpriteSheets have already been installed")

    sheets = create_sprite_sheets(descriptors, images, store, settings)
    resources.add(sheets)
    return sheets
