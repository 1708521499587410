# spritesheets/sheets/matching.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from spritesheets.assets.types import PixelBuffer
from spritesheets.sheets.descriptor import SheetDescriptor
from spritesheets.sheets.settings import DuplicateImagePolicy, SheetSettings
from spritesheets.types import SheetPath

logger = logging.getLogger(__name__)


class MatchedSheet(NamedTuple):
    path: SheetPath
    descriptor: SheetDescriptor
    image: PixelBuffer


def normalize_path(path: str) -> str:
    """Unify separators to '/' and drop leading './' segments."""
    path = path.replace("\\", "/")
    while path.startswith("./"):
        path = path[2:]
    return path


def strip_extension(path: str) -> SheetPath:
    """Drop everything from the first '.' of the file name."""
    path = normalize_path(path)
    head, sep, name = path.rpartition("/")
    stem = name.split(".", 1)[0]
    return SheetPath(head + sep + stem)


def strip_descriptor_suffix(path: str, suffixes: Sequence[str]) -> SheetPath:
    path = normalize_path(path)
    # longest first, so ".aseprite.json" wins over ".json"
    for suffix in sorted(suffixes, key=len, reverse=True):
        if path.endswith(suffix):
            return SheetPath(path[: -len(suffix)])
    return strip_extension(path)


def _index_images(
    images: Iterable[Tuple[Optional[str], PixelBuffer]],
    policy: DuplicateImagePolicy,
) -> Dict[SheetPath, Tuple[str, PixelBuffer]]:
    index: Dict[SheetPath, Tuple[str, PixelBuffer]] = {}
    for source, image in images:
        # Some stores report entries with no path at all
        if not source:
            logger.debug("Skipping image without a path")
            continue

        key = strip_extension(source)
        if key in index:
            first = index[key][0]
            if policy is DuplicateImagePolicy.ERROR:
                raise ValueError(
                    f"Images '{first}' and '{source}' both resolve to '{key}'"
                )
            logger.warning(
                "Images '%s' and '%s' both resolve to '%s', keeping '%s'",
                first,
                source,
                key,
                first,
            )
            continue

        index[key] = (source, image)
    return index


def match_pairs(
    descriptors: Iterable[Tuple[Optional[str], SheetDescriptor]],
    images: Iterable[Tuple[Optional[str], PixelBuffer]],
    settings: Optional[SheetSettings] = None,
) -> List[MatchedSheet]:
    """
    Pair every descriptor with the image sharing its path stem.
    Unmatched descriptors and images are left out. Output follows
    descriptor order.
    """
    settings = settings or SheetSettings()
    index = _index_images(images, settings.duplicate_images)

    matched: List[MatchedSheet] = []
    used = set()
    for source, descriptor in descriptors:
        if not source:
            logger.debug("Skipping descriptor without a path")
            continue

        key = strip_descriptor_suffix(source, settings.descriptor_suffixes)
        entry = index.get(key)
        if entry is None:
            logger.debug("No image found for descriptor '%s'", source)
            continue

        used.add(key)
        matched.append(MatchedSheet(key, descriptor, entry[1]))

    for key in index.keys() - used:
        logger.debug("No descriptor found for image '%s'", index[key][0])

    return matched
