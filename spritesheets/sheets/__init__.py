from spritesheets.sheets.builder import (
    build_sprite_sheet,
    build_sprite_sheets,
    create_sprite_sheets,
    install_sprite_sheets,
)
from spritesheets.sheets.descriptor import SheetDescriptor
from spritesheets.sheets.extract import extract_rectangle, split_image_by_rectangles
from spritesheets.sheets.matching import (
    MatchedSheet,
    match_pairs,
    normalize_path,
    strip_descriptor_suffix,
    strip_extension,
)
from spritesheets.sheets.settings import DuplicateImagePolicy, SheetSettings
from spritesheets.sheets.sheet import SpriteSheet, SpriteSheets

__all__ = [
    "SheetDescriptor",
    "SheetSettings",
    "DuplicateImagePolicy",
    "MatchedSheet",
    "SpriteSheet",
    "SpriteSheets",
    "extract_rectangle",
    "split_image_by_rectangles",
    "match_pairs",
    "normalize_path",
    "strip_extension",
    "strip_descriptor_suffix",
    "build_sprite_sheet",
    "build_sprite_sheets",
    "create_sprite_sheets",
    "install_sprite_sheets",
]
