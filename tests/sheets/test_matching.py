import logging

import pytest

from spritesheets.sheets.descriptor import SheetDescriptor
from spritesheets.sheets.matching import (
    match_pairs,
    normalize_path,
    strip_descriptor_suffix,
    strip_extension,
)
from spritesheets.sheets.settings import DuplicateImagePolicy, SheetSettings
from spritesheets.types import Rect
from tests.conftest import make_coordinate_atlas

DESC = SheetDescriptor.of([Rect.from_xywh(0, 0, 1, 1)])


def test_normalize_path():
    assert normalize_path("sprites\\hero") == "sprites/hero"
    assert normalize_path("./sprites/hero") == "sprites/hero"
    assert normalize_path("sprites/hero") == "sprites/hero"


def test_strip_extension_keeps_dotted_directories():
    assert strip_extension("v1.2/hero.png") == "v1.2/hero"
    assert strip_extension("hero.tar.png") == "hero"
    assert strip_extension("hero") == "hero"


def test_strip_descriptor_suffix():
    suffixes = (".aseprite.json", ".json")
    assert strip_descriptor_suffix("a\\hero.aseprite.json", suffixes) == "a/hero"
    assert strip_descriptor_suffix("a/hero.json", suffixes) == "a/hero"
    assert strip_descriptor_suffix("a/hero.sheet.yaml", suffixes) == "a/hero"


def test_match_by_stem(atlas):
    matched = match_pairs([("sprites/hero.aseprite.json", DESC)], [("sprites/hero.png", atlas)])

    assert len(matched) == 1
    assert matched[0].path == "sprites/hero"
    assert matched[0].descriptor is DESC
    assert matched[0].image is atlas


@pytest.mark.parametrize(
    "descriptor_path, image_path",
    [
        ("sprites/hero.aseprite.json", "sprites\\hero.png"),
        ("sprites\\hero.aseprite.json", "sprites/hero.png"),
        ("sprites/hero.json", "sprites/hero.png"),
        ("sprites\\hero.json", "sprites\\hero.bmp"),
    ],
)
def test_match_ignores_separator_and_suffix(atlas, descriptor_path, image_path):
    matched = match_pairs([(descriptor_path, DESC)], [(image_path, atlas)])

    assert [m.path for m in matched] == ["sprites/hero"]


def test_custom_descriptor_suffix(atlas):
    settings = SheetSettings(descriptor_suffixes=(".frames.txt",))
    matched = match_pairs(
        [("hero.frames.txt", DESC)], [("hero.png", atlas)], settings
    )

    assert [m.path for m in matched] == ["hero"]


def test_unmatched_entries_are_excluded(atlas):
    matched = match_pairs(
        [("a.aseprite.json", DESC), ("b.aseprite.json", DESC)],
        [("b.png", atlas), ("c.png", atlas)],
    )

    assert [m.path for m in matched] == ["b"]


def test_pathless_entries_are_skipped(atlas):
    matched = match_pairs(
        [(None, DESC), ("", DESC), ("hero.aseprite.json", DESC)],
        [(None, atlas), ("hero.png", atlas)],
    )

    assert [m.path for m in matched] == ["hero"]


def test_duplicate_image_keeps_first(caplog):
    first = make_coordinate_atlas(2, 2)
    second = make_coordinate_atlas(3, 3)

    with caplog.at_level(logging.WARNING):
        matched = match_pairs(
            [("hero.aseprite.json", DESC)],
            [("hero.png", first), ("hero.jpg", second)],
        )

    assert matched[0].image is first
    assert "hero.jpg" in caplog.text


def test_duplicate_image_error_policy(atlas):
    settings = SheetSettings(duplicate_images=DuplicateImagePolicy.ERROR)

    with pytest.raises(ValueError, match="hero"):
        match_pairs(
            [("hero.aseprite.json", DESC)],
            [("hero.png", atlas), ("hero.jpg", atlas)],
            settings,
        )


def test_output_follows_descriptor_order(atlas):
    matched = match_pairs(
        [("c.json", DESC), ("a.json", DESC), ("b.json", DESC)],
        [("a.png", atlas), ("b.png", atlas), ("c.png", atlas)],
    )

    assert [m.path for m in matched] == ["c", "a", "b"]


def test_longest_descriptor_suffix_wins(atlas):
    settings = SheetSettings(descriptor_suffixes=(".json", ".aseprite.json"))

    assert strip_descriptor_suffix("hero.aseprite.json", settings.descriptor_suffixes) == "hero"
    matched = match_pairs([("hero.aseprite.json", DESC)], [("hero.png", atlas)], settings)
    assert [m.path for m in matched] == ["hero"]
