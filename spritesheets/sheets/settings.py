# spritesheets/sheets/settings.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class DuplicateImagePolicy(str, Enum):
    """What to do when two images normalize to the same path."""

    FIRST = "first"  # keep the first one in input order
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class SheetSettings:
    """Matching and build configuration."""

    descriptor_suffixes: Tuple[str, ...] = (".aseprite.json", ".json")
    duplicate_images: DuplicateImagePolicy = DuplicateImagePolicy.FIRST
    max_workers: int = 1

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        for suffix in self.descriptor_suffixes:
            if not suffix.startswith("."):
                raise ValueError(f"Descriptor suffix must start with '.': {suffix}")
