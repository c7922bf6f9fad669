from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class SeedingMode(str, Enum):
    """How much of the generated dataset is reproducible from the seed.

    ``partial`` seeds only the structural choices (city, cuisine, price level,
    names, menus) and leaves rating, location and the boolean flags on an
    unseeded source, so they change on every start. ``full`` seeds both.
    """

    partial = "partial"
    full = "full"


CITIES: tuple[str, ...] = ("Copenhagen", "Berlin", "Budapest", "Lisbon", "Tokyo")
CUISINES: tuple[str, ...] = (
    "Mexican",
    "Thai",
    "Japanese",
    "Korean",
    "Italian",
    "Indian",
    "Turkish",
    "Vietnamese",
    "Greek",
    "Hungarian",
)
PRICE_LEVELS: tuple[str, ...] = ("$", "$$", "$$$")


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Configuration for the vendor dataset generator.
    """

    seed: int = int(os.getenv("VENDOR_SEED", "42"))
    count: int = int(os.getenv("VENDOR_COUNT", "80"))
    seeding: SeedingMode = SeedingMode(os.getenv("VENDOR_SEEDING", "partial"))
    locale: str = "en_US"
    cities: tuple[str, ...] = CITIES
    cuisines: tuple[str, ...] = CUISINES
    price_levels: tuple[str, ...] = PRICE_LEVELS
    min_menu_items: int = 4
    max_menu_items: int = 10
    min_price: float = 5.0
    max_price: float = 20.0
    spicy_rate: float = 0.3
    vegan_rate: float = 0.4
    featured_rate: float = 0.15
    # Bounding box: [base, base + span) on each axis
    lat_base: float = 55.0
    lng_base: float = 12.0
    coordinate_span: float = 1.0
    thumbnail_template: str = "https://picsum.photos/seed/vendor-{id}/320/240"

    def thumbnail_url(self, vendor_id: str) -> str:
        return self.thumbnail_template.format(id=vendor_id)


DEFAULT_GENERATOR_CONFIG = GeneratorConfig()
