from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from .config import DEFAULT_GENERATOR_CONFIG, GeneratorConfig
from .generator import generate_vendors
from .models import Vendor, VendorMenu, VendorStats

logger = logging.getLogger(__name__)


class VendorNotFoundError(LookupError):
    """Raised when no vendor carries the requested id."""

    def __init__(self, vendor_id: str) -> None:
        super().__init__(f"Vendor {vendor_id!r} not found")
        self.vendor_id = vendor_id


class VendorStore:
    """Owns the vendor dataset for one application instance.

    Records are frozen models kept in a list in generation order. The only
    write path is :meth:`toggle_favorite`, which swaps a single slot for a
    copy with the flag flipped, so readers always see a complete record.
    """

    def __init__(
        self,
        vendors: Iterable[Vendor],
        cities: Iterable[str] = (),
        cuisines: Iterable[str] = (),
    ) -> None:
        self._vendors: list[Vendor] = list(vendors)
        self._positions: dict[str, int] = {}
        for pos, vendor in enumerate(self._vendors):
            if vendor.id in self._positions:
                raise ValueError(f"duplicate vendor id {vendor.id!r}")
            self._positions[vendor.id] = pos
        self.cities: tuple[str, ...] = tuple(cities)
        self.cuisines: tuple[str, ...] = tuple(cuisines)

    @classmethod
    def generate(cls, config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG) -> VendorStore:
        return cls(generate_vendors(config), cities=config.cities, cuisines=config.cuisines)

    def __len__(self) -> int:
        return len(self._vendors)

    def all(self) -> list[Vendor]:
        return list(self._vendors)

    def get(self, vendor_id: str) -> Vendor:
        pos = self._positions.get(vendor_id)
        if pos is None:
            raise VendorNotFoundError(vendor_id)
        return self._vendors[pos]

    def menu(self, vendor_id: str) -> VendorMenu:
        vendor = self.get(vendor_id)
        return VendorMenu(vendor_id=vendor.id, items=vendor.menu)

    def filter(self, city: str | None = None, cuisine: str | None = None) -> list[Vendor]:
        """Vendors whose city and cuisine equal the given values, ignoring case.

        Missing or empty filters match everything.
        """
        city_lower = city.lower() if city else None
        cuisine_lower = cuisine.lower() if cuisine else None
        return [
            v
            for v in self._vendors
            if (city_lower is None or v.city.lower() == city_lower)
            and (cuisine_lower is None or v.cuisine.lower() == cuisine_lower)
        ]

    def search(self, query: str | None) -> list[Vendor]:
        q = (query or "").strip().lower()
        if not q:
            return []
        return [
            v
            for v in self._vendors
            if q in v.name.lower() or q in v.cuisine.lower() or q in v.city.lower()
        ]

    def featured(self) -> list[Vendor]:
        return [v for v in self._vendors if v.is_featured]

    def stats(self) -> VendorStats:
        # Exact-match counts; known values absent from the data report 0
        city_counter = Counter(v.city for v in self._vendors)
        cuisine_counter = Counter(v.cuisine for v in self._vendors)
        return VendorStats(
            total=len(self._vendors),
            by_city={c: city_counter[c] for c in self.cities},
            by_cuisine={c: cuisine_counter[c] for c in self.cuisines},
        )

    def toggle_favorite(self, vendor_id: str) -> bool:
        """Flip ``is_favorite`` for *vendor_id* and return the new value."""
        pos = self._positions.get(vendor_id)
        if pos is None:
            raise VendorNotFoundError(vendor_id)
        current = self._vendors[pos]
        updated = current.model_copy(update={"is_favorite": not current.is_favorite})
        self._vendors[pos] = updated
        logger.debug("Vendor %s favorite -> %s", vendor_id, updated.is_favorite)
        return updated.is_favorite
