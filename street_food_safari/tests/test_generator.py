from __future__ import annotations

import pytest

from street_food_safari.vendors.config import (
    CITIES,
    CUISINES,
    PRICE_LEVELS,
    GeneratorConfig,
    SeedingMode,
)
from street_food_safari.vendors.generator import generate_vendors

FULL = GeneratorConfig(seed=42, count=80, seeding=SeedingMode.full)
PARTIAL = GeneratorConfig(seed=42, count=80, seeding=SeedingMode.partial)


def _structure(vendors):
    """Fields drawn from the seeded Faker source."""
    return [
        (
            v.id,
            v.name,
            v.city,
            v.cuisine,
            v.price_level,
            v.description,
            [(m.id, m.name, m.price) for m in v.menu],
        )
        for v in vendors
    ]


def _noise(vendors):
    """Fields drawn from the secondary source."""
    return [
        (
            v.rating,
            v.location.lat,
            v.location.lng,
            v.is_featured,
            [(m.spicy, m.vegan) for m in v.menu],
        )
        for v in vendors
    ]


def test_generates_requested_count_with_sequential_ids():
    vendors = generate_vendors(FULL)
    assert len(vendors) == 80
    assert [v.id for v in vendors] == [str(i) for i in range(1, 81)]


def test_vendor_fields_within_ranges():
    for v in generate_vendors(FULL):
        assert v.city in CITIES
        assert v.cuisine in CUISINES
        assert v.price_level in PRICE_LEVELS
        assert 3.0 <= v.rating <= 5.0
        assert round(v.rating, 1) == v.rating
        assert 55.0 <= v.location.lat < 56.0
        assert 12.0 <= v.location.lng < 13.0
        assert v.thumbnail == f"https://picsum.photos/seed/vendor-{v.id}/320/240"
        assert v.cuisine in v.name
        assert v.description
        assert v.is_favorite is False


def test_menu_items_within_ranges():
    for v in generate_vendors(FULL):
        assert 4 <= len(v.menu) <= 10
        assert [m.id for m in v.menu] == [f"{v.id}-{j}" for j in range(1, len(v.menu) + 1)]
        for item in v.menu:
            assert item.name.startswith(f"{v.cuisine} ")
            assert 5.0 <= item.price <= 20.0
            assert round(item.price, 2) == item.price


def test_some_but_not_all_vendors_featured():
    featured = [v for v in generate_vendors(FULL) if v.is_featured]
    assert 0 < len(featured) < 80


def test_full_seeding_reproduces_entire_dataset():
    first = [v.model_dump() for v in generate_vendors(FULL)]
    second = [v.model_dump() for v in generate_vendors(FULL)]
    assert first == second


def test_partial_seeding_reproduces_structure_only():
    first = generate_vendors(PARTIAL)
    second = generate_vendors(PARTIAL)
    assert _structure(first) == _structure(second)
    # Rating, location and flags come from an unseeded source
    assert _noise(first) != _noise(second)


def test_partial_and_full_share_structure_for_same_seed():
    assert _structure(generate_vendors(PARTIAL)) == _structure(generate_vendors(FULL))


def test_different_seeds_give_different_structure():
    other = GeneratorConfig(seed=7, count=80, seeding=SeedingMode.full)
    assert _structure(generate_vendors(FULL)) != _structure(generate_vendors(other))


def test_zero_count_yields_empty_dataset():
    assert generate_vendors(GeneratorConfig(count=0)) == []


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        generate_vendors(GeneratorConfig(count=-1))


def test_empty_enumeration_rejected():
    with pytest.raises(ValueError):
        generate_vendors(GeneratorConfig(cities=()))
