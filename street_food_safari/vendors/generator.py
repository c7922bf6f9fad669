from __future__ import annotations

import logging
import random

from faker import Faker

from .config import DEFAULT_GENERATOR_CONFIG, GeneratorConfig, SeedingMode
from .models import Location, MenuItem, Vendor

logger = logging.getLogger(__name__)

VENDOR_NOUNS: tuple[str, ...] = (
    "Kitchen",
    "Cart",
    "Shack",
    "Corner",
    "Stall",
    "Truck",
    "Bar",
    "Pantry",
    "Grill",
    "Express",
    "Canteen",
    "Wagon",
)

DISH_ADJECTIVES: tuple[str, ...] = (
    "Crispy",
    "Smoky",
    "Golden",
    "Tangy",
    "Fresh",
    "Hearty",
    "Sticky",
    "Zesty",
    "Roasted",
    "Classic",
    "Loaded",
    "Street-style",
)

DISHES: tuple[str, ...] = (
    "Bowl",
    "Wrap",
    "Dumplings",
    "Skewers",
    "Noodles",
    "Flatbread",
    "Salad",
    "Fritters",
    "Soup",
    "Tacos",
    "Bun",
    "Rice Plate",
    "Sandwich",
    "Platter",
)


def _validate(config: GeneratorConfig) -> None:
    if config.count < 0:
        raise ValueError(f"vendor count must be >= 0, got {config.count}")
    for label, values in (
        ("cities", config.cities),
        ("cuisines", config.cuisines),
        ("price_levels", config.price_levels),
    ):
        if not values:
            raise ValueError(f"generator needs at least one entry in {label}")
    if not 0 < config.min_menu_items <= config.max_menu_items:
        raise ValueError("menu size bounds must satisfy 0 < min <= max")


def _noise_source(config: GeneratorConfig) -> random.Random:
    """Random source for rating, location and the boolean flags."""
    if config.seeding is SeedingMode.full:
        return random.Random(config.seed)
    return random.Random()


def _product_name(fake: Faker) -> str:
    adjective = fake.random_element(DISH_ADJECTIVES)
    dish = fake.random_element(DISHES)
    return f"{adjective} {dish}"


def _build_menu(
    fake: Faker,
    noise: random.Random,
    vendor_number: int,
    cuisine: str,
    config: GeneratorConfig,
) -> tuple[MenuItem, ...]:
    size = fake.random_int(config.min_menu_items, config.max_menu_items)
    return tuple(
        MenuItem(
            id=f"{vendor_number}-{j + 1}",
            name=f"{cuisine} {_product_name(fake)}",
            price=round(fake.random.uniform(config.min_price, config.max_price), 2),
            spicy=noise.random() < config.spicy_rate,
            vegan=noise.random() < config.vegan_rate,
        )
        for j in range(size)
    )


def _build_vendor(
    fake: Faker,
    noise: random.Random,
    index: int,
    config: GeneratorConfig,
) -> Vendor:
    vendor_number = index + 1
    vendor_id = str(vendor_number)

    city = fake.random_element(config.cities)
    cuisine = fake.random_element(config.cuisines)
    rating = round(noise.uniform(3.0, 5.0), 1)
    menu = _build_menu(fake, noise, vendor_number, cuisine, config)

    return Vendor(
        id=vendor_id,
        name=f"{fake.first_name()}'s {cuisine} {fake.random_element(VENDOR_NOUNS)}",
        cuisine=cuisine,
        city=city,
        rating=rating,
        price_level=fake.random_element(config.price_levels),
        thumbnail=config.thumbnail_url(vendor_id),
        description=" ".join(fake.sentences(nb=fake.random_int(1, 2))),
        location=Location(
            lat=round(config.lat_base + noise.random() * config.coordinate_span, 5),
            lng=round(config.lng_base + noise.random() * config.coordinate_span, 5),
        ),
        menu=menu,
        is_featured=noise.random() < config.featured_rate,
        is_favorite=False,
    )


def generate_vendors(config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG) -> list[Vendor]:
    """
    Build the synthetic vendor dataset.

    Structural fields (city, cuisine, price level, names, menu sizes and
    prices, descriptions) are drawn from a Faker instance seeded with
    ``config.seed``. Rating, location and the spicy/vegan/featured flags are
    drawn from a second source whose seeding follows ``config.seeding``.

    Vendors are returned in index order with ids ``"1"``..``str(count)``.
    """
    _validate(config)

    fake = Faker(config.locale)
    fake.seed_instance(config.seed)
    noise = _noise_source(config)

    vendors = [_build_vendor(fake, noise, i, config) for i in range(config.count)]

    logger.info(
        "Generated %d vendors (seed=%s, seeding=%s)",
        len(vendors),
        config.seed,
        config.seeding.value,
    )
    return vendors
