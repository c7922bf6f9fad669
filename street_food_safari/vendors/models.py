from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for API records: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Location(CamelModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class MenuItem(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description='"<vendor index>-<item index>", both 1-based')
    name: str
    price: float = Field(..., ge=5.0, le=20.0)
    spicy: bool
    vegan: bool


class Vendor(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    cuisine: str
    city: str
    rating: float = Field(..., ge=3.0, le=5.0)
    price_level: str
    thumbnail: str
    description: str
    location: Location
    menu: tuple[MenuItem, ...]
    is_featured: bool = False
    is_favorite: bool = False


class VendorPage(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    data: list[Vendor]


class VendorMenu(CamelModel):
    vendor_id: str
    items: tuple[MenuItem, ...]


class FeaturedResponse(CamelModel):
    data: list[Vendor]


class VendorStats(CamelModel):
    total: int
    by_city: dict[str, int]
    by_cuisine: dict[str, int]


class FavoriteResponse(CamelModel):
    id: str
    is_favorite: bool


class SlowResponse(CamelModel):
    ok: bool = True
    delay_ms: int
    message: str
