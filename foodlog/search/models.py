from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

DEFAULT_MAX_PRICE = 4
DEFAULT_MIN_RATING = 0.0
DEFAULT_MAX_DISTANCE = 15  # miles


class Coordinate(BaseModel):
    lat: float
    lng: float


class PlaceResult(BaseModel):
    """A restaurant as returned by the places search, before it is saved."""

    google_place_id: str | None = None
    name: str
    address: str = ""
    latitude: float | None = None
    longitude: float | None = None
    rating: float | None = None
    price_level: int | None = None
    image_url: str | None = None
    cuisine_type: str | None = None


class FilterSettings(BaseModel):
    max_price: int = Field(default=DEFAULT_MAX_PRICE, ge=1, le=4)
    min_rating: float = Field(default=DEFAULT_MIN_RATING, ge=0.0, le=5.0)
    max_distance: int = Field(
        default=DEFAULT_MAX_DISTANCE,
        ge=1,
        le=31,
        description="Miles; 31 stands for 30+",
    )


class SearchRequest(FilterSettings):
    # Left unconstrained so the normalizer can report its own reason codes.
    query: Any = None
    category: str | None = None
    location: Any = None


class FilterRequest(FilterSettings):
    restaurants: list[PlaceResult] = Field(default_factory=list)


class SearchResponse(BaseModel):
    restaurants: list[PlaceResult]
    total_results: int
    filters: FilterSettings
    filters_active: bool = False
