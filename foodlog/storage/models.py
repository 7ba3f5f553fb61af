from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from ..search.models import PlaceResult

MAX_PHOTOS = 5
LIST_COLORS = [
    "#ff6b9d", "#ff8e53", "#ffbe0b", "#8ecae6",
    "#219ebc", "#023047", "#fb8500", "#8b5cf6",
]


class Restaurant(BaseModel):
    id: str
    name: str
    address: str = ""
    latitude: float | None = None
    longitude: float | None = None
    rating: float | None = None
    price_level: int | None = None
    cuisine_type: str | None = None
    image_url: str | None = None
    google_place_id: str | None = None
    created_at: datetime


class CheckIn(BaseModel):
    id: str
    user_id: str
    restaurant_id: str
    visited_at: datetime
    notes: str | None = None
    rating: int | None = None
    photos: list[str] = Field(default_factory=list)
    created_at: datetime


class CheckInOut(CheckIn):
    restaurant: Restaurant


class CheckInCreate(BaseModel):
    restaurant_id: str | None = None
    restaurant: PlaceResult | None = None
    visited_at: datetime | None = None
    notes: str | None = Field(default=None, max_length=2000)
    rating: int | None = Field(default=None, ge=1, le=5)
    photos: list[str] = Field(default_factory=list, max_length=MAX_PHOTOS)

    @model_validator(mode="after")
    def _needs_restaurant(self) -> CheckInCreate:
        if not self.restaurant_id and self.restaurant is None:
            raise ValueError("restaurant_id or restaurant is required")
        return self


class CheckInUpdate(BaseModel):
    notes: str | None = Field(default=None, max_length=2000)
    rating: int | None = Field(default=None, ge=1, le=5)
    photos: list[str] | None = Field(default=None, max_length=MAX_PHOTOS)


class RestaurantList(BaseModel):
    id: str
    user_id: str
    name: str
    description: str | None = None
    color_theme: str = LIST_COLORS[0]
    is_public: bool = False
    created_at: datetime


class ListSummary(RestaurantList):
    restaurant_count: int = 0


class ListDetail(RestaurantList):
    restaurants: list[Restaurant] = Field(default_factory=list)


class ListCreate(BaseModel):
    name: str = Field(..., max_length=100)
    description: str | None = Field(default=None, max_length=500)
    color_theme: str = Field(default=LIST_COLORS[0], pattern=r"^#[0-9a-fA-F]{6}$")
    is_public: bool = False

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("List name cannot be empty")
        return v.strip()


class ListUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    color_theme: str | None = Field(default=None, pattern=r"^#[0-9a-fA-F]{6}$")
    is_public: bool | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("List name cannot be empty")
        return v.strip() if v is not None else v


class AddToListRequest(BaseModel):
    restaurant_id: str | None = None
    restaurant: PlaceResult | None = None

    @model_validator(mode="after")
    def _needs_restaurant(self) -> AddToListRequest:
        if not self.restaurant_id and self.restaurant is None:
            raise ValueError("restaurant_id or restaurant is required")
        return self
