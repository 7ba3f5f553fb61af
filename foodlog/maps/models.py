from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class LocationType(str, Enum):
    checkin = "checkin"
    list = "list"


class MapLocation(BaseModel):
    id: str
    name: str
    latitude: float
    longitude: float
    type: LocationType
    address: str = ""
    rating: int | None = None
    list_name: str | None = None
    list_color: str | None = None


class MapTokenResponse(BaseModel):
    token: str
