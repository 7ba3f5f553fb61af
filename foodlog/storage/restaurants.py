from __future__ import annotations

import logging

from ..search.models import PlaceResult
from .models import Restaurant
from .store import NotFoundError, new_id, restaurants, utcnow

logger = logging.getLogger(__name__)


def get_restaurant(restaurant_id: str) -> Restaurant:
    row = restaurants().get(restaurant_id)
    if row is None:
        raise NotFoundError(f"Restaurant {restaurant_id} not found")
    return Restaurant(**row)


def find_restaurant(name: str, address: str) -> Restaurant | None:
    """Look a restaurant up by its (name, address) identity."""
    for row in restaurants().values():
        if row["name"] == name and row["address"] == address:
            return Restaurant(**row)
    return None


def find_or_create_restaurant(place: PlaceResult) -> Restaurant:
    existing = find_restaurant(place.name, place.address)
    if existing is not None:
        return existing

    row = place.model_dump()
    row["id"] = new_id()
    row["created_at"] = utcnow()
    restaurants()[row["id"]] = row
    logger.info("Saved restaurant %s (%s)", row["id"], place.name)
    return Restaurant(**row)


def resolve_restaurant(restaurant_id: str | None, place: PlaceResult | None) -> Restaurant:
    """Use a saved restaurant by id, or save the search result first."""
    if restaurant_id:
        return get_restaurant(restaurant_id)
    if place is None:
        raise NotFoundError("No restaurant given")
    return find_or_create_restaurant(place)
