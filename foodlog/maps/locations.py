from __future__ import annotations

from collections.abc import Iterable

from ..storage.checkins import user_check_ins
from ..storage.lists import user_list_entries
from ..storage.restaurants import get_restaurant
from .models import LocationType, MapLocation


def _same_place(a: MapLocation, b: MapLocation) -> bool:
    # Exact match only; no distance tolerance.
    return a.name == b.name and a.latitude == b.latitude and a.longitude == b.longitude


def merge_locations(
    visit_locations: Iterable[MapLocation],
    list_locations: Iterable[MapLocation],
) -> list[MapLocation]:
    """
    Combine visit pins and list pins so each place shows up once.

    Every visit pin is kept. A list pin is skipped when a pin with the same
    name and coordinates is already present, so visits win over lists.
    """
    merged = list(visit_locations)
    for loc in list_locations:
        if not any(_same_place(existing, loc) for existing in merged):
            merged.append(loc)
    return merged


def visit_locations_for(user_id: str) -> list[MapLocation]:
    locations: list[MapLocation] = []
    for check_in in user_check_ins(user_id):
        restaurant = get_restaurant(check_in.restaurant_id)
        if restaurant.latitude is None or restaurant.longitude is None:
            continue
        locations.append(MapLocation(
            id=f"checkin-{check_in.id}",
            name=restaurant.name,
            latitude=restaurant.latitude,
            longitude=restaurant.longitude,
            type=LocationType.checkin,
            address=restaurant.address,
            rating=check_in.rating,
        ))
    return locations


def list_locations_for(user_id: str) -> list[MapLocation]:
    locations: list[MapLocation] = []
    for restaurant_list, restaurant in user_list_entries(user_id):
        if restaurant.latitude is None or restaurant.longitude is None:
            continue
        locations.append(MapLocation(
            id=f"list-{restaurant.id}",
            name=restaurant.name,
            latitude=restaurant.latitude,
            longitude=restaurant.longitude,
            type=LocationType.list,
            address=restaurant.address,
            list_name=restaurant_list.name,
            list_color=restaurant_list.color_theme,
        ))
    return locations


def map_locations_for(user_id: str) -> list[MapLocation]:
    return merge_locations(visit_locations_for(user_id), list_locations_for(user_id))
