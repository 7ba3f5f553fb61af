from __future__ import annotations

import logging
from typing import Any

from .models import (
    AddToListRequest,
    ListCreate,
    ListDetail,
    ListSummary,
    ListUpdate,
    Restaurant,
    RestaurantList,
)
from .restaurants import get_restaurant, resolve_restaurant
from .store import (
    AlreadyInListError,
    NotFoundError,
    NotOwnerError,
    list_items,
    new_id,
    restaurant_lists,
    utcnow,
)

logger = logging.getLogger(__name__)


def _owned_row(list_id: str, user_id: str) -> dict[str, Any]:
    row = restaurant_lists().get(list_id)
    if row is None:
        raise NotFoundError(f"List {list_id} not found")
    if row["user_id"] != user_id:
        raise NotOwnerError("List belongs to another user")
    return row


def _item_rows(list_id: str) -> list[dict[str, Any]]:
    return [item for item in list_items().values() if item["list_id"] == list_id]


def create_list(user_id: str, body: ListCreate) -> RestaurantList:
    row = {
        "id": new_id(),
        "user_id": user_id,
        "name": body.name,
        "description": (body.description or "").strip() or None,
        "color_theme": body.color_theme,
        "is_public": body.is_public,
        "created_at": utcnow(),
    }
    restaurant_lists()[row["id"]] = row
    return RestaurantList(**row)


def update_list(list_id: str, user_id: str, body: ListUpdate) -> RestaurantList:
    row = _owned_row(list_id, user_id)
    changes = body.model_dump(exclude_unset=True)
    if "description" in changes:
        changes["description"] = (changes["description"] or "").strip() or None
    # name, colour and visibility cannot be cleared
    row.update({k: v for k, v in changes.items() if v is not None or k == "description"})
    return RestaurantList(**row)


def delete_list(list_id: str, user_id: str) -> None:
    _owned_row(list_id, user_id)
    items = list_items()
    for item in _item_rows(list_id):
        del items[item["id"]]
    del restaurant_lists()[list_id]


def lists_for_user(user_id: str) -> list[ListSummary]:
    """The user's lists, newest first, with how many restaurants each holds."""
    return [
        ListSummary(**row, restaurant_count=len(_item_rows(row["id"])))
        for row in reversed(restaurant_lists().values())
        if row["user_id"] == user_id
    ]


def restaurants_in_list(list_id: str) -> list[Restaurant]:
    return [get_restaurant(item["restaurant_id"]) for item in _item_rows(list_id)]


def get_list(list_id: str, user_id: str) -> ListDetail:
    row = _owned_row(list_id, user_id)
    return ListDetail(**row, restaurants=restaurants_in_list(list_id))


def add_to_list(list_id: str, user_id: str, body: AddToListRequest) -> Restaurant:
    _owned_row(list_id, user_id)
    restaurant = resolve_restaurant(body.restaurant_id, body.restaurant)

    if any(item["restaurant_id"] == restaurant.id for item in _item_rows(list_id)):
        raise AlreadyInListError("This restaurant is already in the selected list")

    item = {
        "id": new_id(),
        "list_id": list_id,
        "restaurant_id": restaurant.id,
        "created_at": utcnow(),
    }
    list_items()[item["id"]] = item
    logger.info("Added restaurant %s to list %s", restaurant.id, list_id)
    return restaurant


def remove_from_list(list_id: str, user_id: str, restaurant_id: str) -> None:
    _owned_row(list_id, user_id)
    items = list_items()
    matches = [i for i in _item_rows(list_id) if i["restaurant_id"] == restaurant_id]
    if not matches:
        raise NotFoundError("Restaurant is not in this list")
    for item in matches:
        del items[item["id"]]


def user_list_entries(user_id: str) -> list[tuple[RestaurantList, Restaurant]]:
    """Every (list, restaurant) pair across the user's lists."""
    entries: list[tuple[RestaurantList, Restaurant]] = []
    lists = restaurant_lists()
    for item in list_items().values():
        row = lists.get(item["list_id"])
        if row is None or row["user_id"] != user_id:
            continue
        entries.append((RestaurantList(**row), get_restaurant(item["restaurant_id"])))
    return entries
