from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

# Tables keyed by row id. Dicts keep insertion order, which the list
# queries rely on for "newest first".
_restaurants: dict[str, dict[str, Any]] = {}
_check_ins: dict[str, dict[str, Any]] = {}
_lists: dict[str, dict[str, Any]] = {}
_list_items: dict[str, dict[str, Any]] = {}


class StorageError(Exception):
    pass


class NotFoundError(StorageError):
    pass


class NotOwnerError(StorageError):
    pass


class AlreadyInListError(StorageError):
    pass


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def restaurants() -> dict[str, dict[str, Any]]:
    return _restaurants


def check_ins() -> dict[str, dict[str, Any]]:
    return _check_ins


def restaurant_lists() -> dict[str, dict[str, Any]]:
    return _lists


def list_items() -> dict[str, dict[str, Any]]:
    return _list_items


def clear_store() -> None:
    _restaurants.clear()
    _check_ins.clear()
    _lists.clear()
    _list_items.clear()
