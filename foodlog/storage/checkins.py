from __future__ import annotations

from datetime import timezone
from typing import Any

from .models import CheckIn, CheckInCreate, CheckInOut, CheckInUpdate
from .restaurants import get_restaurant, resolve_restaurant
from .store import NotFoundError, NotOwnerError, check_ins, new_id, utcnow

RECENT_LIMIT = 5


def _clean_notes(notes: str | None) -> str | None:
    if notes is None:
        return None
    return notes.strip() or None


def _owned_row(check_in_id: str, user_id: str) -> dict[str, Any]:
    row = check_ins().get(check_in_id)
    if row is None:
        raise NotFoundError(f"Check-in {check_in_id} not found")
    if row["user_id"] != user_id:
        raise NotOwnerError("Check-in belongs to another user")
    return row


def _with_restaurant(row: dict[str, Any]) -> CheckInOut:
    return CheckInOut(**row, restaurant=get_restaurant(row["restaurant_id"]))


def create_check_in(user_id: str, body: CheckInCreate) -> CheckInOut:
    # The restaurant row must exist before the check-in that points at it.
    restaurant = resolve_restaurant(body.restaurant_id, body.restaurant)
    now = utcnow()
    visited_at = body.visited_at or now
    if visited_at.tzinfo is None:
        visited_at = visited_at.replace(tzinfo=timezone.utc)
    row = {
        "id": new_id(),
        "user_id": user_id,
        "restaurant_id": restaurant.id,
        "visited_at": visited_at,
        "notes": _clean_notes(body.notes),
        "rating": body.rating,
        "photos": list(body.photos),
        "created_at": now,
    }
    check_ins()[row["id"]] = row
    return CheckInOut(**row, restaurant=restaurant)


def update_check_in(check_in_id: str, user_id: str, body: CheckInUpdate) -> CheckInOut:
    """
    Edit notes and rating of a check-in.

    Both are always overwritten (a missing rating clears it). Photos are
    only replaced when new ones are sent.
    """
    row = _owned_row(check_in_id, user_id)
    row["notes"] = _clean_notes(body.notes)
    row["rating"] = body.rating
    if body.photos:
        row["photos"] = list(body.photos)
    return _with_restaurant(row)


def delete_check_in(check_in_id: str, user_id: str) -> None:
    _owned_row(check_in_id, user_id)
    del check_ins()[check_in_id]


def get_check_in(check_in_id: str, user_id: str) -> CheckInOut:
    return _with_restaurant(_owned_row(check_in_id, user_id))


def user_check_ins(user_id: str) -> list[CheckIn]:
    return [CheckIn(**row) for row in check_ins().values() if row["user_id"] == user_id]


def list_check_ins(user_id: str, limit: int | None = None) -> list[CheckInOut]:
    """Newest visit first; ties go to the most recently saved."""
    rows = [row for row in reversed(check_ins().values()) if row["user_id"] == user_id]
    rows = sorted(rows, key=lambda r: r["visited_at"], reverse=True)
    if limit is not None:
        rows = rows[:limit]
    return [_with_restaurant(row) for row in rows]


def recent_check_ins(user_id: str) -> list[CheckInOut]:
    return list_check_ins(user_id, limit=RECENT_LIMIT)
