from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from .models import DEFAULT_MAX_DISTANCE, DEFAULT_MAX_PRICE, DEFAULT_MIN_RATING

T = TypeVar("T")

PRICE_TIERS = ["$", "$$", "$$$", "$$$$"]


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _keep(record: Any, max_price: int, min_rating: float) -> bool:
    # A rating or price tier of 0 is treated the same as a missing one.
    rating = _field(record, "rating")
    if rating and rating < min_rating:
        return False
    price = _field(record, "price_level")
    if price and price > max_price:
        return False
    return True


def filter_results(
    results: Iterable[T],
    max_price: int = DEFAULT_MAX_PRICE,
    min_rating: float = DEFAULT_MIN_RATING,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> list[T]:
    """
    Drop results rated below ``min_rating`` or priced above ``max_price``.

    Records without a rating or price tier always pass that check. Order is
    preserved. ``max_distance`` is accepted for symmetry with the search
    form but nothing computes a distance to compare it against.
    """
    return [r for r in results if _keep(r, max_price, min_rating)]


def has_active_filters(
    max_price: int = DEFAULT_MAX_PRICE,
    min_rating: float = DEFAULT_MIN_RATING,
    max_distance: int = DEFAULT_MAX_DISTANCE,
    category: str | None = None,
) -> bool:
    return (
        bool(category)
        or min_rating > DEFAULT_MIN_RATING
        or max_price < DEFAULT_MAX_PRICE
        or max_distance < DEFAULT_MAX_DISTANCE
    )

