from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .models import Coordinate

MAX_QUERY_LENGTH = 100

# Stripped from free text before it leaves the service.
_UNSAFE_CHARS = re.compile(r"[<>\\\"'&]")


@dataclass(frozen=True)
class QueryValidation:
    is_valid: bool
    sanitized: str = ""
    error: str | None = None
    reason: str | None = None


@dataclass(frozen=True)
class LocationValidation:
    is_valid: bool
    coordinate: Coordinate | None = None
    error: str | None = None
    reason: str | None = None


@dataclass(frozen=True)
class NormalizedQuery:
    is_valid: bool
    query: str = ""
    coordinate: Coordinate | None = None
    error: str | None = None
    reason: str | None = None


def _invalid_query(reason: str, error: str) -> QueryValidation:
    return QueryValidation(is_valid=False, sanitized="", error=error, reason=reason)


def _invalid_location(reason: str, error: str) -> LocationValidation:
    return LocationValidation(is_valid=False, error=error, reason=reason)


def sanitize_text(text: str) -> str:
    """Remove ``< > \\ " ' &`` from *text*, leaving everything else alone."""
    return _UNSAFE_CHARS.sub("", text)


def _utf16_length(text: str) -> int:
    # Browser clients measure length in UTF-16 code units.
    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2


def validate_search_query(query: Any) -> QueryValidation:
    """
    Validate and sanitize a free-text search query.

    The query is trimmed, bounded to 100 characters, then stripped of
    characters that could end up in markup. ``sanitized`` is only
    meaningful when ``is_valid`` is true.
    """
    if not query or not isinstance(query, str):
        return _invalid_query("query_required", "Query is required")

    trimmed = query.strip()
    if not trimmed:
        return _invalid_query("query_empty", "Query cannot be empty")

    if _utf16_length(trimmed) > MAX_QUERY_LENGTH:
        return _invalid_query(
            "query_too_long",
            f"Query too long (max {MAX_QUERY_LENGTH} characters)",
        )

    sanitized = sanitize_text(trimmed)
    if not sanitized:
        return _invalid_query("invalid_characters", "Query contains invalid characters")

    return QueryValidation(is_valid=True, sanitized=sanitized)


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def validate_location(location: Any) -> LocationValidation:
    """
    Validate an optional ``{"lat": ..., "lng": ...}`` mapping.

    ``None`` and empty scalars (``""``, ``0``, ``False``) mean no location.
    """
    if location is None or (isinstance(location, (str, int, float)) and not location):
        return LocationValidation(is_valid=True)

    if not isinstance(location, Mapping):
        return _invalid_location("invalid_format", "Invalid location format")

    raw_lat = location.get("lat")
    raw_lng = location.get("lng")
    if raw_lat is None or raw_lng is None or raw_lat == "" or raw_lng == "":
        return _invalid_location("invalid_format", "Invalid location format")

    lat = _to_number(raw_lat)
    lng = _to_number(raw_lng)
    if lat is None or lng is None:
        return _invalid_location("not_numeric", "Location coordinates must be numbers")

    if lat < -90 or lat > 90:
        return _invalid_location("latitude_out_of_range", "Latitude must be between -90 and 90")

    if lng < -180 or lng > 180:
        return _invalid_location(
            "longitude_out_of_range", "Longitude must be between -180 and 180"
        )

    return LocationValidation(is_valid=True, coordinate=Coordinate(lat=lat, lng=lng))


def normalize_search(query: Any, location: Any = None) -> NormalizedQuery:
    """Run both validators; the first failure wins."""
    q = validate_search_query(query)
    if not q.is_valid:
        return NormalizedQuery(is_valid=False, error=q.error, reason=q.reason)

    loc = validate_location(location)
    if not loc.is_valid:
        return NormalizedQuery(is_valid=False, error=loc.error, reason=loc.reason)

    return NormalizedQuery(is_valid=True, query=q.sanitized, coordinate=loc.coordinate)
