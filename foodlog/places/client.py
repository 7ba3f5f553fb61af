from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from ..search.models import Coordinate, PlaceResult
from .config import DEFAULT_PLACES_CONFIG, PlacesConfig

logger = logging.getLogger(__name__)

_OK_STATUSES = {"OK", "ZERO_RESULTS"}
_CUISINE_TYPES = ["restaurant", "food", "meal_takeaway", "meal_delivery"]


class PlacesSearchError(Exception):
    """The places API rejected the request or could not be reached."""


class PlacesNotConfigured(PlacesSearchError):
    """No API key is configured for the places API."""


def _photo_url(place: dict[str, Any], config: PlacesConfig) -> str | None:
    photos = place.get("photos") or []
    if not photos or not photos[0].get("photo_reference"):
        return None
    params = {
        "maxwidth": config.photo_max_width,
        "photoreference": photos[0]["photo_reference"],
        "key": config.api_key,
    }
    return f"{config.photo_url}?{urlencode(params)}"


def _cuisine_type(place: dict[str, Any]) -> str:
    for t in place.get("types") or []:
        if t in _CUISINE_TYPES:
            return t
    return "restaurant"


def _to_result(place: dict[str, Any], config: PlacesConfig) -> PlaceResult:
    location = (place.get("geometry") or {}).get("location") or {}
    return PlaceResult(
        google_place_id=place.get("place_id"),
        name=place.get("name", ""),
        address=place.get("formatted_address", ""),
        latitude=location.get("lat"),
        longitude=location.get("lng"),
        rating=place.get("rating"),
        price_level=place.get("price_level"),
        image_url=_photo_url(place, config),
        cuisine_type=_cuisine_type(place),
    )


def build_params(
    query: str,
    coordinate: Coordinate | None,
    config: PlacesConfig = DEFAULT_PLACES_CONFIG,
) -> dict[str, str]:
    params = {
        "query": f"{query} restaurant",
        "type": "restaurant",
        "key": config.api_key,
    }
    if coordinate is not None:
        params["location"] = f"{coordinate.lat},{coordinate.lng}"
        params["radius"] = str(config.radius_m)
    return params


def search_places(
    query: str,
    coordinate: Coordinate | None = None,
    config: PlacesConfig = DEFAULT_PLACES_CONFIG,
) -> list[PlaceResult]:
    """
    Run a text search against the places API.

    *query* must already be sanitized. Raises ``PlacesNotConfigured`` when
    no key is set and ``PlacesSearchError`` for any HTTP, network or API
    status failure. Nothing is retried.
    """
    if not config.api_key:
        raise PlacesNotConfigured("Places API key not configured")

    params = build_params(query, coordinate, config)
    try:
        with httpx.Client(timeout=config.timeout) as client:
            response = client.get(config.base_url, params=params)
            response.raise_for_status()
            data = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise PlacesSearchError(f"Places request failed: {exc.__class__.__name__}") from exc

    if not isinstance(data, dict):
        raise PlacesSearchError("Places API returned an unexpected payload")

    status = data.get("status")
    if status not in _OK_STATUSES:
        raise PlacesSearchError(f"Places API error: {status}")

    try:
        results = [_to_result(p, config) for p in data.get("results") or []]
    except (ValidationError, AttributeError, TypeError) as exc:
        raise PlacesSearchError(f"Malformed places result: {exc.__class__.__name__}") from exc
    logger.info("Places search returned %d results", len(results))
    return results
