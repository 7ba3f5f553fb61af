from __future__ import annotations

import logging

from ..places.client import search_places
from ..places.config import DEFAULT_PLACES_CONFIG, PlacesConfig
from .filters import filter_results, has_active_filters
from .models import FilterSettings, SearchRequest, SearchResponse
from .normalizer import normalize_search

logger = logging.getLogger(__name__)


class InvalidSearchError(ValueError):
    """Search input failed validation; carries a reason code for the caller."""

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


def run_search(
    request: SearchRequest,
    config: PlacesConfig = DEFAULT_PLACES_CONFIG,
) -> SearchResponse:
    # A blank query with a cuisine category browses that category.
    raw_query = request.query
    if (not isinstance(raw_query, str) or not raw_query.strip()) and request.category:
        raw_query = request.category

    normalized = normalize_search(raw_query, request.location)
    if not normalized.is_valid:
        raise InvalidSearchError(normalized.reason or "invalid", normalized.error or "Invalid request")

    logger.info(
        "Searching for restaurants: query=%r has_location=%s",
        normalized.query,
        normalized.coordinate is not None,
    )
    results = search_places(normalized.query, normalized.coordinate, config=config)

    filtered = filter_results(
        results,
        max_price=request.max_price,
        min_rating=request.min_rating,
        max_distance=request.max_distance,
    )
    return SearchResponse(
        restaurants=filtered,
        total_results=len(results),
        filters=FilterSettings(
            max_price=request.max_price,
            min_rating=request.min_rating,
            max_distance=request.max_distance,
        ),
        filters_active=has_active_filters(
            request.max_price, request.min_rating, request.max_distance, request.category
        ),
    )
