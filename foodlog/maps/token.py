from __future__ import annotations

import logging

from .config import DEFAULT_MAP_CONFIG, MapConfig

logger = logging.getLogger(__name__)


class MapTokenNotConfigured(Exception):
    pass


def get_map_token(config: MapConfig = DEFAULT_MAP_CONFIG) -> str:
    """Return the public map-tile token the frontend initialises the map with."""
    if not config.token:
        logger.error("Mapbox token not configured")
        raise MapTokenNotConfigured("Mapbox token not configured")
    return config.token
