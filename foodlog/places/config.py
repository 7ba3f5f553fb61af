from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class PlacesConfig:
    api_key: str = os.getenv("GOOGLE_PLACES_API_KEY", "")
    base_url: str = "https://maps.googleapis.com/maps/api/place/textsearch/json"
    photo_url: str = "https://maps.googleapis.com/maps/api/place/photo"
    radius_m: int = 10000
    photo_max_width: int = 400
    timeout: float = 10.0


DEFAULT_PLACES_CONFIG = PlacesConfig()
