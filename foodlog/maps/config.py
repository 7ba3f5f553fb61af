from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class MapConfig:
    token: str = os.getenv("MAPBOX_PUBLIC_TOKEN", "")


DEFAULT_MAP_CONFIG = MapConfig()
