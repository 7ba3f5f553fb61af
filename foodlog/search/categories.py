from __future__ import annotations

# Browsable cuisine shortcuts; "value" is searched when no query is given.
CUISINE_CATEGORIES: list[dict[str, str]] = [
    {"name": "All", "value": ""},
    {"name": "Italian", "value": "italian"},
    {"name": "Asian", "value": "asian"},
    {"name": "Mexican", "value": "mexican"},
    {"name": "American", "value": "american"},
    {"name": "Indian", "value": "indian"},
    {"name": "French", "value": "french"},
    {"name": "Mediterranean", "value": "mediterranean"},
    {"name": "Japanese", "value": "japanese"},
    {"name": "Thai", "value": "thai"},
    {"name": "Chinese", "value": "chinese"},
]
