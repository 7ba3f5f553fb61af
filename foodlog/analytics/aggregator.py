from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any

from ..storage.models import CheckIn


def compute_visit_stats(
    check_ins: list[CheckIn],
    now: datetime | None = None,
) -> dict[str, Any]:
    now = now or datetime.now(timezone.utc)
    total = len(check_ins)

    # Unrated visits count as 0 towards the average
    ratings = [c.rating or 0 for c in check_ins]
    # Half-up to one decimal (3.25 -> 3.3)
    avg_rating = math.floor(sum(ratings) / total * 10 + 0.5) / 10 if total else 0.0

    this_month = sum(
        1 for c in check_ins
        if c.visited_at.year == now.year and c.visited_at.month == now.month
    )

    return {
        "places_visited": total,
        "average_rating": avg_rating,
        "following": 0,
        "this_month": this_month,
    }
