"""
Keep only well-rated items (rating >= 4), preserving input order.
"""
from __future__ import annotations
from typing import Any

MIN_RATING = 4


def filter_by_rating(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [item for item in items if item["rating"] >= MIN_RATING]
