"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Any

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def is_valid_coordinate(lat: Any, lng: Any) -> bool:
    """Return True when both values are finite numbers inside the geographic range."""

    if not (_is_number(lat) and _is_number(lng)):
        return False
    return -MAX_LATITUDE <= lat <= MAX_LATITUDE and -MAX_LONGITUDE <= lng <= MAX_LONGITUDE


def format_lat_lng(lat: float, lng: float) -> str:
    """Render a coordinate the way map deep links expect it: ``lat,lng``."""

    return f"{lat},{lng}"
