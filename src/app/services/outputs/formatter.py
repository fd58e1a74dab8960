"""Human-readable distance and duration text."""

from __future__ import annotations


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def format_distance(distance_meters: float) -> str:
    """Route total, e.g. ``"5.0 km"``."""
    return f"{distance_meters / 1000:.1f} km"


def format_duration(duration_seconds: float) -> str:
    """Route total, e.g. ``"10 mins"``."""
    return f"{_round_half_up(duration_seconds / 60)} mins"


def format_step_distance(distance_meters: float) -> str:
    if not distance_meters:
        return ""
    if distance_meters < 1000:
        return f"{int(distance_meters)}m"
    return f"{distance_meters / 1000:.1f}km"


def format_step_duration(duration_seconds: float) -> str:
    if not duration_seconds:
        return ""
    if duration_seconds < 60:
        return f"{_round_half_up(duration_seconds)}s"
    return f"{_round_half_up(duration_seconds / 60)}min"


def format_duration_literal(duration_seconds: float) -> str:
    """Duration in the routing service's own ``"<seconds>s"`` notation."""
    if float(duration_seconds).is_integer():
        return f"{int(duration_seconds)}s"
    return f"{duration_seconds:g}s"
