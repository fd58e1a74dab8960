"""Flatten a computeRoutes response into a ``RouteSummary``."""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping

from ...models.domain import RouteStep, RouteSummary
from .errors import NoRouteFoundError

logger = logging.getLogger(__name__)

# Durations arrive either as "123s" strings or as {"seconds": ..., "nanos": ...}.
_DURATION_PREFIX = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)")


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number: Any = value
    elif isinstance(value, str):
        match = _DURATION_PREFIX.match(value)
        if not match:
            return None
        number = match.group(1)
    else:
        return None
    try:
        result = float(number)
    except OverflowError:
        return None
    return result if math.isfinite(result) else None


def parse_duration(value: Any) -> float:
    """Return the duration in seconds, or 0.0 when the value cannot be read."""
    seconds: float | None = None
    if isinstance(value, Mapping):
        seconds = _to_number(value.get("seconds"))
        if seconds is not None:
            nanos = _to_number(value.get("nanos"))
            if nanos:
                seconds += nanos / 1e9
    else:
        seconds = _to_number(value)
    if seconds is None or seconds < 0:
        return 0.0
    return seconds


def _duration_of(item: Mapping) -> float:
    if item.get("duration") is not None:
        return parse_duration(item.get("duration"))
    return parse_duration(item.get("staticDuration"))


def _distance_of(item: Mapping) -> int:
    number = _to_number(item.get("distanceMeters"))
    if number is None or number < 0:
        return 0
    return int(number)


def _polyline_of(route: Mapping) -> str:
    polyline = route.get("polyline")
    if isinstance(polyline, Mapping):
        encoded = polyline.get("encodedPolyline")
        if isinstance(encoded, str):
            return encoded
    return ""


def _optimized_order_of(route: Mapping) -> list[int]:
    order = route.get("optimizedIntermediateWaypointIndex")
    if not isinstance(order, list):
        return []
    indices: list[int] = []
    for value in order:
        if isinstance(value, bool) or not isinstance(value, int):
            logger.warning("Ignoring non-integer optimized waypoint order %r", order)
            return []
        indices.append(value)
    return indices


def _instruction_of(step: Mapping) -> tuple[str, str]:
    navigation = step.get("navigationInstruction")
    if isinstance(navigation, Mapping):
        instruction = navigation.get("instructions")
        maneuver = navigation.get("maneuver")
    else:
        instruction = step.get("instruction", step.get("instructions"))
        maneuver = step.get("maneuver")
    return (
        instruction if isinstance(instruction, str) else "",
        maneuver if isinstance(maneuver, str) else "",
    )


def flatten_steps(legs: Any) -> list[RouteStep]:
    """Concatenate every leg's steps in traversal order, dropping steps without text."""
    steps: list[RouteStep] = []
    if not isinstance(legs, list):
        return steps
    for leg in legs:
        if not isinstance(leg, Mapping) or not isinstance(leg.get("steps"), list):
            continue
        for step in leg["steps"]:
            if not isinstance(step, Mapping):
                continue
            instruction, maneuver = _instruction_of(step)
            if not instruction.strip():
                continue
            steps.append(
                RouteStep(
                    instruction=instruction,
                    distance_meters=_distance_of(step),
                    duration_seconds=_duration_of(step),
                    maneuver=maneuver,
                )
            )
    return steps


def normalize(raw: Any) -> RouteSummary:
    """Reshape the first route of a computeRoutes response.

    Raises:
        NoRouteFoundError: the response holds no route.
    """
    routes = raw.get("routes") if isinstance(raw, Mapping) else None
    if not isinstance(routes, list) or not routes or not isinstance(routes[0], Mapping):
        raise NoRouteFoundError()
    if len(routes) > 1:
        logger.info("Routes API returned %d routes, using the first", len(routes))

    route = routes[0]
    return RouteSummary(
        distance_meters=_distance_of(route),
        duration_seconds=_duration_of(route),
        encoded_polyline=_polyline_of(route),
        optimized_waypoint_order=_optimized_order_of(route),
        steps=flatten_steps(route.get("legs")),
    )
