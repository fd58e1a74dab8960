"""Serializers for routing outputs."""

from __future__ import annotations

from typing import Sequence, TypeVar

from ...models.domain import GeoPoint, RouteStep, RouteSummary, TripRequest
from ..geospatial import format_lat_lng
from .formatter import (
    format_distance,
    format_duration,
    format_duration_literal,
    format_step_distance,
    format_step_duration,
)

GOOGLE_MAPS_DIRECTIONS_URL = "https://www.google.com/maps/dir"

T = TypeVar("T")


def ordered_waypoints(waypoints: Sequence[T], order: Sequence[int]) -> list[T]:
    """Apply the optimized visiting order when it is a permutation of the waypoint indices."""
    if sorted(order) != list(range(len(waypoints))):
        return list(waypoints)
    return [waypoints[index] for index in order]


def build_navigation_url(trip: TripRequest, order: Sequence[int] = ()) -> str:
    """Google Maps directions link visiting the waypoints in optimized order.

    The destination is only appended when the user picked one.
    """
    points: list[GeoPoint] = [trip.origin, *ordered_waypoints(trip.waypoints, order)]
    if trip.destination is not None:
        points.append(trip.destination)
    path = "/".join(format_lat_lng(point.lat, point.lng) for point in points)
    return f"{GOOGLE_MAPS_DIRECTIONS_URL}/{path}"


def route_step_to_json(step: RouteStep) -> dict:
    return {
        "instruction": step.instruction,
        "distance": step.distance_meters,
        "distanceText": format_step_distance(step.distance_meters),
        "duration": format_duration_literal(step.duration_seconds),
        "durationSeconds": step.duration_seconds,
        "durationText": format_step_duration(step.duration_seconds),
        "maneuver": step.maneuver,
    }


def route_summary_to_json(summary: RouteSummary, trip: TripRequest) -> dict:
    """Wrap the summary in the routing service's ``{"routes": [...]}`` envelope."""
    route = {
        "distanceMeters": summary.distance_meters,
        "distanceText": format_distance(summary.distance_meters),
        "duration": format_duration_literal(summary.duration_seconds),
        "durationSeconds": summary.duration_seconds,
        "durationText": format_duration(summary.duration_seconds),
        "polyline": {"encodedPolyline": summary.encoded_polyline},
        "optimizedIntermediateWaypointIndex": list(summary.optimized_waypoint_order),
        "stepByStepDirections": [route_step_to_json(step) for step in summary.steps],
        "navigationUrl": build_navigation_url(trip, summary.optimized_waypoint_order),
    }
    return {"routes": [route]}
