"""Translate a trip into the computeRoutes request body."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import GeoPoint, TripRequest
from ..geospatial import is_valid_coordinate
from .errors import ValidationError

TRAVEL_MODE = "DRIVE"
PREFERENCE_WITH_WAYPOINTS = "TRAFFIC_AWARE"
PREFERENCE_DIRECT = "TRAFFIC_AWARE_OPTIMAL"


def _check_point(point: GeoPoint | None, message: str) -> None:
    if point is None or not is_valid_coordinate(point.lat, point.lng):
        raise ValidationError(message)


def validate_trip(trip: TripRequest) -> None:
    _check_point(trip.origin, "Origin is required and must include lat/lng")
    if trip.destination is not None:
        _check_point(trip.destination, "Destination must include a valid lat/lng")
    for index, waypoint in enumerate(trip.waypoints):
        _check_point(waypoint, f"Waypoint {index} must include a valid lat/lng")


def _waypoint(point: GeoPoint) -> dict:
    return {"location": {"latLng": {"latitude": point.lat, "longitude": point.lng}}}


def _intermediates(waypoints: Sequence[GeoPoint]) -> list[dict]:
    return [_waypoint(point) for point in waypoints]


def build_route_request(trip: TripRequest) -> dict:
    """Build the request body for a validated trip.

    With waypoints the service is asked to optimize their visiting order,
    which it only supports with the TRAFFIC_AWARE preference. Without
    waypoints there is nothing to reorder, so the optimal preference is used.
    A missing destination makes the trip a round trip back to the origin.
    """
    validate_trip(trip)
    has_waypoints = len(trip.waypoints) > 0
    return {
        "origin": _waypoint(trip.origin),
        "destination": _waypoint(trip.effective_destination),
        "intermediates": _intermediates(trip.waypoints),
        "travelMode": TRAVEL_MODE,
        "optimizeWaypointOrder": has_waypoints,
        "routingPreference": PREFERENCE_WITH_WAYPOINTS if has_waypoints else PREFERENCE_DIRECT,
        "computeAlternativeRoutes": False,
    }
