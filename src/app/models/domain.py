"""Domain models for trips and normalized routes."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class GeoPoint:
    """A geographic point picked by the user, with an optional display label."""

    lat: float
    lng: float
    label: str = ""


@dataclass(slots=True)
class TripRequest:
    """Origin, optional destination and the waypoints a user wants routed.

    Waypoint order is the order the user entered them; the visiting order is
    decided by the routing service.
    """

    origin: Optional[GeoPoint]
    destination: Optional[GeoPoint] = None
    waypoints: List[GeoPoint] = field(default_factory=list)

    @property
    def is_round_trip(self) -> bool:
        return self.destination is None

    @property
    def effective_destination(self) -> Optional[GeoPoint]:
        return self.destination if self.destination is not None else self.origin


@dataclass(slots=True)
class RouteStep:
    instruction: str
    distance_meters: int
    duration_seconds: float
    maneuver: str = ""


@dataclass(slots=True)
class RouteSummary:
    """Route reshaped from the routing service response into a total, stable form."""

    distance_meters: int = 0
    duration_seconds: float = 0.0
    encoded_polyline: str = ""
    optimized_waypoint_order: List[int] = field(default_factory=list)
    steps: List[RouteStep] = field(default_factory=list)
