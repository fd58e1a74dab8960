"""Routing orchestration service."""

from __future__ import annotations

import logging

from ...models.domain import RouteSummary, TripRequest
from .normalizer import normalize
from .request_builder import build_route_request
from .routes_client import RoutesBackend, RoutesClient, require_api_key

logger = logging.getLogger(__name__)


def build_and_send(trip: TripRequest, client: RoutesBackend | None = None) -> dict:
    """Issue exactly one computeRoutes call for the trip and return the raw response.

    The credential is checked before the trip is looked at or any client is
    used, including an injected one.
    """
    require_api_key()
    backend = client if client is not None else RoutesClient()
    body = build_route_request(trip)
    logger.info(
        "Requesting route: %d waypoint(s), round_trip=%s, optimize=%s",
        len(body["intermediates"]),
        trip.is_round_trip,
        body["optimizeWaypointOrder"],
    )
    return backend.compute_routes(body)


def compute_route(trip: TripRequest, client: RoutesBackend | None = None) -> RouteSummary:
    raw = build_and_send(trip, client)
    summary = normalize(raw)
    logger.info(
        "Route computed: %d m, %.0f s, %d step(s), order=%s",
        summary.distance_meters,
        summary.duration_seconds,
        len(summary.steps),
        summary.optimized_waypoint_order,
    )
    return summary
