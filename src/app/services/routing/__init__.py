"""Route computation: request adapter, routes client and response normalizer."""

from .errors import (
    ConfigurationError,
    NoRouteFoundError,
    RouteServiceError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from .normalizer import normalize, parse_duration
from .request_builder import build_route_request, validate_trip
from .routes_client import RoutesBackend, RoutesClient, require_api_key
from .service import build_and_send, compute_route

__all__ = [
    "build_and_send",
    "build_route_request",
    "compute_route",
    "normalize",
    "parse_duration",
    "require_api_key",
    "validate_trip",
    "RoutesBackend",
    "RoutesClient",
    "RouteServiceError",
    "ValidationError",
    "ConfigurationError",
    "UpstreamError",
    "TransportError",
    "NoRouteFoundError",
]
