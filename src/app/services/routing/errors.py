"""Error taxonomy for route computation.

Every error carries the HTTP status the API layer answers with, so the
boundary can render all of them as ``{"error": message}``.
"""

from __future__ import annotations


class RouteServiceError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(RouteServiceError):
    """Trip input is missing or malformed. The user can correct it."""

    status_code = 400


class ConfigurationError(RouteServiceError):
    """The routing service credential is not configured."""

    status_code = 500


class UpstreamError(RouteServiceError):
    """The routing service answered with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or "Routes API failed", status_code=status_code)


class TransportError(RouteServiceError):
    """Talking to the routing service failed before a usable answer came back."""

    status_code = 502

    def __init__(self, cause: BaseException, message: str = "Failed to reach the routes service") -> None:
        super().__init__(message)
        self.cause = cause


class NoRouteFoundError(RouteServiceError):
    """The routing service succeeded but returned no route."""

    status_code = 404

    def __init__(self, message: str = "No route found for the requested trip") -> None:
        super().__init__(message)
