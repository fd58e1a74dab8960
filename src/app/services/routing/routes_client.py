"""HTTP client for the Google Routes computeRoutes endpoint."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from ...config import settings
from .errors import ConfigurationError, TransportError, UpstreamError

logger = logging.getLogger(__name__)


class RoutesBackend(Protocol):
    def compute_routes(self, body: dict) -> dict: ...


def require_api_key(api_key: str | None = None) -> str:
    """Return the routes credential or raise ``ConfigurationError`` when it is absent."""
    key = api_key or settings.google_maps_api_key
    if not key or not key.strip():
        raise ConfigurationError("Missing Google Maps API key")
    return key


class RoutesClient:
    """Issues a single computeRoutes call per trip. Nothing is retried."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        field_mask: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = require_api_key(api_key)
        self.base_url = base_url or settings.routes_api_url
        self.field_mask = field_mask or settings.routes_field_mask
        self.timeout = timeout if timeout is not None else settings.routes_timeout_seconds
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        kwargs: dict[str, Any] = {}
        if self.timeout is not None:
            kwargs["timeout"] = httpx.Timeout(self.timeout)
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.Client(**kwargs)

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": self.field_mask,
        }

    def compute_routes(self, body: dict) -> dict:
        """POST the request body and return the decoded JSON response.

        Raises:
            UpstreamError: the service answered with a non-success status.
            TransportError: the call failed on the network or the body was not JSON.
        """
        client = self._get_client()
        try:
            try:
                response = client.post(self.base_url, json=body, headers=self._headers())
            except httpx.HTTPError as exc:
                logger.warning("Routes API request failed: %s", exc)
                raise TransportError(exc) from exc

            if not response.is_success:
                message = _extract_error_message(response)
                logger.warning("Routes API error %s: %s", response.status_code, message)
                raise UpstreamError(response.status_code, message)

            try:
                data = response.json()
            except ValueError as exc:
                logger.warning("Routes API returned a non-JSON body: %s", exc)
                raise TransportError(exc) from exc
            return data
        finally:
            client.close()


def _extract_error_message(response: httpx.Response) -> str | None:
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None
