"""Route computation endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError as PydanticValidationError

from ...schemas.routing import ComputeRouteResponse, ErrorResponse, TripPayload
from ...services.outputs.routing_formatter import route_summary_to_json
from ...services.routing.errors import RouteServiceError, ValidationError
from ...services.routing.routes_client import require_api_key
from ...services.routing.service import compute_route

logger = logging.getLogger(__name__)

router = APIRouter(tags=["routes"])

ORIGIN_REQUIRED = "Origin is required and must include lat/lng"


def _parse_trip(body: object) -> TripPayload:
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        payload = TripPayload.model_validate(body)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = first["loc"][0] if first["loc"] else "body"
        if field == "origin":
            raise ValidationError(ORIGIN_REQUIRED) from exc
        raise ValidationError(f"Invalid {field}: {first['msg']}") from exc
    if payload.origin is None:
        raise ValidationError(ORIGIN_REQUIRED)
    return payload


@router.post(
    "/compute-route",
    response_model=ComputeRouteResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def compute(request: Request) -> ComputeRouteResponse:
    """Compute an optimized driving route for origin, destination and waypoints."""
    # Must run before the body is read.
    require_api_key()
    try:
        body = await request.json()
    except ValueError as exc:
        raise ValidationError("Request body must be valid JSON") from exc

    trip = _parse_trip(body).to_domain()
    try:
        summary = await run_in_threadpool(compute_route, trip)
    except RouteServiceError:
        raise
    except Exception as exc:
        logger.exception("Error computing route: %s", exc)
        raise RouteServiceError(f"Unexpected error: {exc}") from exc
    return ComputeRouteResponse.model_validate(route_summary_to_json(summary, trip))
