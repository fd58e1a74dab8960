"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/routes", status_code=status.HTTP_200_OK)
def health_routes() -> dict:
    """Report whether the routes service is configured. Never calls it."""
    configured = bool(settings.google_maps_api_key and settings.google_maps_api_key.strip())
    return {
        "service": "routes",
        "configured": configured,
        "endpoint": settings.routes_api_url,
        "message": "Routes API key configured."
        if configured
        else "Routes API key missing. Set ROUTE_OPTIMIZER_GOOGLE_MAPS_API_KEY.",
    }
