"""Application configuration and settings management."""

from typing import Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ROUTES_FIELD_MASK = ",".join(
    (
        "routes.optimizedIntermediateWaypointIndex",
        "routes.distanceMeters",
        "routes.duration",
        "routes.staticDuration",
        "routes.polyline.encodedPolyline",
        "routes.legs.steps.navigationInstruction",
        "routes.legs.steps.distanceMeters",
        "routes.legs.steps.staticDuration",
    )
)


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTE_OPTIMIZER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Route Optimizer API"
    api_prefix: str = "/api"
    google_maps_api_key: Optional[str] = Field(
        default=None,
        description="Server-side key for the Google Routes API. Never sent to the browser.",
    )
    routes_api_url: str = Field(
        default="https://routes.googleapis.com/directions/v2:computeRoutes",
        description="Endpoint of the external routes computation service.",
    )
    routes_field_mask: str = Field(
        default=DEFAULT_ROUTES_FIELD_MASK,
        description="Response field mask sent with every computeRoutes call.",
    )
    routes_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Overall timeout for the outbound call. Uses the httpx default when unset.",
    )
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("google_maps_api_key", mode="before")
    @classmethod
    def _blank_key_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


settings = Settings()
