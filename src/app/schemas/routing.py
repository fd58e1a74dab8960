"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import GeoPoint, TripRequest


class LocationModel(BaseModel):
    """A point as the browser sends it; extra UI fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False, strict=True)
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False, strict=True)
    address: Optional[str] = None
    id: Optional[str] = None

    def to_domain(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng, label=self.address or "")


class TripPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    origin: Optional[LocationModel] = None
    destination: Optional[LocationModel] = None
    waypoints: Optional[List[LocationModel]] = None

    def to_domain(self) -> TripRequest:
        return TripRequest(
            origin=self.origin.to_domain() if self.origin else None,
            destination=self.destination.to_domain() if self.destination else None,
            waypoints=[waypoint.to_domain() for waypoint in self.waypoints or []],
        )


class PolylineModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    encoded_polyline: str = Field("", alias="encodedPolyline")


class RouteStepModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    instruction: str
    distance: int
    distance_text: str = Field("", alias="distanceText")
    duration: str
    duration_seconds: float = Field(..., alias="durationSeconds")
    duration_text: str = Field("", alias="durationText")
    maneuver: str = ""


class RouteModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    distance_meters: int = Field(..., alias="distanceMeters")
    distance_text: str = Field(..., alias="distanceText")
    duration: str
    duration_seconds: float = Field(..., alias="durationSeconds")
    duration_text: str = Field(..., alias="durationText")
    polyline: PolylineModel
    optimized_intermediate_waypoint_index: List[int] = Field(
        default_factory=list, alias="optimizedIntermediateWaypointIndex"
    )
    step_by_step_directions: List[RouteStepModel] = Field(
        default_factory=list, alias="stepByStepDirections"
    )
    navigation_url: str = Field(..., alias="navigationUrl")


class ComputeRouteResponse(BaseModel):
    routes: List[RouteModel]


class ErrorResponse(BaseModel):
    error: str
