import pytest
from fastapi.testclient import TestClient

from src.app.config import settings
from src.app.main import create_app
from src.app.services.routing import service as routing_service
from src.app.services.routing.errors import TransportError, UpstreamError


class DummyRoutes:
    def __init__(self, response: dict | None = None, error: Exception | None = None) -> None:
        self.calls: list[dict] = []
        self.response = response
        self.error = error

    def compute_routes(self, body: dict) -> dict:
        self.calls.append(body)
        if self.error is not None:
            raise self.error
        return self.response


ROUTE_RESPONSE = {
    "routes": [
        {
            "distanceMeters": 12000,
            "duration": "1500s",
            "polyline": {"encodedPolyline": "_p~iF~ps|U_ulLnnqC"},
            "optimizedIntermediateWaypointIndex": [1, 0],
            "legs": [
                {
                    "steps": [
                        {
                            "navigationInstruction": {"maneuver": "DEPART", "instructions": "Head north on Broadway"},
                            "distanceMeters": 400,
                            "staticDuration": "60s",
                        },
                        {"navigationInstruction": {"maneuver": "TURN_LEFT", "instructions": ""}},
                    ]
                },
                {
                    "steps": [
                        {
                            "navigationInstruction": {"maneuver": "TURN_RIGHT", "instructions": "Turn right onto 5th Ave"},
                            "distanceMeters": 1800,
                            "staticDuration": "240s",
                        }
                    ]
                },
            ],
        }
    ]
}

TRIP = {
    "origin": {"id": "o", "address": "Origin St", "lat": 40.7, "lng": -74.0},
    "destination": {"id": "d", "address": "Destination Ave", "lat": 40.8, "lng": -73.9},
    "waypoints": [
        {"id": "w1", "address": "First", "lat": 40.71, "lng": -74.01},
        {"id": "w2", "address": "Second", "lat": 40.75, "lng": -73.95},
    ],
}


@pytest.fixture
def backend(monkeypatch: pytest.MonkeyPatch) -> DummyRoutes:
    dummy = DummyRoutes(ROUTE_RESPONSE)
    monkeypatch.setattr(routing_service, "RoutesClient", lambda *args, **kwargs: dummy)
    return dummy


@pytest.fixture
def api_client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setattr(settings, "google_maps_api_key", "test-key")
    return TestClient(create_app())


def test_compute_route_returns_enriched_envelope(api_client: TestClient, backend: DummyRoutes):
    response = api_client.post("/api/compute-route", json=TRIP)

    assert response.status_code == 200
    payload = response.json()
    route = payload["routes"][0]
    assert route["distanceMeters"] == 12000
    assert route["durationSeconds"] == 1500
    assert route["distanceText"] == "12.0 km"
    assert route["durationText"] == "25 mins"
    assert route["polyline"]["encodedPolyline"] == "_p~iF~ps|U_ulLnnqC"
    assert route["optimizedIntermediateWaypointIndex"] == [1, 0]
    assert [step["instruction"] for step in route["stepByStepDirections"]] == [
        "Head north on Broadway",
        "Turn right onto 5th Ave",
    ]
    assert route["stepByStepDirections"][1]["durationText"] == "4min"
    assert route["navigationUrl"] == (
        "https://www.google.com/maps/dir/40.7,-74.0/40.75,-73.95/40.71,-74.01/40.8,-73.9"
    )

    body = backend.calls[0]
    assert len(body["intermediates"]) == 2
    assert body["optimizeWaypointOrder"] is True


def test_missing_key_returns_500_without_calling_upstream(
    api_client: TestClient, backend: DummyRoutes, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setattr(settings, "google_maps_api_key", None)

    response = api_client.post("/api/compute-route", json=TRIP)

    assert response.status_code == 500
    assert response.json() == {"error": "Missing Google Maps API key"}
    assert backend.calls == []


def test_missing_key_is_reported_before_malformed_body(
    api_client: TestClient, backend: DummyRoutes, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setattr(settings, "google_maps_api_key", None)

    response = api_client.post(
        "/api/compute-route", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Missing Google Maps API key"}


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"origin": None},
        {"origin": {"lat": 40.7}},
        {"origin": {"lat": "north", "lng": -74.0}},
        {"origin": {"lat": 140.7, "lng": -74.0}},
        {"origin": {"lat": True, "lng": True}},
    ],
)
def test_missing_or_malformed_origin_returns_400(api_client: TestClient, backend: DummyRoutes, payload: dict):
    response = api_client.post("/api/compute-route", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Origin is required and must include lat/lng"}
    assert backend.calls == []


def test_malformed_waypoint_returns_400(api_client: TestClient, backend: DummyRoutes):
    payload = {"origin": {"lat": 40.7, "lng": -74.0}, "waypoints": [{"lat": 40.7}]}

    response = api_client.post("/api/compute-route", json=payload)

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid waypoints")


def test_invalid_json_returns_400(api_client: TestClient, backend: DummyRoutes):
    response = api_client.post(
        "/api/compute-route", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_upstream_status_is_forwarded(api_client: TestClient, backend: DummyRoutes):
    backend.error = UpstreamError(403, "API key not valid.")

    response = api_client.post("/api/compute-route", json=TRIP)

    assert response.status_code == 403
    assert response.json() == {"error": "API key not valid."}


def test_transport_failure_returns_generic_error(api_client: TestClient, backend: DummyRoutes):
    backend.error = TransportError(ConnectionError("dns failure"))

    response = api_client.post("/api/compute-route", json=TRIP)

    assert response.status_code == 502
    assert response.json() == {"error": "Failed to reach the routes service"}


def test_no_route_returns_404(api_client: TestClient, backend: DummyRoutes):
    backend.response = {"routes": []}

    response = api_client.post("/api/compute-route", json=TRIP)

    assert response.status_code == 404
    assert response.json() == {"error": "No route found for the requested trip"}


def test_unexpected_error_is_wrapped(api_client: TestClient, backend: DummyRoutes):
    backend.error = RuntimeError("boom")

    response = api_client.post("/api/compute-route", json=TRIP)

    assert response.status_code == 500
    assert response.json() == {"error": "Unexpected error: boom"}


def test_health_endpoints(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    assert api_client.get("/api/health").json() == {"status": "ok"}

    configured = api_client.get("/api/health/routes").json()
    assert configured["configured"] is True

    monkeypatch.setattr(settings, "google_maps_api_key", None)
    missing = api_client.get("/api/health/routes").json()
    assert missing["configured"] is False


def test_root_diagnostics(api_client: TestClient):
    payload = api_client.get("/").json()

    assert payload["status"] == "running"
    assert payload["health"] == "/api/health"
