from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.dispatch.main import create_app


def _stop(sid: str, lat: float | None, lon: float | None) -> dict:
    return {"identifier": sid, "label": f"ORD-{sid}", "latitude": lat, "longitude": lon}


@pytest.fixture
def api_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    from src.dispatch.persistence.filesystem import FileStorage
    from src.dispatch.services.routing import service as routing_service

    monkeypatch.setattr(routing_service, "FileStorage", lambda: FileStorage(root=tmp_path))

    return TestClient(create_app())


def test_root_and_health(api_client: TestClient):
    root = api_client.get("/")
    assert root.status_code == 200
    assert root.json()["health"] == "/api/health"

    health = api_client.get("/api/health")
    assert health.status_code == 200
    assert health.json() == {"status": "ok"}


def test_optimize_endpoint(api_client: TestClient, tmp_path: Path):
    payload = {
        "route_id": "RT-000007",
        "stops": [_stop("A", 0.0, 0.0), _stop("B", 0.0, 2.0), _stop("C", 0.0, 1.0), _stop("D", None, None)],
        "persist": True,
    }

    response = api_client.post("/api/routes/optimize", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["sequence"] == ["A", "C", "B"]
    assert body["algorithm"] == "nearest_neighbor"
    assert body["stops_optimized"] == 3
    assert body["skipped_stop_ids"] == ["D"]
    assert body["estimated_duration"] == 349

    run_dirs = list((tmp_path / "outputs").glob("route_RT-000007_*"))
    assert run_dirs
    assert (run_dirs[0] / "summary.json").exists()
    assert (run_dirs[0] / "sequence.csv").exists()


def test_optimize_endpoint_empty_route_is_bad_request(api_client: TestClient):
    response = api_client.post("/api/routes/optimize", json={"stops": []})

    assert response.status_code == 400
    assert "no stops" in response.json()["detail"]


def test_optimize_endpoint_without_coordinates_is_bad_request(api_client: TestClient):
    response = api_client.post("/api/routes/optimize", json={"stops": [_stop("A", None, None)]})

    assert response.status_code == 400


def test_optimize_endpoint_rejects_duplicate_identifiers(api_client: TestClient):
    payload = {"stops": [_stop("A", 0.0, 0.0), _stop("A", 0.0, 1.0)]}

    response = api_client.post("/api/routes/optimize", json=payload)

    assert response.status_code == 422


def test_optimize_endpoint_rejects_empty_identifier(api_client: TestClient):
    response = api_client.post("/api/routes/optimize", json={"stops": [_stop("", 0.0, 0.0)]})

    assert response.status_code == 422


def test_optimize_endpoint_reports_unexpected_errors(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    from src.dispatch.services.routing import service as routing_service

    def broken(stops):
        raise RuntimeError("matrix exploded")

    monkeypatch.setattr(routing_service, "optimize_route_nearest_neighbor", broken)

    response = api_client.post("/api/routes/optimize", json={"stops": [_stop("A", 0.0, 0.0)]})

    assert response.status_code == 500
    assert "matrix exploded" in response.json()["detail"]


def test_distance_endpoint(api_client: TestClient):
    payload = {
        "stops": [_stop("A", 0.0, 0.0), _stop("B", 0.0, 1.0), _stop("C", 0.0, 2.0)],
        "sequence": ["C", "A", "B"],
    }

    response = api_client.post("/api/routes/distance", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["hops"] == 2
    assert body["total_distance"] == pytest.approx(333.58, abs=0.01)


def test_optimize_endpoint_rejects_path_like_route_id(api_client: TestClient, tmp_path: Path):
    payload = {
        "route_id": "../../../escaped/x",
        "stops": [_stop("A", 0.0, 0.0), _stop("B", 0.0, 1.0)],
        "persist": True,
    }

    response = api_client.post("/api/routes/optimize", json=payload)

    assert response.status_code == 422
    assert not list(tmp_path.rglob("summary.json"))
