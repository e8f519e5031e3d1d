"""HTTP API round trips through FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def _beam(primary=4.0, secondary=0.0, properties=None):
    return {
        "primary_span": primary,
        "secondary_span": secondary,
        "material": {"name": "CLT", "properties": properties or {"EI": 1.0}},
    }


class TestAnalyze:
    def test_simply_supported_moment(self, client):
        resp = client.post(
            "/api/analyze",
            json={"beam": _beam(), "load": 10, "condition": "simply-supported",
                  "quantity": "bending_moment", "positions": [2.0, 5.0]},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["reactions"]["left_kN"] == 20.0
        assert body["values"][0] == {"kind": "continuous", "points": [{"x": 2.0, "y": 20.0}]}
        assert body["values"][1]["points"][0]["y"] is None

    def test_two_span_shear_at_support(self, client):
        resp = client.post(
            "/api/analyze",
            json={"beam": _beam(3.0, 2.0), "load": 5, "condition": "two-span-unequal",
                  "quantity": "shear_force", "positions": [3.0]},
        )
        assert resp.status_code == 200
        body = resp.json()
        value = body["values"][0]
        assert value["kind"] == "discontinuous"
        left, right = value["points"]
        assert right["y"] - left["y"] == pytest.approx(body["reactions"]["interior_kN"], abs=1e-5)
        total = sum(body["reactions"][k] for k in ("left_kN", "interior_kN", "right_kN"))
        assert total == pytest.approx(25.0, abs=1e-5)

    def test_unknown_condition_is_422(self, client):
        resp = client.post("/api/analyze", json={"beam": _beam(), "load": 10, "condition": "unknown"})
        assert resp.status_code == 422
        assert "Invalid condition" in resp.json()["detail"]

    def test_missing_ei_is_422(self, client):
        resp = client.post(
            "/api/analyze",
            json={"beam": _beam(properties={"GA": 1.0}), "load": 10, "quantity": "deflection"},
        )
        assert resp.status_code == 422
        assert "EI" in resp.json()["detail"]

    def test_negative_span_is_422(self, client):
        resp = client.post("/api/analyze", json={"beam": _beam(-1.0), "load": 10})
        assert resp.status_code == 422

    def test_nan_load_is_422(self, client):
        body = '{"beam": {"primary_span": 4.0, "material": {"properties": {"EI": 1.0}}}, "load": NaN}'
        resp = client.post("/api/analyze", content=body, headers={"Content-Type": "application/json"})
        assert resp.status_code == 422


class TestDiagrams:
    def test_two_span_series(self, client):
        resp = client.post(
            "/api/diagrams",
            json={"beam": _beam(3.0, 2.0), "load": 5, "condition": "two-span-unequal",
                  "quantity": "shear_force", "step": 0.5},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["axis_title"] == "Shear Force (kN)"
        assert body["primary"][-1]["x"] == 3.0
        assert body["secondary"][0]["x"] == 3.0
        assert len(body["labels"]) == len(body["primary"]) + len(body["secondary"])

    def test_bad_step_is_422(self, client):
        resp = client.post("/api/diagrams", json={"beam": _beam(), "load": 10, "step": 0})
        assert resp.status_code == 422

    def test_tiny_step_is_422(self, client):
        resp = client.post("/api/diagrams", json={"beam": _beam(), "load": 10, "step": 1e-5})
        assert resp.status_code == 422
        assert "samples" in resp.json()["detail"]

    def test_infinite_span_is_422(self, client):
        body = '{"beam": {"primary_span": Infinity, "material": {"properties": {"EI": 1.0}}}, "load": 10}'
        resp = client.post("/api/diagrams", content=body, headers={"Content-Type": "application/json"})
        assert resp.status_code == 422


class TestLayupAndMeta:
    def test_layup_bands(self, client):
        resp = client.post(
            "/api/layup",
            json={"layers": [
                {"label": "L1", "thickness": 40, "grade": "C24", "angle": 0},
                {"label": "L2", "thickness": 20, "grade": "C16", "angle": 90},
                {"label": "L3", "thickness": 40, "grade": "C24", "angle": 0},
            ]},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["total_thickness_mm"] == 100
        assert [b["label"] for b in body["bands"]] == ["L3", "L2", "L1"]
        assert body["bands"][1]["grain"] == "perpendicular"

    def test_empty_layup_is_422(self, client):
        assert client.post("/api/layup", json={"layers": []}).status_code == 422

    def test_conditions(self, client):
        tags = [c["tag"] for c in client.get("/api/conditions").json()]
        assert tags == ["simply-supported", "two-span-unequal"]

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}
