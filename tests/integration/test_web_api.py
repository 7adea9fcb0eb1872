"""Integration tests for the REST API."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from mezzanine.web.app import create_app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def warehouse() -> dict:
    return json.loads((FIXTURES_PATH / "warehouse.json").read_text())


@pytest.fixture
def empty() -> dict:
    return {"length": 9400, "width": 4000, "height": 3000, "load_class": 250, "accessories": []}


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestEvaluationEndpoints:
    """Tests for pricing, perimeter and placements."""

    def test_pricing(self, client: TestClient) -> None:
        config = {"length": 10000, "width": 5000, "height": 3000, "load_class": 350}
        response = client.post("/api/v1/pricing", json={"config": config})
        assert response.status_code == 200
        data = response.json()
        assert data["total_price"] == pytest.approx(96000)
        assert data["load_price"] == pytest.approx(16000)
        assert data["square_meters"] == pytest.approx(50)

    def test_perimeter(self, client: TestClient, warehouse: dict) -> None:
        response = client.post("/api/v1/perimeter", json={"config": warehouse})
        assert response.status_code == 200
        data = response.json()
        assert data["perimeter"] == pytest.approx(26.8)
        assert data["available"] == pytest.approx(23.8)
        assert data["stair_occupancy"] == pytest.approx(1.0)
        assert data["gate_occupancy"] == pytest.approx(2.0)
        assert data["railing_length"] == pytest.approx(10)

    def test_perimeter_with_corner_stair(self, client: TestClient, empty: dict) -> None:
        empty["accessories"] = [{"kind": "stair", "id": "c", "variant": "corner-1.2m"}]
        data = client.post("/api/v1/perimeter", json={"config": empty}).json()
        assert data["perimeter"] == pytest.approx(32.6)
        assert data["available"] == 32.0

    def test_placements(self, client: TestClient, warehouse: dict) -> None:
        response = client.post("/api/v1/placements", json={"config": warehouse})
        assert response.status_code == 200
        data = response.json()
        assert data["complete"] is True
        assert data["placed"] == pytest.approx(10)
        first = data["placements"][0]
        assert first["edge"] == "front"
        assert first["center"] == pytest.approx(0.85)
        assert first["length"] == pytest.approx(1.7)

    def test_invalid_config(self, client: TestClient, empty: dict) -> None:
        empty["accessories"] = [{"kind": "ladder", "id": "x"}]
        response = client.post("/api/v1/pricing", json={"config": empty})
        assert response.status_code == 422


class TestMutationEndpoints:
    """Tests for the accessory and dimension mutations."""

    def test_add_railing_with_reduction(self, client: TestClient, empty: dict) -> None:
        response = client.post(
            "/api/v1/accessories",
            json={"config": empty, "kind": "railing", "params": {"segment_length": 40}},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["railing_reduction"] == pytest.approx(14)
        assert data["note"] == "Railings reduced by 14 m to fit the available perimeter"
        assert data["config"]["accessories"][0]["segment_length"] == 26

    def test_second_corner_stair_conflict(self, client: TestClient, empty: dict) -> None:
        empty["accessories"] = [{"kind": "stair", "id": "c", "variant": "corner-1m"}]
        response = client.post(
            "/api/v1/accessories",
            json={"config": empty, "kind": "stair", "params": {"variant": "corner-1.2m"}},
        )
        assert response.status_code == 409
        data = response.json()
        assert data["error_type"] == "second_corner_stair"
        assert data["details"]["deficit"] is None

    def test_add_unknown_parameter(self, client: TestClient, empty: dict) -> None:
        response = client.post(
            "/api/v1/accessories",
            json={"config": empty, "kind": "pallet_gate", "params": {"segment_length": 3}},
        )
        assert response.status_code == 422
        assert response.json()["detail"]["error_type"] == "invalid_parameters"

    def test_update_railing_overflow(self, client: TestClient, warehouse: dict) -> None:
        response = client.patch(
            "/api/v1/accessories/railing-1",
            json={"config": warehouse, "patch": {"segment_length": 30}},
        )
        assert response.status_code == 409
        details = response.json()["details"]
        assert details["available"] == pytest.approx(23.8)
        assert details["requested"] == pytest.approx(30)
        assert details["deficit"] == pytest.approx(6.2)

    def test_update_unknown_accessory(self, client: TestClient, warehouse: dict) -> None:
        response = client.patch(
            "/api/v1/accessories/nope",
            json={"config": warehouse, "patch": {"quantity": 2}},
        )
        assert response.status_code == 404
        assert response.json()["details"] == {"id": "nope"}

    def test_update_requires_patch(self, client: TestClient, warehouse: dict) -> None:
        response = client.patch(
            "/api/v1/accessories/gate-1", json={"config": warehouse, "patch": {}}
        )
        assert response.status_code == 422

    def test_remove(self, client: TestClient, warehouse: dict) -> None:
        response = client.post("/api/v1/accessories/gate-1/remove", json={"config": warehouse})
        assert response.status_code == 200
        ids = [a["id"] for a in response.json()["config"]["accessories"]]
        assert ids == ["stair-1", "railing-1"]

    def test_dimensions(self, client: TestClient, warehouse: dict) -> None:
        response = client.post(
            "/api/v1/dimensions",
            json={"config": warehouse, "length": 3000, "width": 2000, "load_class": 500},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["config"]["load_class"] == 500
        assert data["config"]["length"] == 3000
        assert data["removed_railings"] == []
        assert data["config"]["accessories"][2]["segment_length"] == 7

    def test_dimensions_invalid_load_class(self, client: TestClient, warehouse: dict) -> None:
        response = client.post(
            "/api/v1/dimensions", json={"config": warehouse, "load_class": 300}
        )
        assert response.status_code == 422


class TestParameterValidation:
    """Wrongly typed accessory parameters are rejected, not crashed on."""

    @pytest.mark.parametrize(
        "params",
        [{"quantity": None}, {"segment_length": None}, {"segment_length": "five"}],
    )
    def test_add_rejects_bad_params(self, client: TestClient, empty: dict, params: dict) -> None:
        response = client.post(
            "/api/v1/accessories",
            json={"config": empty, "kind": "railing", "params": params},
        )
        assert response.status_code == 422
        assert response.json()["detail"]["error_type"] == "invalid_parameters"

    @pytest.mark.parametrize(
        "patch",
        [{"quantity": None}, {"segment_length": None}, {"opening_width": "wide"}],
    )
    def test_update_rejects_bad_patch(
        self, client: TestClient, warehouse: dict, patch: dict
    ) -> None:
        accessory_id = "gate-1" if "opening_width" in patch else "railing-1"
        response = client.patch(
            f"/api/v1/accessories/{accessory_id}",
            json={"config": warehouse, "patch": patch},
        )
        assert response.status_code == 422
        assert response.json()["detail"]["error_type"] == "invalid_parameters"

    def test_numeric_string_is_converted(self, client: TestClient, empty: dict) -> None:
        response = client.post(
            "/api/v1/accessories",
            json={"config": empty, "kind": "railing", "params": {"segment_length": "5"}},
        )
        assert response.status_code == 200
        assert response.json()["config"]["accessories"][0]["segment_length"] == 5

    def test_camel_case_record(self, client: TestClient) -> None:
        config = {
            "loadClass": 350,
            "accessories": [{"kind": "palletGate", "id": "g", "openingWidth": 2500}],
        }
        response = client.post("/api/v1/perimeter", json={"config": config})
        assert response.status_code == 200
        assert response.json()["gate_occupancy"] == pytest.approx(2.5)


class TestCappedPlacements:
    def test_corner_stair_railing_reported_as_capped(
        self, client: TestClient, empty: dict
    ) -> None:
        empty["accessories"] = [
            {"kind": "stair", "id": "c", "variant": "corner-1.2m"},
            {"kind": "railing", "id": "r", "segment_length": 32},
        ]
        data = client.post("/api/v1/placements", json={"config": empty}).json()
        assert data["placed"] == pytest.approx(26.6)
        assert data["placeable"] == pytest.approx(26.6)
        assert data["capped"] is True
        assert data["complete"] is False
