"""Integration tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from ledwall.domain import CabinetType, PredefinedRatio
from ledwall.web import create_app
from ledwall.web.schemas import ErrorResponseSchema


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(create_app())


class TestCalculateEndpoint:
    """Tests for POST /api/v1/calculate."""

    def test_width_height(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate", json={"width": 4.8, "height": 2.7, "unit": "meters"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["unit"] == "meters"
        assert data["geometry"]["width"] == pytest.approx(4800.0)
        assert [r["cabinet"]["name"] for r in data["results"]] == ["16:9", "1:1"]
        assert data["results"][0]["lower"]["columns"] == 8
        assert data["results"][0]["upper"]["rows"] == 9

    def test_ratio_text_and_unit_alias(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate", json={"width": 4.8, "ratio": "16:9", "unit": "meter"}
        )

        assert response.status_code == 200
        assert response.json()["geometry"]["height"] == pytest.approx(2700.0)

    def test_default_unit_is_meters(self, client: TestClient) -> None:
        response = client.post("/api/v1/calculate", json={"width": 2, "height": 1})

        assert response.status_code == 200
        assert response.json()["geometry"]["ratio"] == pytest.approx(2.0)

    def test_absent_candidate_is_null(self, client: TestClient) -> None:
        response = client.post("/api/v1/calculate", json={"width": 1, "height": 0.15})

        assert response.status_code == 200
        assert response.json()["results"][0]["lower"] is None

    def test_insufficient_inputs(self, client: TestClient) -> None:
        response = client.post("/api/v1/calculate", json={"width": 4.8})

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "insufficient_inputs"
        assert len(data["details"]) == 1

    def test_error_body_matches_documented_schema(self, client: TestClient) -> None:
        response = client.post("/api/v1/calculate", json={"width": 1, "diagonal": 0.5})

        assert response.status_code == 422
        body = ErrorResponseSchema.model_validate(response.json())
        assert body.error_type == "inconsistent_geometry"
        assert "Diagonal" in body.details[0]["message"]

    def test_zero_ratio_text_counts_as_absent(self, client: TestClient) -> None:
        """"0" as text is ignored the same way as the number 0."""
        for ratio in ("0", 0):
            response = client.post(
                "/api/v1/calculate", json={"width": 4.8, "height": 2.7, "ratio": ratio}
            )

            assert response.status_code == 200
            assert response.json()["geometry"]["ratio"] == pytest.approx(16 / 9)

    def test_zero_ratio_text_alone_is_insufficient(self, client: TestClient) -> None:
        response = client.post("/api/v1/calculate", json={"width": 4.8, "ratio": "0:9"})

        assert response.status_code == 422
        assert response.json()["error_type"] == "insufficient_inputs"

    def test_out_of_range(self, client: TestClient) -> None:
        response = client.post("/api/v1/calculate", json={"width": 500, "ratio": 1})

        assert response.status_code == 422
        assert response.json()["error_type"] == "out_of_range"

    def test_invalid_unit(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate", json={"width": 1, "height": 1, "unit": "yards"}
        )

        assert response.status_code == 422


class TestCatalogEndpoints:
    """Tests for catalog and health endpoints."""

    def test_cabinets(self, client: TestClient) -> None:
        response = client.get("/api/v1/cabinets")

        assert response.status_code == 200
        data = response.json()
        assert [c["name"] for c in data] == ["16:9", "1:1"]
        assert data[0]["ratio"] == pytest.approx(16 / 9)

    def test_ratios(self, client: TestClient) -> None:
        response = client.get("/api/v1/ratios")

        assert response.status_code == 200
        assert len(response.json()) == 9

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestOpenApi:
    """Tests for the generated OpenAPI document."""

    def test_calculate_documents_error_response(self, client: TestClient) -> None:
        schema = client.get("/openapi.json").json()

        error = schema["paths"]["/api/v1/calculate"]["post"]["responses"]["422"]
        ref = error["content"]["application/json"]["schema"]["$ref"]
        assert ref == "#/components/schemas/ErrorResponseSchema"
        assert "ErrorResponseSchema" in schema["components"]["schemas"]


class TestCustomCatalog:
    """Tests for an app built around its own catalog."""

    @pytest.fixture
    def custom_client(self) -> TestClient:
        app = create_app(
            cabinets=[CabinetType(name="2:1", width=1000.0, height=500.0)],
            ratios=[PredefinedRatio(label="21:9", value=21 / 9)],
        )
        return TestClient(app)

    def test_cabinets(self, custom_client: TestClient) -> None:
        response = custom_client.get("/api/v1/cabinets")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["2:1"]

    def test_ratios(self, custom_client: TestClient) -> None:
        response = custom_client.get("/api/v1/ratios")

        assert response.status_code == 200
        assert [r["label"] for r in response.json()] == ["21:9"]

    def test_calculate_uses_catalog(self, custom_client: TestClient) -> None:
        response = custom_client.post(
            "/api/v1/calculate", json={"width": 4, "height": 2}
        )

        assert response.status_code == 200
        results = response.json()["results"]
        assert len(results) == 1
        assert results[0]["lower"]["columns"] == 4
        assert results[0]["lower"]["rows"] == 4

    def test_default_app_unaffected(self, client: TestClient) -> None:
        assert len(client.get("/api/v1/cabinets").json()) == 2
