"""
Tests for the HTTP adapter.

The validator is injected with a pinned clock so century resolution does not
depend on when the suite runs.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from rsaid.config import RsaIdConfig, WebConfig
from rsaid.engine.pipeline import IdValidator
from rsaid.web.api import app as default_app, create_app


@pytest.fixture
def client():
    """Create test client with a pinned validator."""
    app = create_app(validator=IdValidator(clock=lambda: date(2026, 10, 18)))
    return TestClient(app)


class TestBasicEndpoints:
    """Test basic API endpoints."""

    def test_root_endpoint(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert "rsaid API" in data["message"]
        assert data["version"] == "0.1.0"

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "rsaid-api"

    def test_module_level_app(self):
        response = TestClient(default_app).get("/health")
        assert response.status_code == 200


class TestValidateEndpoint:
    """POST /validate"""

    def test_valid_id(self, client):
        response = client.post("/validate", json={"id": "9001014800089"})
        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["date_of_birth"] == "1990-01-01"
        assert data["gender"] == "Female"
        assert data["citizenship"] == "SA Citizen"
        assert data["components"]["gender_code"] == 4800

    def test_pretty_printed(self, client):
        response = client.post("/validate", json={"id": "9001014800089"})
        assert response.text.startswith('{\n  "valid": true,\n')

    def test_custom_indent(self):
        cfg = RsaIdConfig(web=WebConfig(json_indent=4))
        c = TestClient(create_app(cfg, IdValidator(cfg, clock=lambda: date(2026, 10, 18))))
        response = c.post("/validate", json={"id": "123"})
        assert response.text.startswith('{\n    "valid": false')

    def test_invalid_id_is_200(self, client):
        response = client.post("/validate", json={"id": "9001014800085"})
        assert response.status_code == 200
        assert response.json() == {
            "valid": False,
            "error": "Invalid check digit (Luhn validation failed)",
        }

    def test_whitespace_in_id(self, client):
        response = client.post("/validate", json={"id": " 900101 4800089 "})
        assert response.json()["id_number"] == "9001014800089"

    @pytest.mark.parametrize("body", [{"id": 9001014800089}, {"id": None}, {}, {"id": ["9001014800089"]}])
    def test_non_string_id_is_400(self, client, body):
        response = client.post("/validate", json=body)
        assert response.status_code == 400
        assert response.json()["detail"] == "ID must be a string"


class TestFormEndpoint:
    """GET /form"""

    def test_empty_form(self, client):
        response = client.get("/form")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<form" in response.text
        assert "result valid" not in response.text
        assert "result invalid" not in response.text

    def test_valid_result_styling(self, client):
        response = client.get("/form", params={"id": "8001015009087"})
        assert "result valid" in response.text
        assert "1980-01-01" in response.text

    def test_invalid_result_styling(self, client):
        response = client.get("/form", params={"id": "9002305000082"})
        assert "result invalid" in response.text
        assert "Invalid birth date in ID" in response.text

    def test_input_is_escaped(self, client):
        response = client.get("/form", params={"id": "<script>x</script>"})
        assert "<script>x</script>" not in response.text
        assert "&lt;script&gt;" in response.text

    def test_long_input_renders_format_error(self, client):
        response = client.get("/form", params={"id": "1" * 65})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "result invalid" in response.text
        assert "Invalid ID format: must be exactly 13 digits" in response.text
