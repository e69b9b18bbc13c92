import pytest

pytestmark = pytest.mark.integration


class TestCors:
    def test_configured_origin_is_allowed(self, auth_client):
        response = auth_client.get(
            "/api/products", HTTP_ORIGIN="http://localhost:3000"
        )
        assert response["Access-Control-Allow-Origin"] == "http://localhost:3000"

    def test_other_origin_gets_no_cors_header(self, auth_client):
        response = auth_client.get("/api/products", HTTP_ORIGIN="http://evil.test")
        assert "Access-Control-Allow-Origin" not in response

    def test_preflight_allowed(self, api_client):
        response = api_client.options(
            "/api/products",
            HTTP_ORIGIN="http://localhost:3000",
            HTTP_ACCESS_CONTROL_REQUEST_METHOD="POST",
        )
        assert response.status_code == 200
        assert response["Access-Control-Allow-Origin"] == "http://localhost:3000"
