import json
import logging
import uuid

import pytest

from tests.conftest import TEST_PASSWORD, TEST_USERNAME, basic_auth_header

pytestmark = pytest.mark.integration


def _records_with(caplog, text):
    return [r for r in caplog.records if text in r.getMessage()]


class TestCorrelationIdOnProductRoutes:
    def test_echoes_request_id_on_listing(self, auth_client):
        response = auth_client.get(
            "/api/products", HTTP_X_REQUEST_ID="catalog-list-123"
        )
        assert response.status_code == 200
        assert response["X-Request-ID"] == "catalog-list-123"

    def test_generates_uuid_on_create(self, auth_client):
        response = auth_client.post(
            "/api/products", {"name": "Pen", "price": "2.00"}, format="json"
        )
        assert response.status_code == 201
        request_id = response["X-Request-ID"]
        assert str(uuid.UUID(request_id, version=4)) == request_id

    def test_each_request_gets_its_own_id(self, auth_client):
        first = auth_client.get("/api/products")
        second = auth_client.get("/api/products")
        assert first["X-Request-ID"] != second["X-Request-ID"]

    def test_header_set_on_rejected_credentials(self, api_client_with_correlation):
        api_client, cid = api_client_with_correlation
        response = api_client.get("/api/products")
        assert response.status_code == 401
        assert response["X-Request-ID"] == cid

    def test_header_set_on_domain_errors(self, auth_client):
        response = auth_client.delete(
            "/api/products/999999", HTTP_X_REQUEST_ID="missing-delete-7"
        )
        assert response.status_code == 400
        assert response["X-Request-ID"] == "missing-delete-7"


class TestCorrelationIdInLogs:
    def test_service_events_carry_request_id(self, auth_client, caplog):
        with caplog.at_level(logging.INFO):
            auth_client.post(
                "/api/products",
                {"name": "Pen", "price": "2.00"},
                format="json",
                HTTP_X_REQUEST_ID="create-log-456",
            )
        created = _records_with(caplog, "product.created")
        assert created, [r.getMessage() for r in caplog.records]
        assert "create-log-456" in created[0].getMessage()

    def test_rejections_carry_request_id(self, auth_client, caplog):
        with caplog.at_level(logging.INFO):
            auth_client.post(
                "/api/products",
                data=json.dumps({"name": "", "price": "1.00"}),
                content_type="application/json",
                HTTP_X_REQUEST_ID="reject-log-789",
            )
        rejected = _records_with(caplog, "product.rejected")
        assert rejected
        assert "reject-log-789" in rejected[0].getMessage()

    def test_request_finished_logged_with_status(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get(
                "/api/products",
                HTTP_AUTHORIZATION=basic_auth_header(TEST_USERNAME, TEST_PASSWORD),
                HTTP_X_REQUEST_ID="finish-log-000",
            )
        finished = _records_with(caplog, "request_finished")
        assert finished
        assert "finish-log-000" in finished[0].getMessage()
