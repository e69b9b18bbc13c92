import base64

import pytest

from rest_framework.test import APIClient

TEST_USERNAME = "testuser"
TEST_PASSWORD = "testpass123"


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return f"Basic {token}"


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def auth_client():
    """APIClient sending the ``test`` profile's Basic credentials."""
    client = APIClient()
    client.credentials(
        HTTP_AUTHORIZATION=basic_auth_header(TEST_USERNAME, TEST_PASSWORD)
    )
    return client


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid
