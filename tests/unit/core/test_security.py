"""Unit tests for CredentialStore and ProfileBasicAuthentication."""

from __future__ import annotations

import base64

import pytest
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.test import APIRequestFactory

from modules.core.authentication import ProfileBasicAuthentication
from modules.core.security import CredentialStore, InMemoryUser

pytestmark = pytest.mark.unit

USERS = {
    "dev": [("devuser", "devpass")],
    "test": [("testuser", "testpass"), ("blank", "")],
}


class TestCredentialStore:
    def test_loads_selected_profile_only(self):
        store = CredentialStore.for_profile("dev", USERS)
        assert store.profile == "dev"
        assert store.usernames == ["devuser"]

    def test_unknown_profile_raises(self):
        with pytest.raises(ImproperlyConfigured, match="Unknown security profile"):
            CredentialStore.for_profile("prod", USERS)

    def test_empty_password_user_is_skipped(self):
        store = CredentialStore.for_profile("test", USERS)
        assert store.usernames == ["testuser"]
        assert store.authenticate("blank", "") is None

    def test_passwords_are_hashed(self):
        store = CredentialStore.for_profile("dev", USERS)
        credential = store._credentials["devuser"]
        assert credential.password_hash != "devpass"
        assert "devpass" not in repr(credential)

    def test_authenticate_success(self):
        store = CredentialStore.for_profile("dev", USERS)
        user = store.authenticate("devuser", "devpass")
        assert user == InMemoryUser(username="devuser")
        assert user.is_authenticated is True
        assert user.roles == ("USER",)

    def test_wrong_password(self):
        store = CredentialStore.for_profile("dev", USERS)
        assert store.authenticate("devuser", "nope") is None

    def test_unknown_user(self):
        store = CredentialStore.for_profile("dev", USERS)
        assert store.authenticate("testuser", "testpass") is None

    def test_len(self):
        assert len(CredentialStore.for_profile("test", USERS)) == 1


class TestStartupWiring:
    def test_core_app_builds_test_profile_store(self):
        store = apps.get_app_config("core").credentials
        assert store.profile == "test"
        assert store.usernames == ["testuser"]


def _request(username: str, password: str):
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return APIRequestFactory().get("/api/products", HTTP_AUTHORIZATION=f"Basic {token}")


class TestProfileBasicAuthentication:
    def test_valid_credentials(self):
        user, auth = ProfileBasicAuthentication().authenticate(
            _request("testuser", "testpass123")
        )
        assert user.username == "testuser"
        assert auth is None

    def test_invalid_credentials(self):
        with pytest.raises(AuthenticationFailed):
            ProfileBasicAuthentication().authenticate(_request("testuser", "wrong"))

    def test_no_header_returns_none(self):
        request = APIRequestFactory().get("/api/products")
        assert ProfileBasicAuthentication().authenticate(request) is None

    def test_www_authenticate_header(self):
        request = APIRequestFactory().get("/api/products")
        assert (
            ProfileBasicAuthentication().authenticate_header(request)
            == 'Basic realm="api"'
        )
