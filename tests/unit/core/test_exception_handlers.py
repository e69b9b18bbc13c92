"""Unit tests for api_exception_handler."""

from __future__ import annotations

import pytest
from django.db import OperationalError
from rest_framework.exceptions import NotAuthenticated

from modules.core.exception_handlers import INTERNAL_ERROR_DETAIL, api_exception_handler
from modules.core.exceptions import DomainException
from modules.products.exceptions import InvalidArgument

pytestmark = pytest.mark.unit


class TestApiExceptionHandler:
    def test_domain_error_is_400_with_message(self):
        response = api_exception_handler(InvalidArgument("Product not found"), {})
        assert response.status_code == 400
        assert response.data == {"detail": "Product not found"}

    def test_invalid_argument_is_domain_exception(self):
        assert issubclass(InvalidArgument, DomainException)

    def test_api_exception_uses_drf_mapping(self):
        response = api_exception_handler(NotAuthenticated(), {})
        assert response.status_code == 401

    def test_unexpected_error_is_generic_500(self):
        try:
            raise OperationalError("connection refused to db-host:5432")
        except OperationalError as exc:
            response = api_exception_handler(exc, {})
        assert response.status_code == 500
        assert response.data == {"detail": INTERNAL_ERROR_DETAIL}
        assert "db-host" not in str(response.data)


class TestDomainExceptionMessage:
    def test_message_is_first_arg(self):
        assert DomainException("boom").message == "boom"

    def test_message_defaults_to_class_name(self):
        assert InvalidArgument().message == "InvalidArgument"
