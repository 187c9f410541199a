"""Unit tests for error handlers and the error catalog."""

import json
from unittest.mock import Mock

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from category_suggest.api.middleware.error_handler import (
    handle_generic_error,
    handle_validation_error,
)
from category_suggest.core.errors import get_error, is_retryable
from category_suggest.core.exceptions import CategorySearchError, TransportError


def make_request(path: str = "/api/v1/categories/suggest") -> Mock:
    request = Mock(spec=Request)
    request.url.path = path
    request.method = "GET"
    return request


class TestValidationErrorHandler:
    @pytest.mark.asyncio
    async def test_validation_error_lists_fields(self):
        exc = RequestValidationError(
            [{"loc": ("query", "prefix"), "msg": "String should have at most 255 characters"}]
        )

        response = await handle_validation_error(make_request(), exc)

        assert response.status_code == 400
        content = json.loads(response.body.decode())
        assert content["error_code"] == "VAL_001"
        assert content["message"] == "query.prefix: String should have at most 255 characters"


class TestGenericErrorHandler:
    @pytest.mark.asyncio
    async def test_generic_error_hides_details(self):
        response = await handle_generic_error(make_request(), RuntimeError("secret detail"))

        assert response.status_code == 500
        body = response.body.decode()
        assert "SYS_001" in body
        assert "secret detail" not in body


class TestErrorCatalog:
    def test_unknown_code_returns_generic(self):
        error = get_error("NOPE_999")
        assert error["code"] == "UNKNOWN"
        assert error["retry_allowed"] is True

    def test_is_retryable(self):
        assert is_retryable("LOOKUP_001")

    def test_transport_error_defaults(self):
        exc = TransportError()
        assert exc.error_code == "LOOKUP_001"
        assert exc.details == {}
        assert isinstance(exc, CategorySearchError)


class TestAppErrorHandlers:
    def test_lookup_errors_have_no_http_handler(self):
        from category_suggest.main import create_app

        handlers = create_app().exception_handlers

        # Lookup failures are absorbed into empty results before reaching a route.
        assert CategorySearchError not in handlers
        assert TransportError not in handlers
        assert RequestValidationError in handlers
