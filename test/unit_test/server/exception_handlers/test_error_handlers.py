"""
Unit tests for server exception handlers.

Covers the mapping of booking domain errors to HTTP responses and the
global handler for unexpected exceptions.
"""

import json
from datetime import date
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from airbb.core.errors import AirBBError, ReservationConflictError
from airbb.server.exception_handlers import setup_exception_handlers
from airbb.server.exception_handlers.global_handler import airbb_error_handler, global_exception_handler


@pytest.fixture
def mock_request():
    request = Mock(spec=Request)
    request.method = "POST"
    request.url.path = "/api/v1/reservations"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


class TestDomainErrorHandler:
    async def test_uses_error_status_and_message(self, mock_request):
        exc = ReservationConflictError(1, date(2030, 1, 1), date(2030, 1, 3))
        response = await airbb_error_handler(mock_request, exc)

        assert response.status_code == 409
        assert json.loads(response.body) == {"detail": exc.message}


class TestGlobalExceptionHandler:
    async def test_logs_and_returns_500(self, mock_request):
        exc = RuntimeError("boom")
        with patch("airbb.server.exception_handlers.global_handler.logger") as mock_logger:
            response = await global_exception_handler(mock_request, exc)

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["extra"]["error_type"] == "RuntimeError"
        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["detail"] == "Internal server error"
        assert body["error_id"] == id(exc)


class TestSetupExceptionHandlers:
    async def test_registered_handlers_apply_to_routes(self):
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/domain")
        async def domain_error():
            raise AirBBError("bad request")

        @app.get("/crash")
        async def crash():
            raise ValueError("unexpected")

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://localhost") as client:
            domain = await client.get("/domain")
            assert domain.status_code == 400
            assert domain.json() == {"detail": "bad request"}

            with patch("airbb.server.exception_handlers.global_handler.logger"):
                crashed = await client.get("/crash")
            assert crashed.status_code == 500
            assert crashed.json()["error_type"] == "ValueError"
