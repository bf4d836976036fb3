"""Fixtures for handler tests: a patched httpx.AsyncClient."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest


@pytest.fixture
def mock_http():
    """Cliente httpx simulado; configurar ``mock_http.request`` en cada test."""
    with patch("mcp_hub.handlers.connector_handler.httpx.AsyncClient") as client_cls:
        client = client_cls.return_value.__aenter__.return_value
        client.request = AsyncMock()
        yield client


@pytest.fixture
def make_response():
    """Factory de httpx.Response reales (raise_for_status necesita el request)."""

    def _make(status_code, payload, method="GET", url="https://api.example.com/"):
        return httpx.Response(status_code, json=payload, request=httpx.Request(method, url))

    return _make
