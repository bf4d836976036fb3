"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest
from fastapi import FastAPI

from mcp_hub.exceptions import register_exception_handlers
from mcp_hub.routers import discovery_router, mcp_router
from mcp_hub.stores import InMemoryStore, default_seed

TEST_API_KEY = "test-internal-key"


@pytest.fixture
def store():
    """Store sembrado con los datos por defecto."""
    return InMemoryStore(default_seed)


@pytest.fixture
def fixed_now():
    """Hora fija para payloads deterministas."""
    return datetime(2024, 5, 17, 9, 30, 15, 123000, tzinfo=timezone.utc)


@pytest.fixture
def app(store):
    """FastAPI app con los routers del hub, sin lifespan."""
    app = FastAPI()
    app.include_router(discovery_router.router)
    app.include_router(mcp_router.router)
    register_exception_handlers(app)
    app.state.internal_api_key = TEST_API_KEY
    app.state.mock_store = store
    return app


@pytest.fixture
def auth_headers():
    return {"x-internal-api-key": TEST_API_KEY}
