# mcp_hub/core/auth.py

import secrets
from typing import Optional

from fastapi import Header, Request

from mcp_hub.core.config import settings
from mcp_hub.exceptions.api_exceptions import AuthenticationError, ServerConfigurationException
from mcp_hub.exceptions.logging_utils import get_hub_logger

logger = get_hub_logger(__name__)


def resolve_internal_api_key() -> str:
    """
    Devuelve la clave interna que protege /mcp.
    Usa MCP_SERVER_INTERNAL_API_KEY y, si no existe, el fallback de desarrollo.
    """
    if settings.MCP_SERVER_INTERNAL_API_KEY:
        logger.info("Using MCP_SERVER_INTERNAL_API_KEY")
        return settings.MCP_SERVER_INTERNAL_API_KEY

    if settings.MCP_SERVER_INTERNAL_API_KEY_FALLBACK:
        logger.info("MCP_SERVER_INTERNAL_API_KEY not set, using fallback key for local development")
        return settings.MCP_SERVER_INTERNAL_API_KEY_FALLBACK

    raise RuntimeError(
        "Neither MCP_SERVER_INTERNAL_API_KEY nor MCP_SERVER_INTERNAL_API_KEY_FALLBACK is set."
    )


async def verify_internal_api_key(
    request: Request,
    x_internal_api_key: Optional[str] = Header(default=None),
) -> None:
    """Dependencia FastAPI: valida el header x-internal-api-key"""
    expected = getattr(request.app.state, "internal_api_key", None)
    if not expected:
        logger.error("Internal API key is not configured, server started incorrectly")
        raise ServerConfigurationException()

    if not x_internal_api_key or not secrets.compare_digest(x_internal_api_key, expected):
        raise AuthenticationError(context={"path": str(request.url.path)})
