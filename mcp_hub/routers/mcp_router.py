# mcp_hub/routers/mcp_router.py

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Request

from mcp_hub.connectors.factory import get_registered_action
from mcp_hub.core.auth import verify_internal_api_key
from mcp_hub.dtos.mcp_request_dto import McpRequestDTO
from mcp_hub.exceptions.api_exceptions import (
    HandlerExecutionException,
    InvalidDataException,
    ResourceNotFoundException,
)
from mcp_hub.exceptions.logging_utils import get_hub_logger, sanitize_sensitive_data

logger = get_hub_logger(__name__)

router = APIRouter(
    prefix="/mcp",
    tags=["mcp"],
    dependencies=[Depends(verify_internal_api_key)],
)


@router.post(
    "/{provider}/{action}",
    summary="Ejecuta la acción de un proveedor",
)
async def execute_action(
    provider: str,
    action: str,
    request: Request,
    body: Optional[McpRequestDTO] = Body(default=None),
) -> Dict[str, Any]:
    """
    Despacha a ``provider.action`` y devuelve el sobre del handler tal cual
    ({success, data, message, errors?}), siempre con 200.
    """
    handler_key = f"{provider}.{action}"

    if body is None or body.args is None or body.auth is None:
        logger.warning("Missing args or auth in request body", handler=handler_key)
        raise InvalidDataException()

    logger.info(
        f"MCP request: {handler_key}",
        args=sanitize_sensitive_data(body.args),
    )

    entry = get_registered_action(provider, action)
    if entry is None:
        logger.warning(f"Handler not found: {handler_key}")
        raise ResourceNotFoundException()

    if not callable(entry.handler_cls) or not callable(getattr(entry.handler_cls, "execute", None)):
        logger.error(f"Handler {handler_key} is not executable")
        raise HandlerExecutionException("Error executing MCP handler (handler is not a function)")

    store = getattr(request.app.state, "mock_store", None)
    try:
        handler = entry.handler_cls()
        result = await handler.execute(body.args, body.auth, store=store)
    except Exception as e:
        logger.error(f"Error executing MCP handler {handler_key}", error=e)
        raise HandlerExecutionException() from e

    logger.debug(f"MCP response: {handler_key}", success=result.get("success") if isinstance(result, dict) else None)
    return result
