# mcp_hub/exceptions/api_exceptions.py
from typing import Any, Dict, Optional
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from .logging_utils import get_hub_logger

logger = get_hub_logger(__name__)


class ResourceNotFoundException(HTTPException):
    def __init__(self, detail: str = "MCP handler not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class InvalidDataException(HTTPException):
    def __init__(self, detail: str = "Missing 'args' or 'auth' in request body"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class HandlerExecutionException(HTTPException):
    def __init__(self, detail: str = "Error executing MCP handler"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class ServerConfigurationException(HTTPException):
    def __init__(self, detail: str = "Internal Server Configuration Error: API Key missing"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class AuthenticationError(HTTPException):
    """Error de autenticación con la clave interna"""

    def __init__(self, detail: str = "Unauthorized access to MCP server", context: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
        logger.warning("Authentication failed", **(context or {}))


class ExternalAPIError(Exception):
    """Error en llamadas a APIs externas"""

    def __init__(
        self,
        service: str,
        endpoint: str,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        self.service = service
        self.endpoint = endpoint
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)

        logger.error(
            f"External API error: {service}",
            endpoint=endpoint,
            status_code=status_code,
            response_preview=response_body[:200] if response_body else None,
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Todas las excepciones HTTP del hub responden como {"error": detail}"""

    async def _error_body(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    for exc_cls in (
        ResourceNotFoundException,
        InvalidDataException,
        HandlerExecutionException,
        ServerConfigurationException,
        AuthenticationError,
    ):
        app.add_exception_handler(exc_cls, _error_body)
