"""
Middleware para manejo centralizado de errores y logging de peticiones
"""

import time
import uuid
from typing import Callable
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .logging_utils import get_hub_logger, sanitize_sensitive_data


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Captura las excepciones no manejadas, loggea cada petición y agrega
    los headers X-Request-ID / X-Response-Time
    """

    def __init__(self, app, include_error_details: bool = False):
        super().__init__(app)
        self.include_error_details = include_error_details
        self.logger = get_hub_logger(__name__)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        self.logger.log_api_request(
            method=request.method,
            path=str(request.url.path),
            request_id=request_id,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = int((time.time() - start_time) * 1000)
            context = {
                "method": request.method,
                "path": str(request.url.path),
                "request_id": request_id,
                "duration_ms": duration_ms,
                "headers": dict(request.headers),
            }
            self.logger.error("Unhandled exception", error=e, **sanitize_sensitive_data(context))

            return JSONResponse(
                status_code=500,
                content=self._create_error_response(e, request_id),
                headers={
                    "X-Request-ID": request_id,
                    "X-Response-Time": str(duration_ms),
                },
            )

        duration_ms = int((time.time() - start_time) * 1000)
        self.logger.log_api_response(
            method=request.method,
            path=str(request.url.path),
            status_code=response.status_code,
            duration_ms=duration_ms,
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = str(duration_ms)
        return response

    def _create_error_response(self, error: Exception, request_id: str) -> dict:
        base_response = {
            "error": "Internal Server Error",
            "request_id": request_id,
        }

        if self.include_error_details:
            # En desarrollo, incluir detalles del error
            base_response.update({
                "error_type": type(error).__name__,
                "error_message": str(error),
            })

        return base_response
