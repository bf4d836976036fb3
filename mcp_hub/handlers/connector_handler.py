# mcp_hub/handlers/connector_handler.py

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type

import httpx
from pydantic import BaseModel, ValidationError

from mcp_hub.core.config import settings
from mcp_hub.discovery.schema_descriptor import unwrap_schema
from mcp_hub.exceptions.api_exceptions import ExternalAPIError
from mcp_hub.exceptions.logging_utils import get_hub_logger
from mcp_hub.stores.memory_store import InMemoryStore

logger = get_hub_logger(__name__)


def success_response(data: Any, message: str) -> Dict[str, Any]:
    return {"success": True, "data": data, "message": message}


def error_response(message: str, errors: Optional[Dict[str, List[str]]] = None) -> Dict[str, Any]:
    response: Dict[str, Any] = {"success": False, "data": None, "message": message}
    if errors is not None:
        response["errors"] = errors
    return response


def flatten_validation_errors(error: ValidationError) -> Dict[str, List[str]]:
    """{campo: [mensajes]}; los errores sin campo quedan bajo "_schema"."""
    field_errors: Dict[str, List[str]] = {}
    for item in error.errors():
        field = ".".join(str(part) for part in item.get("loc", ())) or "_schema"
        field_errors.setdefault(field, []).append(item.get("msg", "Invalid value"))
    return field_errors


class ActionHandler(ABC):
    """
    Una acción de un proveedor. Cada subclase declara sus schemas pydantic
    y recibe args/auth ya validados en ``run``.
    """

    description: str = ""
    args_schema: Type[BaseModel]
    connection_schema: Optional[Type[BaseModel]] = None

    # Nombre que aparece en los mensajes de error de la API externa
    service_name: str = "External"

    async def execute(
        self,
        args: Dict[str, Any],
        auth: Optional[Dict[str, Any]] = None,
        store: Optional[InMemoryStore] = None,
    ) -> Dict[str, Any]:
        """
        Valida args y auth y ejecuta la acción. Devuelve el sobre
        {success, data, message, errors?}.
        """
        try:
            parsed_args = unwrap_schema(self.args_schema).model_validate(args or {})
        except ValidationError as e:
            errors = flatten_validation_errors(e)
            logger.warning(f"{type(self).__name__}: invalid arguments", errors=errors)
            return error_response("Invalid arguments.", errors)

        parsed_auth = None
        if self.connection_schema is not None:
            try:
                parsed_auth = unwrap_schema(self.connection_schema).model_validate(auth or {})
            except ValidationError as e:
                errors = flatten_validation_errors(e)
                logger.warning(f"{type(self).__name__}: invalid auth", errors=list(errors))
                return error_response("Invalid auth information.", errors)

        try:
            return await self.run(parsed_args, parsed_auth, store)
        except ExternalAPIError as e:
            return error_response(str(e))

    @abstractmethod
    async def run(
        self,
        args: BaseModel,
        auth: Optional[BaseModel],
        store: Optional[InMemoryStore],
    ) -> Dict[str, Any]:
        ...

    def describe_http_error(self, error: httpx.HTTPStatusError) -> str:
        """Mensaje legible a partir de la respuesta de error del proveedor."""
        response = error.response
        try:
            body = response.json()
        except ValueError:
            body = None

        message = None
        if isinstance(body, dict):
            nested = body.get("error")
            if isinstance(nested, dict):
                message = nested.get("message")
            message = message or body.get("message") or body.get("errors")
        message = message or response.reason_phrase or f"Status code {response.status_code}"
        return f"{self.service_name} API Error: {message}"

    async def request_json(
        self,
        method: str,
        url: str,
        **kwargs,
    ) -> Any:
        """
        Una sola llamada HTTP (sin reintentos). Traduce los errores de httpx
        a ExternalAPIError.
        """
        client_kwargs = {}
        if settings.HTTPX_TIMEOUT is not None:
            client_kwargs["timeout"] = settings.HTTPX_TIMEOUT

        try:
            async with httpx.AsyncClient(**client_kwargs) as client:
                resp = await client.request(method, url, **kwargs)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ExternalAPIError(
                service=self.service_name,
                endpoint=url,
                message=self.describe_http_error(e),
                status_code=e.response.status_code,
                response_body=e.response.text,
            ) from e
        except httpx.RequestError as e:
            raise ExternalAPIError(
                service=self.service_name,
                endpoint=url,
                message=f"No response received from {self.service_name} API. Check network connectivity.",
            ) from e

        try:
            return resp.json()
        except ValueError as e:
            raise ExternalAPIError(
                service=self.service_name,
                endpoint=url,
                message=f"{self.service_name} API Error: response is not valid JSON",
                status_code=resp.status_code,
                response_body=resp.text,
            ) from e
