# mcp_hub/connectors/factory.py

import importlib
import pkgutil
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from mcp_hub.discovery.field_kind import FieldKind
from mcp_hub.discovery.schema_descriptor import object_field_kinds, unwrap_schema
from mcp_hub.exceptions.logging_utils import get_hub_logger
from mcp_hub.handlers.connector_handler import ActionHandler

logger = get_hub_logger(__name__)


@dataclass
class RegisteredAction:
    provider: str
    action: str
    handler_cls: Type[ActionHandler]
    description: str
    # None = el handler no expone un schema validable
    args_fields: Optional[Dict[str, FieldKind]]
    auth_fields: Optional[Dict[str, FieldKind]]

    @property
    def key(self) -> str:
        return f"{self.provider}.{self.action}"

    @property
    def module(self) -> str:
        return self.handler_cls.__module__


# Registro dinámico: "provider.action" -> acción registrada
_HANDLER_REGISTRY: Dict[str, RegisteredAction] = {}


def has_validation_schema(schema: Any) -> bool:
    schema = unwrap_schema(schema)
    return schema is not None and callable(getattr(schema, "model_validate", None))


def _field_kinds_for(schema: Any) -> Optional[Dict[str, FieldKind]]:
    if not has_validation_schema(schema):
        return None
    return object_field_kinds(schema) or {}


def register_handler(provider: str, action: str):
    """
    Registra un handler bajo ``provider.action``. Los field kinds de sus
    schemas se calculan aquí una sola vez.

    Example::

        @register_handler("stripe", "getCustomerByEmail")
        class StripeGetCustomerByEmailHandler(ActionHandler): ...
    """

    def decorator(cls: Type[ActionHandler]):
        args_schema = getattr(cls, "args_schema", None)
        entry = RegisteredAction(
            provider=provider,
            action=action,
            handler_cls=cls,
            description=getattr(cls, "description", "") or "",
            args_fields=_field_kinds_for(args_schema),
            auth_fields=_field_kinds_for(getattr(cls, "connection_schema", None)),
        )
        if entry.key in _HANDLER_REGISTRY and _HANDLER_REGISTRY[entry.key].handler_cls is not cls:
            logger.warning(f"Overriding handler for {entry.key}", previous=_HANDLER_REGISTRY[entry.key].handler_cls.__name__)
        _HANDLER_REGISTRY[entry.key] = entry

        if entry.args_fields is None:
            logger.warning(f"Handler {entry.key} has no usable args schema")
        logger.debug(f"Registered handler: {entry.key} -> {cls.__name__}")
        return cls

    return decorator


def get_registered_action(provider: str, action: str) -> Optional[RegisteredAction]:
    scan_handlers()
    return _HANDLER_REGISTRY.get(f"{provider}.{action}")


def actions_for_module_prefix(prefix: str) -> List[RegisteredAction]:
    """Acciones cuyos handlers viven dentro del paquete ``prefix``."""
    return [
        entry for entry in _HANDLER_REGISTRY.values()
        if entry.module.startswith(prefix + ".")
    ]


_SCANNED = False


def scan_handlers() -> None:
    """Importa todos los módulos de mcp_hub.handlers para que se registren."""
    global _SCANNED
    if _SCANNED:
        return
    import mcp_hub.handlers
    for module_info in pkgutil.walk_packages(mcp_hub.handlers.__path__, prefix="mcp_hub.handlers."):
        try:
            importlib.import_module(module_info.name)
        except Exception as e:
            logger.error(f"Could not import handler module {module_info.name}", error=e)
    _SCANNED = True


def get_registered_handlers() -> Dict[str, RegisteredAction]:
    scan_handlers()
    return dict(_HANDLER_REGISTRY)


def get_registry_status() -> Dict[str, Any]:
    """Estado del registry, útil para debugging."""
    return {
        "handlers_registered": len(_HANDLER_REGISTRY),
        "handler_keys": sorted(_HANDLER_REGISTRY.keys()),
        "scanned": _SCANNED,
    }
