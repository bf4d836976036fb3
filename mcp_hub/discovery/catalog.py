# mcp_hub/discovery/catalog.py

"""
Catálogo de proveedores y acciones para GET /discover.

Se reconstruye en cada request a partir de los paquetes de proveedor que hay
en disco; cada módulo de acción se registra al importarse
(``@register_handler``) y aquí solo se leen los field kinds ya calculados.
"""

import importlib
import pkgutil
from datetime import datetime, timezone
from types import ModuleType
from typing import Any, Dict, List, Optional

from mcp_hub.connectors.factory import RegisteredAction, actions_for_module_prefix
from mcp_hub.discovery.formatting import to_title_case
from mcp_hub.discovery.sample_payload import generate_sample_payload
from mcp_hub.discovery.schema_descriptor import describe_field_kinds
from mcp_hub.exceptions.logging_utils import get_hub_logger

logger = get_hub_logger(__name__)

SCHEMA_UNAVAILABLE_SUFFIX = " (schema unavailable)"


def build_action_entry(entry: RegisteredAction, now: Optional[datetime] = None) -> Dict[str, Any]:
    description = entry.description or to_title_case(entry.action)

    if entry.args_fields is None:
        return {
            "action_name": entry.action,
            "display_name": to_title_case(entry.action),
            "description": f"{description}{SCHEMA_UNAVAILABLE_SUFFIX}",
            "args_schema": {},
            "auth_schema": {},
            "sample_payload": {},
        }

    args_shape = describe_field_kinds(entry.args_fields)
    return {
        "action_name": entry.action,
        "display_name": to_title_case(entry.action),
        "description": description,
        "args_schema": args_shape,
        "auth_schema": describe_field_kinds(entry.auth_fields),
        "sample_payload": generate_sample_payload(args_shape, now),
    }


def _import_provider_modules(provider_pkg: ModuleType) -> None:
    for module_info in pkgutil.iter_modules(provider_pkg.__path__):
        if module_info.name.startswith("_"):
            continue
        module_name = f"{provider_pkg.__name__}.{module_info.name}"
        try:
            importlib.import_module(module_name)
        except Exception as e:
            logger.error(f"Skipping action module {module_name}", error=e)


def build_provider_entry(provider_pkg: ModuleType, provider_name: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    _import_provider_modules(provider_pkg)

    display_name = to_title_case(provider_name)
    description = getattr(provider_pkg, "DESCRIPTION", None) or f"{display_name} actions"

    actions: List[Dict[str, Any]] = []
    registered = sorted(actions_for_module_prefix(provider_pkg.__name__), key=lambda e: e.action)
    for entry in registered:
        try:
            actions.append(build_action_entry(entry, now))
        except Exception as e:
            logger.error(f"Could not describe action {entry.key}", error=e)

    return {
        "provider_name": provider_name,
        "display_name": display_name,
        "description": description,
        "actions": actions,
    }


def build_catalog(package: Optional[ModuleType] = None, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Devuelve ``{"providers": [...]}``. ``now`` se fija una sola vez para que
    todos los campos de fecha del mismo catálogo coincidan.
    """
    if package is None:
        import mcp_hub.handlers as package

    now = now or datetime.now(timezone.utc)
    providers: List[Dict[str, Any]] = []

    for module_info in pkgutil.iter_modules(package.__path__):
        if not module_info.ispkg or module_info.name.startswith("_"):
            continue
        provider_name = module_info.name
        try:
            provider_pkg = importlib.import_module(f"{package.__name__}.{provider_name}")
            providers.append(build_provider_entry(provider_pkg, provider_name, now))
        except Exception as e:
            logger.error(f"Skipping provider {provider_name}", error=e)

    logger.info("Discovery catalog built", providers=len(providers))
    return {"providers": providers}
