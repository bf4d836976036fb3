# mcp_hub/discovery/schema_descriptor.py

import types
from typing import Annotated, Any, Dict, Optional, Union, get_args, get_origin

from pydantic import BaseModel, RootModel

from mcp_hub.discovery.field_kind import MAX_NESTING_DEPTH, FieldKind, kind_from_field
from mcp_hub.exceptions.logging_utils import get_hub_logger

logger = get_hub_logger(__name__)


def unwrap_schema(schema: Any) -> Any:
    """
    Quita los wrappers de nivel superior: Optional[Model], Model | None y
    Annotated[Model, ...] (validadores). Cada vuelta baja un nivel de anidamiento.
    """
    for _ in range(MAX_NESTING_DEPTH):
        origin = get_origin(schema)
        if origin is Annotated:
            schema = get_args(schema)[0]
            continue
        if origin in (Union, types.UnionType):
            rest = [arg for arg in get_args(schema) if arg is not type(None)]
            if len(rest) == 1:
                schema = rest[0]
                continue
        break
    return schema


def unwrap_root_model(schema: Any) -> Any:
    """
    RootModel[X] valida X directamente: la forma que se publica es la de X,
    no un objeto con el campo "root".
    """
    schema = unwrap_schema(schema)
    for _ in range(MAX_NESTING_DEPTH):
        if not (isinstance(schema, type) and issubclass(schema, RootModel)):
            break
        schema = unwrap_schema(schema.model_fields["root"].annotation)
    return schema


def is_object_schema(schema: Any) -> bool:
    return isinstance(schema, type) and issubclass(schema, BaseModel) and not issubclass(schema, RootModel)


def object_field_kinds(schema: Any) -> Optional[Dict[str, FieldKind]]:
    """
    Kinds de los campos de primer nivel de un schema tipo objeto.
    Devuelve None si el schema (ya desenvuelto) no es un objeto.
    """
    try:
        schema = unwrap_root_model(schema)
        if not is_object_schema(schema):
            return None
        return {name: kind_from_field(field) for name, field in schema.model_fields.items()}
    except Exception as e:
        logger.error("Could not introspect schema", error=e, schema=repr(schema)[:100])
        return None


def describe_field_kinds(kinds: Optional[Dict[str, FieldKind]]) -> Dict[str, str]:
    if not kinds:
        return {}
    return {name: kind.label() for name, kind in kinds.items()}


def describe_schema(schema: Any) -> Dict[str, str]:
    """Schema Shape: nombre de campo -> etiqueta de tipo. Nunca lanza."""
    return describe_field_kinds(object_field_kinds(schema))
