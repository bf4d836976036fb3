"""
Closed set of field kinds used by the discovery catalog.

A handler's pydantic model is converted to ``FieldKind`` values once, when
the handler registers. Each kind renders the label the catalog exposes
(``ZodString``, ``Optional<ZodNumber>``, ``Enum<[a, b]>`` ...); the ``Zod*``
vocabulary is the catalog's wire format.
"""

import enum
import types
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Annotated, Any, Literal, Tuple, Union, get_args, get_origin
from uuid import UUID

from pydantic import BaseModel, EmailStr
from pydantic.fields import FieldInfo
from pydantic.functional_validators import (
    AfterValidator,
    BeforeValidator,
    PlainValidator,
    WrapValidator,
)

# Nesting cap for pathological annotations; real schemas stay far below it.
MAX_NESTING_DEPTH = 16

UNKNOWN_LABEL = "UnknownType"

_FUNCTIONAL_VALIDATORS = (AfterValidator, BeforeValidator, PlainValidator, WrapValidator)
_STRING_TYPES = (str, datetime, date, time, UUID, EmailStr)
_NUMBER_TYPES = (int, float, Decimal)
_ARRAY_ORIGINS = (list, tuple, set, frozenset)
_UNION_ORIGINS = (Union, types.UnionType)


class FieldKind:
    """Base of every kind. ``label`` describes a field, ``base_label`` an element."""

    def label(self) -> str:
        return self.base_label()

    def base_label(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class StringKind(FieldKind):
    def base_label(self) -> str:
        return "ZodString"


@dataclass(frozen=True)
class NumberKind(FieldKind):
    def base_label(self) -> str:
        return "ZodNumber"


@dataclass(frozen=True)
class BooleanKind(FieldKind):
    def base_label(self) -> str:
        return "ZodBoolean"


@dataclass(frozen=True)
class ObjectKind(FieldKind):
    # Nested objects are never expanded.
    def label(self) -> str:
        return "Object"

    def base_label(self) -> str:
        return "ZodObject"


@dataclass(frozen=True)
class ArrayKind(FieldKind):
    element: FieldKind

    def label(self) -> str:
        return f"Array<{self.element.base_label()}>"

    def base_label(self) -> str:
        return "ZodArray"


@dataclass(frozen=True)
class UnionKind(FieldKind):
    options: Tuple[FieldKind, ...]

    def label(self) -> str:
        return "Union<" + " | ".join(option.base_label() for option in self.options) + ">"

    def base_label(self) -> str:
        return "ZodUnion"


@dataclass(frozen=True)
class EnumKind(FieldKind):
    values: Tuple[str, ...]

    def label(self) -> str:
        return "Enum<[" + ", ".join(self.values) + "]>"

    def base_label(self) -> str:
        return "ZodEnum"


@dataclass(frozen=True)
class OptionalKind(FieldKind):
    inner: FieldKind

    def label(self) -> str:
        return f"Optional<{self.inner.label()}>"

    def base_label(self) -> str:
        return self.inner.base_label()


@dataclass(frozen=True)
class NullableKind(FieldKind):
    inner: FieldKind

    def label(self) -> str:
        return f"Nullable<{self.inner.label()}>"

    def base_label(self) -> str:
        return self.inner.base_label()


@dataclass(frozen=True)
class EffectsKind(FieldKind):
    inner: FieldKind

    def label(self) -> str:
        return f"Effects<{self.inner.label()}>"

    def base_label(self) -> str:
        return self.inner.base_label()


@dataclass(frozen=True)
class UnknownKind(FieldKind):
    def base_label(self) -> str:
        return UNKNOWN_LABEL


def has_functional_validator(metadata) -> bool:
    return any(isinstance(item, _FUNCTIONAL_VALIDATORS) for item in metadata or ())


def _is_subclass(annotation: Any, parents) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, parents)


def kind_from_annotation(annotation: Any, depth: int = 0) -> FieldKind:
    """Map a Python type annotation to a ``FieldKind``."""
    if depth > MAX_NESTING_DEPTH:
        return UnknownKind()

    origin = get_origin(annotation)

    if origin is Annotated:
        inner, *metadata = get_args(annotation)
        kind = kind_from_annotation(inner, depth + 1)
        return EffectsKind(kind) if has_functional_validator(metadata) else kind

    if origin in _UNION_ORIGINS:
        args = get_args(annotation)
        rest = [arg for arg in args if arg is not type(None)]
        if not rest:
            return UnknownKind()
        if len(rest) == 1:
            kind = kind_from_annotation(rest[0], depth + 1)
        else:
            kind = UnionKind(tuple(kind_from_annotation(arg, depth + 1) for arg in rest))
        return NullableKind(kind) if len(rest) < len(args) else kind

    if origin is Literal:
        return EnumKind(tuple(str(value) for value in get_args(annotation)))

    if origin in _ARRAY_ORIGINS:
        args = [arg for arg in get_args(annotation) if arg is not Ellipsis]
        if origin is tuple and len(args) > 1:
            # Tuple[str, int] tiene varios tipos de elemento
            return ArrayKind(UnionKind(tuple(kind_from_annotation(arg, depth + 1) for arg in args)))
        element = kind_from_annotation(args[0], depth + 1) if args else UnknownKind()
        return ArrayKind(element)

    if origin is dict:
        return ObjectKind()

    if annotation in _ARRAY_ORIGINS:
        return ArrayKind(UnknownKind())

    if _is_subclass(annotation, enum.Enum):
        return EnumKind(tuple(str(member.value) for member in annotation))

    # bool es subclase de int
    if _is_subclass(annotation, bool):
        return BooleanKind()
    if _is_subclass(annotation, _NUMBER_TYPES):
        return NumberKind()
    if _is_subclass(annotation, _STRING_TYPES):
        return StringKind()
    if annotation is dict or _is_subclass(annotation, BaseModel):
        return ObjectKind()

    return UnknownKind()


def kind_from_field(field_info: FieldInfo) -> FieldKind:
    """
    Kind of one model field, honouring required/default and validators.

    A field that is not required is ``Optional``; when its default is None the
    ``None`` arm of ``X | None`` is folded into that ``Optional``.
    """
    kind = kind_from_annotation(field_info.annotation)
    required = field_info.is_required()

    if not required and field_info.default is None and isinstance(kind, NullableKind):
        kind = kind.inner

    if has_functional_validator(field_info.metadata):
        kind = EffectsKind(kind)

    if not required:
        kind = OptionalKind(kind)

    return kind
