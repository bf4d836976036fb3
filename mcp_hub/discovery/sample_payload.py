"""
Generador de payloads de ejemplo a partir de un Schema Shape
(nombre de campo -> etiqueta de tipo). Es puro y determinista: la hora
usada para campos de fecha se inyecta con ``now``.
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_WRAPPERS = ("Optional<", "Nullable<", "Effects<")

SAMPLE_EMAIL = "user@example.com"
SAMPLE_IDENTIFIER = "identifier_123"
SAMPLE_STRING = "string_value"
SAMPLE_NUMBER = 123
SAMPLE_ENUM = "enum_value"
SAMPLE_UNION = "selected_union_option_value"


def strip_wrappers(label: str) -> str:
    """Optional<Nullable<ZodString>> -> ZodString"""
    stripped = True
    while stripped:
        stripped = False
        for prefix in _WRAPPERS:
            if label.startswith(prefix) and label.endswith(">"):
                label = label[len(prefix):-1]
                stripped = True
    return label


def iso_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _looks_like_timestamp(field_name: str) -> bool:
    lowered = field_name.lower()
    return (
        "time" in lowered
        or "date" in lowered
        or field_name.endswith("At")
        or lowered.endswith("_at")
    )


def sample_string(field_name: str, now: Optional[datetime] = None) -> str:
    lowered = field_name.lower()
    if "email" in lowered:
        return SAMPLE_EMAIL
    if "id" in lowered:
        return SAMPLE_IDENTIFIER
    if _looks_like_timestamp(field_name):
        return iso_timestamp(now)
    return SAMPLE_STRING


def sample_enum(label: str) -> str:
    """Enum<[draft, open, paid]> -> draft"""
    body = label[len("Enum<["):]
    if body.endswith("]>"):
        body = body[:-2]
    first = body.split(",")[0].strip()
    return first or SAMPLE_ENUM


def sample_value(field_name: str, label: str, now: Optional[datetime] = None) -> Any:
    core = strip_wrappers(label or "")

    if core.startswith("Array<"):
        return []
    if core.startswith("Enum<["):
        return sample_enum(core)
    if core.startswith("Union<"):
        return SAMPLE_UNION
    if "String" in core:
        return sample_string(field_name, now)
    if "Number" in core:
        return SAMPLE_NUMBER
    if "Boolean" in core:
        return True
    if "Object" in core:
        return {}

    sanitized = re.sub(r"[^A-Za-z0-9_]", "_", label or "")
    return f"sample_for_{sanitized}"


def generate_sample_payload(shape: Dict[str, str], now: Optional[datetime] = None) -> Dict[str, Any]:
    if not shape:
        return {}
    return {field_name: sample_value(field_name, label, now) for field_name, label in shape.items()}
