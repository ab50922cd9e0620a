from __future__ import annotations

from enum import Enum
from typing import Optional, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int, exc: type[ValidationError] = ValidationError) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise exc(f"{field_name} must be at least {min_len} characters long")
    return value


def require_enum(value, enum_cls: type[E], field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"Invalid {field_name}: {value!r}")


def normalize_employee_id(value: Optional[str]) -> str:
    return require_non_empty(value, "Employee code").upper()
