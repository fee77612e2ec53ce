"""Leaf validators shared by every neo-auth value object.

Each helper either returns the (normalized) value or raises
StructuralValidationError naming the field. They never mutate their input.
"""

import math
import re
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Tuple, Type, TypeVar
from urllib.parse import urlparse

from .exceptions import StructuralValidationError


E = TypeVar("E", bound=Enum)
T = TypeVar("T")

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
BYTE_FIELD_TYPES = (bytes, bytearray, memoryview)


def require_string(value: Any, field: str) -> str:
    """Require a string, empty allowed."""
    if not isinstance(value, str):
        raise StructuralValidationError(field, "must be a string")
    return value


def require_non_empty_string(value: Any, field: str) -> str:
    """Require a string with at least one non-whitespace character."""
    if not isinstance(value, str) or not value.strip():
        raise StructuralValidationError(field, "must be a non-empty string")
    return value


def require_bool(value: Any, field: str) -> bool:
    """Require a real boolean (truthy integers are rejected)."""
    if not isinstance(value, bool):
        raise StructuralValidationError(field, "must be a boolean")
    return value


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def require_positive_int(value: Any, field: str) -> int:
    if not _is_integer(value) or value <= 0:
        raise StructuralValidationError(field, "must be a positive integer")
    return value


def require_non_negative_int(value: Any, field: str) -> int:
    if not _is_integer(value) or value < 0:
        raise StructuralValidationError(field, "must be a non-negative integer")
    return value


def require_number(value: Any, field: str) -> float:
    """Require an int or float that is not NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise StructuralValidationError(field, "must be a valid number")
    if isinstance(value, float) and math.isnan(value):
        raise StructuralValidationError(field, "must be a valid number")
    return value


def require_mapping(value: Any, field: str) -> Mapping[str, Any]:
    """Require a non-null mapping and return a read-only copy of it."""
    if not isinstance(value, Mapping):
        raise StructuralValidationError(field, "must be a non-null object")
    return MappingProxyType(dict(value))


def require_bytes(value: Any, field: str) -> bytes:
    """Require a non-empty byte sequence and return it as ``bytes``."""
    if not isinstance(value, BYTE_FIELD_TYPES):
        raise StructuralValidationError(field, "must be a byte sequence")
    data = bytes(value)
    if not data:
        raise StructuralValidationError(field, "cannot be empty")
    return data


def coerce_bytes(value: Any, field: str) -> bytes:
    """Decode a wire byte field: bytes-like, or a JSON list of integers 0..255."""
    if isinstance(value, (list, tuple)):
        if not all(_is_integer(item) and 0 <= item <= 255 for item in value):
            raise StructuralValidationError(field, "must be a list of byte values (0-255)")
        value = bytes(value)
    return require_bytes(value, field)


def require_instance(value: Any, expected: Type[T], field: str) -> T:
    if not isinstance(value, expected):
        raise StructuralValidationError(field, f"must be an instance of {expected.__name__}")
    return value


def require_sequence_of(value: Any, expected: Type[T], field: str) -> Tuple[T, ...]:
    """Require a list/tuple whose items are all instances of ``expected``."""
    if not isinstance(value, (list, tuple)):
        raise StructuralValidationError(field, "must be an array")
    for index, item in enumerate(value):
        if not isinstance(item, expected):
            raise StructuralValidationError(
                f"{field}[{index}]", f"must be an instance of {expected.__name__}"
            )
    return tuple(value)


def require_non_empty_sequence_of(value: Any, expected: Type[T], field: str) -> Tuple[T, ...]:
    if not isinstance(value, (list, tuple)) or len(value) == 0:
        raise StructuralValidationError(field, "must be a non-empty array")
    return require_sequence_of(value, expected, field)


def require_enum(value: Any, enum_type: Type[E], field: str) -> E:
    """Accept an enum member or its raw value."""
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(str(member.value) for member in enum_type)
        raise StructuralValidationError(field, f"must be one of: {allowed}") from None


def require_email(value: Any, field: str = "email") -> str:
    if not isinstance(value, str) or not EMAIL_PATTERN.fullmatch(value):
        raise StructuralValidationError(field, "must match a valid address pattern")
    return value


def require_absolute_url(value: Any, field: str = "url") -> str:
    """Require an absolute URL with a scheme and a host."""
    require_non_empty_string(value, field)
    try:
        parsed = urlparse(value)
    except ValueError:
        raise StructuralValidationError(field, "must be a valid absolute URL") from None
    if not parsed.scheme or not parsed.netloc:
        raise StructuralValidationError(field, "must be a valid absolute URL")
    return value


def mask_secret(value: str) -> str:
    """Return a masked form of a secret that is safe for logging."""
    if len(value) <= 20:
        return "***"
    return f"{value[:8]}...{value[-8:]}"
