"""Core neo-auth building blocks.

Components:
- exceptions: Error hierarchy with structured details
- validation: Leaf validators used by every value object
"""

from .exceptions import (
    NeoAuthError,
    ConfigurationError,
    StructuralValidationError,
    InvalidStateTransitionError,
    create_error_response,
    get_http_status_code,
)

__all__ = [
    "NeoAuthError",
    "ConfigurationError",
    "StructuralValidationError",
    "InvalidStateTransitionError",
    "create_error_response",
    "get_http_status_code",
]
