"""Exceptions module for neo-auth.

This module provides the complete exception hierarchy for neo-auth.
"""

from .base import (
    NeoAuthError,
    ConfigurationError,
    get_http_status_code,
    create_error_response,
)
from .validation import (
    StructuralValidationError,
    InvalidStateTransitionError,
)

__all__ = [
    "NeoAuthError",
    "ConfigurationError",
    "StructuralValidationError",
    "InvalidStateTransitionError",
    "get_http_status_code",
    "create_error_response",
]
