"""HTTP status code mapping for exceptions.

Calling services translate neo-auth errors into transport responses;
this module provides the default mapping they can rely on.
"""

from typing import Dict, Type

from .base import ConfigurationError, NeoAuthError
from .validation import InvalidStateTransitionError, StructuralValidationError


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 409 Conflict
    InvalidStateTransitionError: 409,

    # 422 Unprocessable Entity
    StructuralValidationError: 422,

    # 500 Internal Server Error
    ConfigurationError: 500,

    # Default for NeoAuthError
    NeoAuthError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception, walking the class hierarchy.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code, 500 when the exception type is unknown
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
