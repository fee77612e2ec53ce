"""Root of the neo-auth error hierarchy.

Every failure raised while building credentials, handshake records,
second-factor state or token-gate rules is a NeoAuthError. The embedding
service catches that one type at its request boundary and turns it into
the error envelope built by create_error_response.
"""

from typing import Any, Dict, Optional


class NeoAuthError(Exception):
    """Base exception for all neo-auth errors.

    ``error_code`` is the stable identifier clients switch on; ``details``
    carries the offending field or state pair. Neither ever holds a password,
    token or provider secret.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
    ):
        super().__init__(message, *args)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(NeoAuthError):
    """The authentication configuration document could not be located or read."""


def get_http_status_code(exception: Exception) -> int:
    """Status an auth endpoint should answer with for ``exception``."""
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: NeoAuthError) -> Dict[str, Any]:
    """Build the JSON body returned to a client whose login, sign-in or
    second-factor request was rejected.

    Args:
        exception: The neo-auth exception

    Returns:
        Envelope with the error code, message, details, type and HTTP status
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
            "status": get_http_status_code(exception),
        }
    }
