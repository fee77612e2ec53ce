"""Traditional (web2) credentials: login/signup requests and responses."""

from .dto import LoginCredentials, SignupCredentials, MIN_PASSWORD_LENGTH
from .responses import LoginResponse, LogoutResponse

__all__ = [
    "LoginCredentials",
    "SignupCredentials",
    "MIN_PASSWORD_LENGTH",
    "LoginResponse",
    "LogoutResponse",
]
