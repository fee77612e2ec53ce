"""Wallet sign-in: server signature, user counter-signature and the login request."""

from .signed_payload import SignedPayload
from .signed_data import SignInSignedData
from .login import Login

__all__ = [
    "SignedPayload",
    "SignInSignedData",
    "Login",
]
