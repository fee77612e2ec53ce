"""Wallet handshake: token, payload, server signature and the authenticate request."""

from .token import AuthToken
from .payload import HandshakePayload
from .signed_data import SignedData
from .authenticate import Authenticate

__all__ = [
    "AuthToken",
    "HandshakePayload",
    "SignedData",
    "Authenticate",
]
