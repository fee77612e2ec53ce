"""Wallet (web3) credentials: identity, handshake, sign-in and responses."""

from .entity import WalletIdentity
from .handshake import AuthToken, HandshakePayload, SignedData, Authenticate
from .sign_in import SignedPayload, SignInSignedData, Login
from .responses import WalletLoginResponse
from ..web2.responses import LogoutResponse

__all__ = [
    "WalletIdentity",
    "AuthToken",
    "HandshakePayload",
    "SignedData",
    "Authenticate",
    "SignedPayload",
    "SignInSignedData",
    "Login",
    "WalletLoginResponse",
    "LogoutResponse",
]
