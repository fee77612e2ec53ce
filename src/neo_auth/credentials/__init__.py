"""Credential families: shared user identity, traditional (web2) and wallet (web3)."""

from .operator import Operator, OperatorNft
from .user import UserType, UserTag, UserIdentity
from .web2 import LoginCredentials, SignupCredentials, LoginResponse, LogoutResponse
from .web3 import (
    WalletIdentity,
    AuthToken,
    HandshakePayload,
    SignedData,
    Authenticate,
    SignedPayload,
    SignInSignedData,
    Login,
    WalletLoginResponse,
)

__all__ = [
    "Operator",
    "OperatorNft",
    "UserType",
    "UserTag",
    "UserIdentity",
    "LoginCredentials",
    "SignupCredentials",
    "LoginResponse",
    "LogoutResponse",
    "WalletIdentity",
    "AuthToken",
    "HandshakePayload",
    "SignedData",
    "Authenticate",
    "SignedPayload",
    "SignInSignedData",
    "Login",
    "WalletLoginResponse",
]
