"""User credential family enumeration."""

from enum import Enum


class UserType(str, Enum):
    """Credential family a user authenticated with."""
    TRADITIONAL = "web2"  # username/email + password
    WALLET = "web3"       # wallet signature
