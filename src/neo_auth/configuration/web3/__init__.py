"""Wallet (web3) credential configuration and the token gate."""

from .options import Web3Options
from .token_gate import (
    SubscriptionPlan,
    SubscriptionPeriodicity,
    TokenGateProperties,
    TokenGateMetadata,
    TokenGateEntity,
    TokenGateRole,
    TokenGateOptions,
    TokenGateResolver,
    TokenGrant,
    subscription_filter,
)

__all__ = [
    "Web3Options",
    "SubscriptionPlan",
    "SubscriptionPeriodicity",
    "TokenGateProperties",
    "TokenGateMetadata",
    "TokenGateEntity",
    "TokenGateRole",
    "TokenGateOptions",
    "TokenGateResolver",
    "TokenGrant",
    "subscription_filter",
]
