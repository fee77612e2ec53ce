"""Configuration Composer: common, web2 and web3 options under one root."""

from .options import CommonOptions, PassportStrategy
from .web2 import Web2Options
from .web3 import (
    Web3Options,
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
from .authentication import AuthConfiguration

__all__ = [
    "CommonOptions",
    "PassportStrategy",
    "Web2Options",
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
    "AuthConfiguration",
]
