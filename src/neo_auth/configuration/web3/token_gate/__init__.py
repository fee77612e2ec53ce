"""Token gate: grants application roles from owned tokens."""

from .properties import SubscriptionPlan, SubscriptionPeriodicity, TokenGateProperties
from .metadata import TokenGateMetadata
from .entity import TokenGateEntity
from .role import TokenGateRole
from .options import TokenGateOptions
from .resolver import TokenGateResolver, TokenGrant, subscription_filter

__all__ = [
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
