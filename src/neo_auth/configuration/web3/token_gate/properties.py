"""Subscription properties carried in token metadata."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping

from ....core.validation import require_enum, require_mapping


class _CaseInsensitiveEnum(str, Enum):
    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class SubscriptionPlan(_CaseInsensitiveEnum):
    """Subscription tier attached to a gating token."""
    FREE = "free"
    BASIC = "basic"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


class SubscriptionPeriodicity(_CaseInsensitiveEnum):
    """Renewal cadence of a subscription."""
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUAL = "annual"
    LIFETIME = "lifetime"


@dataclass(frozen=True)
class TokenGateProperties:
    """Plan and periodicity of the subscription a token represents."""

    plan: SubscriptionPlan
    periodicity: SubscriptionPeriodicity

    def __post_init__(self) -> None:
        object.__setattr__(self, "plan", require_enum(self.plan, SubscriptionPlan, "plan"))
        object.__setattr__(
            self,
            "periodicity",
            require_enum(self.periodicity, SubscriptionPeriodicity, "periodicity"),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenGateProperties":
        data = require_mapping(data, "properties")
        return cls(plan=data.get("plan"), periodicity=data.get("periodicity"))

    def to_dict(self) -> Dict[str, str]:
        return {"plan": self.plan.value, "periodicity": self.periodicity.value}
