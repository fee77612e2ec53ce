"""Second-factor status and its transition table."""

from enum import Enum
from typing import FrozenSet


class SecondFactorStatus(str, Enum):
    """Lifecycle status of an enrolled second factor.

    UNVERIFIED is set by enrollment, VERIFIED by a successful verification
    and DISABLED, which is terminal, by deletion.
    """

    UNVERIFIED = "unverified"
    VERIFIED = "verified"
    DISABLED = "disabled"

    @property
    def is_final(self) -> bool:
        """Check if this status accepts no further transitions."""
        return not self.allowed_transitions

    @property
    def allowed_transitions(self) -> FrozenSet["SecondFactorStatus"]:
        return _TRANSITIONS[self]

    def can_transition_to(self, target: "SecondFactorStatus") -> bool:
        return target in _TRANSITIONS[self]


_TRANSITIONS = {
    SecondFactorStatus.UNVERIFIED: frozenset(
        {SecondFactorStatus.VERIFIED, SecondFactorStatus.DISABLED}
    ),
    # re-verifying a verified factor keeps it verified
    SecondFactorStatus.VERIFIED: frozenset(
        {SecondFactorStatus.VERIFIED, SecondFactorStatus.DISABLED}
    ),
    SecondFactorStatus.DISABLED: frozenset(),
}
