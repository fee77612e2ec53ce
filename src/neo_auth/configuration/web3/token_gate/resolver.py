"""Token-gate role resolution.

Maps the tokens a wallet owns onto the roles configured in
TokenGateOptions. Resolution never fails for lack of a match: a wallet
that owns nothing relevant simply receives no roles.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Optional, Tuple, Union

from ....core.exceptions import StructuralValidationError
from ....core.validation import (
    require_enum,
    require_instance,
    require_non_empty_string,
    require_number,
    require_sequence_of,
)
from .entity import TokenGateEntity
from .options import TokenGateOptions
from .properties import SubscriptionPeriodicity, SubscriptionPlan, TokenGateProperties

logger = logging.getLogger(__name__)

ActivePredicate = Callable[[TokenGateProperties], bool]


def _always_active(properties: TokenGateProperties) -> bool:
    return True


def subscription_filter(
    plans: Optional[Iterable[Union[SubscriptionPlan, str]]] = None,
    periodicities: Optional[Iterable[Union[SubscriptionPeriodicity, str]]] = None,
) -> ActivePredicate:
    """Build an activity predicate accepting only the given plans and periodicities.

    Args:
        plans: Accepted plans, or None to accept every plan
        periodicities: Accepted periodicities, or None to accept every periodicity

    Returns:
        Predicate suitable for TokenGateResolver(is_active=...)
    """
    accepted_plans = (
        None
        if plans is None
        else frozenset(require_enum(plan, SubscriptionPlan, "plans") for plan in plans)
    )
    accepted_periodicities = (
        None
        if periodicities is None
        else frozenset(
            require_enum(period, SubscriptionPeriodicity, "periodicities")
            for period in periodicities
        )
    )

    def is_active(properties: TokenGateProperties) -> bool:
        if accepted_plans is not None and properties.plan not in accepted_plans:
            return False
        if (
            accepted_periodicities is not None
            and properties.periodicity not in accepted_periodicities
        ):
            return False
        return True

    return is_active


@dataclass(frozen=True)
class TokenGrant:
    """A role granted because of one owned token."""

    role: str
    token_id: str
    serial_number: Union[int, float]

    def __post_init__(self) -> None:
        require_non_empty_string(self.role, "role")
        require_non_empty_string(self.token_id, "token_id")
        require_number(self.serial_number, "serial_number")


class TokenGateResolver:
    """Resolves application roles from a wallet's owned tokens.

    Handles ONLY the matching of owned tokens against configured rules.
    Whether a subscription is currently active is decided by the
    ``is_active`` predicate supplied by the caller; by default every
    subscription is considered active.

    When several rules match, every matching role is granted (union
    semantics, ordered by rule position). A disabled gate grants nothing.
    """

    def __init__(
        self,
        options: TokenGateOptions,
        is_active: Optional[ActivePredicate] = None,
    ):
        self._options = require_instance(options, TokenGateOptions, "options")
        self._is_active = is_active or _always_active

    @property
    def options(self) -> TokenGateOptions:
        return self._options

    @property
    def enabled(self) -> bool:
        return self._options.enabled

    def resolve_grants(self, balance) -> Tuple[TokenGrant, ...]:
        """Return one grant per (rule, owned token) match.

        Args:
            balance: A WalletIdentity, or an iterable of TokenGateEntity

        Returns:
            Grants ordered by rule position, then by balance position
        """
        tokens = self._tokens_from(balance)
        if not self._options.enabled:
            logger.debug("Token gate disabled, granting no roles")
            return ()

        active_tokens = []
        for token in tokens:
            if self._is_active(token.properties):
                active_tokens.append(token)
            else:
                logger.debug(
                    f"Ignoring token {token.token_id} #{token.serial_number}: "
                    f"subscription {token.properties.plan.value}/"
                    f"{token.properties.periodicity.value} is not active"
                )

        grants = []
        for rule in self._options.roles:
            for token in active_tokens:
                if token.token_id == rule.token_id:
                    grants.append(
                        TokenGrant(
                            role=rule.role,
                            token_id=token.token_id,
                            serial_number=token.serial_number,
                        )
                    )

        if grants:
            logger.info(
                f"Token gate granted {len(grants)} role grant(s) from {len(tokens)} owned token(s)"
            )
        else:
            logger.debug(f"Token gate matched none of {len(tokens)} owned token(s)")
        return tuple(grants)

    def resolve_roles(self, balance) -> Tuple[str, ...]:
        """Return the granted role names, de-duplicated, in rule order."""
        return tuple(dict.fromkeys(grant.role for grant in self.resolve_grants(balance)))

    def has_role(self, balance, role: str) -> bool:
        return role in self.resolve_roles(balance)

    @staticmethod
    def _tokens_from(balance) -> Tuple[TokenGateEntity, ...]:
        from ....credentials.web3.entity import WalletIdentity

        if isinstance(balance, WalletIdentity):
            return balance.balance
        if isinstance(balance, (str, bytes, Mapping)):
            raise StructuralValidationError("balance", "must be an array")
        if not isinstance(balance, (list, tuple)):
            try:
                balance = list(balance)
            except TypeError:
                raise StructuralValidationError("balance", "must be an array") from None
        return require_sequence_of(balance, TokenGateEntity, "balance")
