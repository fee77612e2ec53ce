"""Token gate configuration."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from ....core.exceptions import StructuralValidationError
from ....core.validation import require_bool, require_mapping, require_non_empty_sequence_of
from .role import TokenGateRole


@dataclass(frozen=True)
class TokenGateOptions:
    """Whether the token gate is active and which token grants which role.

    Configuration failures here are fatal at startup; see TokenGateResolver
    for per-request resolution.
    """

    enabled: bool
    roles: Tuple[TokenGateRole, ...]

    def __post_init__(self) -> None:
        require_bool(self.enabled, "enabled")
        object.__setattr__(
            self, "roles", require_non_empty_sequence_of(self.roles, TokenGateRole, "roles")
        )

    @property
    def token_ids(self) -> Tuple[str, ...]:
        """Configured token ids, in rule order, without duplicates."""
        return tuple(dict.fromkeys(rule.token_id for rule in self.roles))

    @property
    def role_names(self) -> Tuple[str, ...]:
        """Every role the gate can grant, in rule order, without duplicates."""
        return tuple(dict.fromkeys(rule.role for rule in self.roles))

    def rules_for(self, token_id: str) -> Tuple[TokenGateRole, ...]:
        return tuple(rule for rule in self.roles if rule.token_id == token_id)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenGateOptions":
        data = require_mapping(data, "tokenGateOptions")
        roles = data.get("roles")
        if not isinstance(roles, (list, tuple)) or len(roles) == 0:
            raise StructuralValidationError("roles", "must be a non-empty array")
        return cls(
            enabled=data.get("enabled"),
            roles=tuple(TokenGateRole.from_dict(role) for role in roles),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "roles": [rule.to_dict() for rule in self.roles],
        }
