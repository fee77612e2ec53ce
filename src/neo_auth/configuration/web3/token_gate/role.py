"""Token-to-role mapping rule."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ....core.validation import require_mapping, require_non_empty_string


@dataclass(frozen=True)
class TokenGateRole:
    """Grants ``role`` to any wallet holding a token with ``token_id``."""

    token_id: str
    role: str

    def __post_init__(self) -> None:
        require_non_empty_string(self.token_id, "tokenId")
        require_non_empty_string(self.role, "role")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenGateRole":
        data = require_mapping(data, "role")
        return cls(token_id=data.get("tokenId"), role=data.get("role"))

    def to_dict(self) -> Dict[str, str]:
        return {"tokenId": self.token_id, "role": self.role}
