"""Owned token entity."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from ....core.validation import (
    require_instance,
    require_mapping,
    require_non_empty_string,
    require_number,
)
from .metadata import TokenGateMetadata


@dataclass(frozen=True)
class TokenGateEntity:
    """A token held by a wallet: the unit the token gate matches against.

    Handles ONLY the owned-token record. Balances are fetched by the
    calling service; nothing here queries a ledger.
    """

    metadata: TokenGateMetadata
    serial_number: Union[int, float]
    token_id: str

    def __post_init__(self) -> None:
        require_instance(self.metadata, TokenGateMetadata, "metadata")
        require_number(self.serial_number, "serial_number")
        require_non_empty_string(self.token_id, "token_id")

    @property
    def properties(self):
        """Shortcut to the subscription properties of this token."""
        return self.metadata.properties

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenGateEntity":
        data = require_mapping(data, "entity")
        return cls(
            metadata=TokenGateMetadata.from_dict(data.get("metadata")),
            serial_number=data.get("serial_number"),
            token_id=data.get("token_id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "serial_number": self.serial_number,
            "token_id": self.token_id,
        }
