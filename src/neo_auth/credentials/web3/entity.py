"""Wallet identity entity."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from ...configuration.web3.token_gate.entity import TokenGateEntity
from ...core.exceptions import StructuralValidationError
from ...core.validation import require_mapping, require_non_empty_string, require_sequence_of


@dataclass(frozen=True)
class WalletIdentity:
    """A connected wallet and the tokens it owns.

    ``balance`` is supplied by the caller; no ledger is queried here.
    """

    wallet_id: str
    public_key: str
    balance: Tuple[TokenGateEntity, ...] = ()

    def __post_init__(self) -> None:
        require_non_empty_string(self.wallet_id, "walletId")
        require_non_empty_string(self.public_key, "publicKey")
        object.__setattr__(
            self, "balance", require_sequence_of(self.balance, TokenGateEntity, "balance")
        )

    def owns(self, token_id: str) -> bool:
        return any(token.token_id == token_id for token in self.balance)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WalletIdentity":
        data = require_mapping(data, "session")
        balance = data.get("balance", [])
        if not isinstance(balance, (list, tuple)):
            raise StructuralValidationError("balance", "must be an array")
        return cls(
            wallet_id=data.get("walletId"),
            public_key=data.get("publicKey"),
            balance=tuple(TokenGateEntity.from_dict(token) for token in balance),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "walletId": self.wallet_id,
            "publicKey": self.public_key,
            "balance": [token.to_dict() for token in self.balance],
        }
