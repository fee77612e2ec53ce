"""Wallet (web3) credential configuration."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ...core.validation import require_instance, require_mapping
from .token_gate.options import TokenGateOptions


@dataclass(frozen=True)
class Web3Options:
    """Wallet configuration; currently the token gate only."""

    token_gate_options: TokenGateOptions

    def __post_init__(self) -> None:
        require_instance(self.token_gate_options, TokenGateOptions, "tokenGateOptions")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Web3Options":
        data = require_mapping(data, "web3Options")
        return cls(token_gate_options=TokenGateOptions.from_dict(data.get("tokenGateOptions")))

    def to_dict(self) -> Dict[str, Any]:
        return {"tokenGateOptions": self.token_gate_options.to_dict()}
