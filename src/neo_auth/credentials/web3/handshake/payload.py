"""Handshake payload: the server-issued challenge a wallet signs."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ....core.encoding import canonical_json
from ....core.validation import (
    require_absolute_url,
    require_instance,
    require_mapping,
    require_non_empty_string,
)
from .token import AuthToken


@dataclass(frozen=True)
class HandshakePayload:
    """Endpoint, routing node and token of one authentication attempt."""

    url: str
    node: str
    data: AuthToken

    def __post_init__(self) -> None:
        require_absolute_url(self.url, "url")
        require_non_empty_string(self.node, "node")
        require_instance(self.data, AuthToken, "data")

    def to_bytes(self) -> bytes:
        """Canonical byte form that the server and the wallet sign."""
        return canonical_json(self.to_dict())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HandshakePayload":
        data = require_mapping(data, "payload")
        return cls(
            url=data.get("url"),
            node=data.get("node"),
            data=AuthToken.from_dict(data.get("data")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "node": self.node, "data": self.data.to_dict()}
