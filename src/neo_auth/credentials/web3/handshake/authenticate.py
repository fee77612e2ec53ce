"""One-shot wallet authentication request."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ....core.validation import require_instance, require_mapping
from .payload import HandshakePayload
from .signed_data import SignedData


@dataclass(frozen=True)
class Authenticate:
    """Signed handshake submitted by a wallet.

    Only the presence and type of both parts are checked; each part
    validated itself when it was built.
    """

    signed_data: SignedData
    payload: HandshakePayload

    def __post_init__(self) -> None:
        require_instance(self.signed_data, SignedData, "signedData")
        require_instance(self.payload, HandshakePayload, "payload")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Authenticate":
        data = require_mapping(data, "authenticate")
        return cls(
            signed_data=SignedData.from_dict(data.get("signedData")),
            payload=HandshakePayload.from_dict(data.get("payload")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "signedData": self.signed_data.to_dict(),
            "payload": self.payload.to_dict(),
        }
