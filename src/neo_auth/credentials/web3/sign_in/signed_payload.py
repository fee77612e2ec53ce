"""Server-signed handshake payload, the first link of the sign-in chain."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ....core.encoding import canonical_json
from ....core.validation import coerce_bytes, require_bytes, require_instance, require_mapping
from ..handshake.payload import HandshakePayload


@dataclass(frozen=True)
class SignedPayload:
    """A handshake payload together with the server's signature over it.

    The wallet counter-signs ``to_bytes()`` of this object, so it never has
    to sign a server payload that the server did not sign first.
    """

    server_signature: bytes
    original_payload: HandshakePayload

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "server_signature", require_bytes(self.server_signature, "serverSignature")
        )
        require_instance(self.original_payload, HandshakePayload, "originalPayload")

    def to_bytes(self) -> bytes:
        """Canonical byte form the user counter-signs."""
        return canonical_json(self.to_dict())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SignedPayload":
        data = require_mapping(data, "signedPayload")
        return cls(
            server_signature=coerce_bytes(data.get("serverSignature"), "serverSignature"),
            original_payload=HandshakePayload.from_dict(data.get("originalPayload")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "serverSignature": list(self.server_signature),
            "originalPayload": self.original_payload.to_dict(),
        }
