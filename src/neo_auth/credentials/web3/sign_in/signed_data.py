"""Dual-signature data of a wallet sign-in."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ....core.validation import coerce_bytes, require_bytes, require_instance, require_mapping
from .signed_payload import SignedPayload


@dataclass(frozen=True)
class SignInSignedData:
    """Server-signed payload plus the user's counter-signature over it."""

    signed_payload: SignedPayload
    user_signature: bytes

    def __post_init__(self) -> None:
        require_instance(self.signed_payload, SignedPayload, "signedPayload")
        object.__setattr__(
            self, "user_signature", require_bytes(self.user_signature, "userSignature")
        )

    @property
    def original_payload(self):
        return self.signed_payload.original_payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SignInSignedData":
        data = require_mapping(data, "signedData")
        return cls(
            signed_payload=SignedPayload.from_dict(data.get("signedPayload")),
            user_signature=coerce_bytes(data.get("userSignature"), "userSignature"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "signedPayload": self.signed_payload.to_dict(),
            "userSignature": list(self.user_signature),
        }
