"""Server signature over a handshake payload."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ....core.validation import (
    coerce_bytes,
    require_bytes,
    require_mapping,
    require_non_empty_string,
)


@dataclass(frozen=True)
class SignedData:
    """Signature bytes plus the account whose key produced them.

    The signature is stored as ``bytes``; it is never verified here.
    """

    signature: bytes
    server_signing_account: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "signature", require_bytes(self.signature, "signature"))
        require_non_empty_string(self.server_signing_account, "serverSigningAccount")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SignedData":
        data = require_mapping(data, "signedData")
        return cls(
            signature=coerce_bytes(data.get("signature"), "signature"),
            server_signing_account=data.get("serverSigningAccount"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "signature": list(self.signature),
            "serverSigningAccount": self.server_signing_account,
        }
