"""Wallet sign-in request."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ....core.validation import require_instance, require_mapping
from ...operator import Operator
from .signed_data import SignInSignedData


@dataclass(frozen=True)
class Login:
    """Sign-in request: the serving operator and the two-signature chain.

    Handles ONLY the request shape. Verifying either signature, and any
    replay protection, is left to the calling service.
    """

    operator: Operator
    signed_data: SignInSignedData

    def __post_init__(self) -> None:
        require_instance(self.operator, Operator, "operator")
        require_instance(self.signed_data, SignInSignedData, "signedData")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Login":
        data = require_mapping(data, "login")
        return cls(
            operator=Operator.from_dict(data.get("operator")),
            signed_data=SignInSignedData.from_dict(data.get("signedData")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operator": self.operator.to_dict(),
            "signedData": self.signed_data.to_dict(),
        }
