"""Responses of the wallet credential family."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ...core.validation import (
    mask_secret,
    require_instance,
    require_mapping,
    require_non_empty_string,
)
from ..operator import Operator
from .entity import WalletIdentity


@dataclass(frozen=True, repr=False)
class WalletLoginResponse:
    """Successful wallet login: the wallet session, its operator and an access token."""

    session: WalletIdentity
    operator: Operator
    access_token: str

    def __post_init__(self) -> None:
        require_instance(self.session, WalletIdentity, "session")
        require_instance(self.operator, Operator, "operator")
        require_non_empty_string(self.access_token, "accessToken")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(session={self.session!r}, operator={self.operator!r}, "
            f"access_token='{mask_secret(self.access_token)}')"
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WalletLoginResponse":
        data = require_mapping(data, "login")
        return cls(
            session=WalletIdentity.from_dict(data.get("session")),
            operator=Operator.from_dict(data.get("operator")),
            access_token=data.get("accessToken"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session": self.session.to_dict(),
            "operator": self.operator.to_dict(),
            "accessToken": self.access_token,
        }
