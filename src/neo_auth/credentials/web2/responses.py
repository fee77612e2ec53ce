"""Responses of the traditional credential family."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ...core.validation import (
    mask_secret,
    require_bool,
    require_instance,
    require_mapping,
    require_non_empty_string,
)
from ..operator import Operator
from ..user.entity import UserIdentity


@dataclass(frozen=True, repr=False)
class LoginResponse:
    """Successful traditional login: the user, its operator and an access token."""

    user: UserIdentity
    operator: Operator
    access_token: str

    def __post_init__(self) -> None:
        require_instance(self.user, UserIdentity, "user")
        require_instance(self.operator, Operator, "operator")
        require_non_empty_string(self.access_token, "accessToken")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(user={self.user!r}, operator={self.operator!r}, "
            f"access_token='{mask_secret(self.access_token)}')"
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoginResponse":
        data = require_mapping(data, "login")
        return cls(
            user=UserIdentity.from_dict(data.get("user")),
            operator=Operator.from_dict(data.get("operator")),
            access_token=data.get("accessToken"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user": self.user.to_dict(),
            "operator": self.operator.to_dict(),
            "accessToken": self.access_token,
        }


@dataclass(frozen=True)
class LogoutResponse:
    """Logout outcome, shared by both credential families."""

    logout: bool
    message: str

    def __post_init__(self) -> None:
        require_bool(self.logout, "logout")
        require_non_empty_string(self.message, "message")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LogoutResponse":
        data = require_mapping(data, "logout")
        return cls(logout=data.get("logout"), message=data.get("message"))

    def to_dict(self) -> Dict[str, Any]:
        return {"logout": self.logout, "message": self.message}
