"""Traditional (username/email/password) request payloads."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from ...core.exceptions import StructuralValidationError
from ...core.validation import (
    require_email,
    require_mapping,
    require_non_empty_sequence_of,
    require_non_empty_string,
    require_string,
)
from ..user.tags import UserTag

MIN_PASSWORD_LENGTH = 8


def _require_password(value: Any) -> str:
    require_string(value, "password")
    if len(value) < MIN_PASSWORD_LENGTH:
        raise StructuralValidationError(
            "password", f"must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    return value


@dataclass(frozen=True, repr=False)
class LoginCredentials:
    """Login request of the traditional credential family.

    Handles ONLY the shape of the request. Passwords are checked for length
    only; hashing and comparison belong to the calling service.
    """

    username: str
    email: str
    password: str

    def __post_init__(self) -> None:
        require_non_empty_string(self.username, "username")
        require_email(self.email, "email")
        _require_password(self.password)

    def __repr__(self) -> str:
        """Debug representation (password masked)."""
        return (
            f"{self.__class__.__name__}(username={self.username!r}, "
            f"email={self.email!r}, password='***')"
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoginCredentials":
        data = require_mapping(data, "login")
        return cls(
            username=data.get("username"),
            email=data.get("email"),
            password=data.get("password"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"username": self.username, "email": self.email, "password": self.password}


@dataclass(frozen=True, repr=False)
class SignupCredentials:
    """Signup request: login fields plus at least one tag."""

    username: str
    email: str
    password: str
    tags: Tuple[UserTag, ...]

    def __post_init__(self) -> None:
        require_non_empty_string(self.username, "username")
        require_email(self.email, "email")
        _require_password(self.password)
        object.__setattr__(
            self, "tags", require_non_empty_sequence_of(self.tags, UserTag, "tags")
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(username={self.username!r}, "
            f"email={self.email!r}, password='***', tags={self.tags!r})"
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SignupCredentials":
        data = require_mapping(data, "signup")
        tags = data.get("tags")
        if not isinstance(tags, (list, tuple)) or len(tags) == 0:
            raise StructuralValidationError("tags", "must be a non-empty array")
        return cls(
            username=data.get("username"),
            email=data.get("email"),
            password=data.get("password"),
            tags=tuple(UserTag.from_dict(tag) for tag in tags),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "email": self.email,
            "password": self.password,
            "tags": [tag.to_dict() for tag in self.tags],
        }
