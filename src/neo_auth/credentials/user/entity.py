"""User identity entity."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from ...core.exceptions import StructuralValidationError
from ...core.validation import (
    require_email,
    require_enum,
    require_mapping,
    require_non_empty_string,
    require_positive_int,
    require_sequence_of,
)
from .tags import UserTag
from .user_type import UserType


@dataclass(frozen=True)
class UserIdentity:
    """Authenticated user identity, shared by both credential families.

    Handles ONLY identity representation and structural validation.
    Timestamps are supplied by the caller (epoch seconds or milliseconds);
    nothing here reads the clock.
    """

    username: str
    email: str
    created_at: int
    updated_at: int
    type: UserType
    tags: Tuple[UserTag, ...] = ()

    def __post_init__(self) -> None:
        """Validate identity fields."""
        require_non_empty_string(self.username, "username")
        require_email(self.email, "email")
        require_positive_int(self.created_at, "created_at")
        require_positive_int(self.updated_at, "updated_at")
        if self.updated_at < self.created_at:
            raise StructuralValidationError(
                "updated_at", "must be greater than or equal to created_at"
            )
        object.__setattr__(self, "type", require_enum(self.type, UserType, "type"))
        object.__setattr__(self, "tags", require_sequence_of(self.tags, UserTag, "tags"))

    @property
    def is_wallet_user(self) -> bool:
        return self.type is UserType.WALLET

    def get_tag(self, key: str) -> Optional[str]:
        """Return the value of the first tag with ``key``, if any."""
        for tag in self.tags:
            if tag.key == key:
                return tag.value
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserIdentity":
        """Build a user identity from its JSON representation."""
        data = require_mapping(data, "user")
        tags = data.get("tags", [])
        if not isinstance(tags, (list, tuple)):
            raise StructuralValidationError("tags", "must be an array")
        return cls(
            username=data.get("username"),
            email=data.get("email"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            type=data.get("type"),
            tags=tuple(UserTag.from_dict(tag) for tag in tags),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "email": self.email,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "type": self.type.value,
            "tags": [tag.to_dict() for tag in self.tags],
        }
