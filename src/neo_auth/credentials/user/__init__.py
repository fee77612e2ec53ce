"""User identity shared by the traditional and wallet credential families."""

from .user_type import UserType
from .tags import UserTag
from .entity import UserIdentity

__all__ = [
    "UserType",
    "UserTag",
    "UserIdentity",
]
