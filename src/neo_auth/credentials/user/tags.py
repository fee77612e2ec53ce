"""User tag value object."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ...core.validation import require_mapping, require_non_empty_string


@dataclass(frozen=True)
class UserTag:
    """Key/value metadata attached to a user."""

    key: str
    value: str

    def __post_init__(self) -> None:
        require_non_empty_string(self.key, "key")
        require_non_empty_string(self.value, "value")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserTag":
        data = require_mapping(data, "tag")
        return cls(key=data.get("key"), value=data.get("value"))

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "value": self.value}
