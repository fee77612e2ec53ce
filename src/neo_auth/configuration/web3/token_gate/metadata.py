"""Token metadata value object."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ....core.validation import require_instance, require_mapping, require_non_empty_string
from .properties import TokenGateProperties


@dataclass(frozen=True)
class TokenGateMetadata:
    """Descriptive metadata of an owned token, including its subscription properties."""

    name: str
    description: str
    creator: str
    image: str
    properties: TokenGateProperties

    def __post_init__(self) -> None:
        require_non_empty_string(self.name, "name")
        require_non_empty_string(self.description, "description")
        require_non_empty_string(self.creator, "creator")
        require_non_empty_string(self.image, "image")
        require_instance(self.properties, TokenGateProperties, "properties")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenGateMetadata":
        data = require_mapping(data, "metadata")
        return cls(
            name=data.get("name"),
            description=data.get("description"),
            creator=data.get("creator"),
            image=data.get("image"),
            properties=TokenGateProperties.from_dict(data.get("properties")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "creator": self.creator,
            "image": self.image,
            "properties": self.properties.to_dict(),
        }
