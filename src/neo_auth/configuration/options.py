"""Options shared by both credential families."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping

from ..core.validation import require_enum, require_mapping, require_non_empty_string


class PassportStrategy(str, Enum):
    """Where authenticated sessions are kept."""
    REDIS = "redis"
    JWT = "jwt"


@dataclass(frozen=True)
class CommonOptions:
    """Session, token, cookie and operator settings plus the session strategy.

    The four settings mappings are opaque here and consumed by the session
    transport; only their presence is checked.
    """

    redis: Mapping[str, Any]
    jwt: Mapping[str, Any]
    cookie_options: Mapping[str, Any]
    operator: Mapping[str, Any]
    passport: PassportStrategy
    app_name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "redis", require_mapping(self.redis, "redis"))
        object.__setattr__(self, "jwt", require_mapping(self.jwt, "jwt"))
        object.__setattr__(
            self, "cookie_options", require_mapping(self.cookie_options, "cookieOptions")
        )
        object.__setattr__(self, "operator", require_mapping(self.operator, "operator"))
        object.__setattr__(
            self, "passport", require_enum(self.passport, PassportStrategy, "passport")
        )
        require_non_empty_string(self.app_name, "appName")

    @property
    def uses_jwt_sessions(self) -> bool:
        return self.passport is PassportStrategy.JWT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommonOptions":
        data = require_mapping(data, "commonOptions")
        return cls(
            redis=data.get("redis"),
            jwt=data.get("jwt"),
            cookie_options=data.get("cookieOptions"),
            operator=data.get("operator"),
            passport=data.get("passport"),
            app_name=data.get("appName"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "redis": dict(self.redis),
            "jwt": dict(self.jwt),
            "cookieOptions": dict(self.cookie_options),
            "operator": dict(self.operator),
            "passport": self.passport.value,
            "appName": self.app_name,
        }
