"""Provider responses of the second-factor operations."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..core.validation import (
    mask_secret,
    require_bool,
    require_mapping,
    require_non_empty_string,
    require_string,
)


@dataclass(frozen=True, repr=False)
class CreateResponse:
    """Result of enrolling a new factor.

    ``message`` must be a string but may be empty; the other fields must
    be non-empty.
    """

    factor_sid: str
    identity: str
    uri: str
    secret: str
    message: str

    def __post_init__(self) -> None:
        require_non_empty_string(self.factor_sid, "factorSid")
        require_non_empty_string(self.identity, "identity")
        require_non_empty_string(self.uri, "uri")
        require_non_empty_string(self.secret, "secret")
        require_string(self.message, "message")

    def __repr__(self) -> str:
        """Debug representation (secret masked)."""
        return (
            f"CreateResponse(factor_sid={self.factor_sid!r}, identity={self.identity!r}, "
            f"uri='***', secret='{mask_secret(self.secret)}', message={self.message!r})"
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CreateResponse":
        data = require_mapping(data, "create")
        return cls(
            factor_sid=data.get("factorSid"),
            identity=data.get("identity"),
            uri=data.get("uri"),
            secret=data.get("secret"),
            message=data.get("message"),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "factorSid": self.factor_sid,
            "identity": self.identity,
            "uri": self.uri,
            "secret": self.secret,
            "message": self.message,
        }


@dataclass(frozen=True)
class _OutcomeResponse:
    success: bool
    message: str

    def __post_init__(self) -> None:
        require_bool(self.success, "success")
        require_string(self.message, "message")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        data = require_mapping(data, "response")
        return cls(success=data.get("success"), message=data.get("message"))

    def to_dict(self) -> Dict[str, Any]:
        return {"success": self.success, "message": self.message}


@dataclass(frozen=True)
class VerifyResponse(_OutcomeResponse):
    """Result of checking a code against a factor."""


@dataclass(frozen=True)
class DeleteResponse(_OutcomeResponse):
    """Result of removing a factor."""
