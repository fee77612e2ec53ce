"""Wallet handshake token value object."""

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from ....core.exceptions import StructuralValidationError
from ....core.validation import mask_secret, require_mapping, require_non_empty_string

SEGMENT_PATTERN = re.compile(r"[A-Za-z0-9_-]+={0,2}")


@dataclass(frozen=True, repr=False)
class AuthToken:
    """JWT-shaped token carried inside a handshake payload.

    Handles ONLY the token's shape: three dot-separated base64url segments.
    Signature and expiry are never checked here.
    """

    token: str

    def __post_init__(self) -> None:
        """Validate token format."""
        require_non_empty_string(self.token, "token")
        parts = self.token.split(".")
        if len(parts) != 3:
            raise StructuralValidationError(
                "token", "must have three dot-separated segments (header.payload.signature)"
            )
        for index, part in enumerate(parts):
            if not SEGMENT_PATTERN.fullmatch(part):
                raise StructuralValidationError(
                    "token", f"segment {index + 1} must be non-empty base64url"
                )

    @property
    def segments(self) -> Tuple[str, str, str]:
        header, payload, signature = self.token.split(".")
        return header, payload, signature

    @property
    def header(self) -> str:
        return self.segments[0]

    @property
    def payload(self) -> str:
        return self.segments[1]

    @property
    def signature(self) -> str:
        return self.segments[2]

    def mask_for_logging(self) -> str:
        """Return masked token safe for logging."""
        return mask_secret(self.token)

    def __str__(self) -> str:
        return f"AuthToken({self.mask_for_logging()})"

    def __repr__(self) -> str:
        return f"AuthToken(token='{self.mask_for_logging()}')"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuthToken":
        data = require_mapping(data, "data")
        return cls(token=data.get("token"))

    def to_dict(self) -> Dict[str, str]:
        return {"token": self.token}
