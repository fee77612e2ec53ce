"""User-supplied second-factor code."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..core.validation import require_mapping, require_non_negative_int


@dataclass(frozen=True)
class SecurityCode:
    """Code typed by the user during verification.

    Only the shape is checked; TOTP windows and matching against the
    factor secret are left to the verification provider.
    """

    code_2fa: int

    def __post_init__(self) -> None:
        require_non_negative_int(self.code_2fa, "code_2fa")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SecurityCode":
        data = require_mapping(data, "security")
        return cls(code_2fa=data.get("code_2fa"))

    def to_dict(self) -> Dict[str, int]:
        return {"code_2fa": self.code_2fa}
