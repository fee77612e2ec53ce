"""Twilio Verify credentials."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..core.validation import mask_secret, require_mapping, require_non_empty_string


@dataclass(frozen=True, repr=False)
class TwilioSecrets:
    """Account, auth token and Verify service identifiers.

    Handles ONLY the credential shape. The auth token is masked in every
    string representation.
    """

    account_sid: str
    auth_token: str
    service_sid: str

    def __post_init__(self) -> None:
        require_non_empty_string(self.account_sid, "accountSid")
        require_non_empty_string(self.auth_token, "authToken")
        require_non_empty_string(self.service_sid, "serviceSid")

    def __repr__(self) -> str:
        return (
            f"TwilioSecrets(account_sid={self.account_sid!r}, "
            f"auth_token='{mask_secret(self.auth_token)}', service_sid={self.service_sid!r})"
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TwilioSecrets":
        data = require_mapping(data, "twilioSecrets")
        return cls(data.get("accountSid"), data.get("authToken"), data.get("serviceSid"))

    def to_dict(self) -> Dict[str, str]:
        return {
            "accountSid": self.account_sid,
            "authToken": self.auth_token,
            "serviceSid": self.service_sid,
        }
