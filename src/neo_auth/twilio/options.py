"""Twilio second-factor provider options."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..core.validation import require_bool, require_instance, require_mapping
from .secrets import TwilioSecrets


@dataclass(frozen=True)
class TwilioOptions:
    """Whether Twilio-backed second factors are enabled, and with which secrets."""

    twilio_secrets: TwilioSecrets
    enabled: bool

    def __post_init__(self) -> None:
        require_instance(self.twilio_secrets, TwilioSecrets, "twilioSecrets")
        require_bool(self.enabled, "enabled")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TwilioOptions":
        data = require_mapping(data, "twilioOptions")
        return cls(
            twilio_secrets=TwilioSecrets.from_dict(data.get("twilioSecrets")),
            enabled=data.get("enabled"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"twilioSecrets": self.twilio_secrets.to_dict(), "enabled": self.enabled}
