"""Traditional (web2) credential configuration."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

from ...core.exceptions import StructuralValidationError
from ...core.validation import require_bool, require_instance, require_mapping
from ...twilio.options import TwilioOptions

SEND_MAIL_KINDS = ("confirm", "reset")


def _require_send_mail_options(value: Any) -> Mapping[str, Any]:
    options = require_mapping(value, "sendMailOptions")
    for kind in SEND_MAIL_KINDS:
        if options.get(kind) is None:
            raise StructuralValidationError(
                "sendMailOptions", "must contain confirm and reset properties"
            )
        require_mapping(options[kind], f"sendMailOptions.{kind}")
    frozen = {}
    for key, item in options.items():
        frozen[key] = MappingProxyType(dict(item)) if isinstance(item, Mapping) else item
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class Web2Options:
    """Email confirmation, admin gating, mail templates and the Twilio provider.

    Mail and mailer settings are opaque to this package; they are handed
    through to the delivery collaborator unchanged.
    """

    confirmation_required: bool
    admin_only: bool
    send_mail_options: Mapping[str, Any]
    mailer_options: Mapping[str, Any]
    twilio_options: TwilioOptions

    def __post_init__(self) -> None:
        require_bool(self.confirmation_required, "confirmation_required")
        require_bool(self.admin_only, "admin_only")
        object.__setattr__(
            self, "send_mail_options", _require_send_mail_options(self.send_mail_options)
        )
        object.__setattr__(
            self, "mailer_options", require_mapping(self.mailer_options, "mailerOptions")
        )
        require_instance(self.twilio_options, TwilioOptions, "twilioOptions")

    @property
    def confirm_mail(self) -> Mapping[str, Any]:
        return self.send_mail_options["confirm"]

    @property
    def reset_mail(self) -> Mapping[str, Any]:
        return self.send_mail_options["reset"]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Web2Options":
        data = require_mapping(data, "web2Options")
        return cls(
            confirmation_required=data.get("confirmation_required"),
            admin_only=data.get("admin_only"),
            send_mail_options=data.get("sendMailOptions"),
            mailer_options=data.get("mailerOptions"),
            twilio_options=TwilioOptions.from_dict(data.get("twilioOptions")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "confirmation_required": self.confirmation_required,
            "admin_only": self.admin_only,
            "sendMailOptions": {
                key: dict(item) if isinstance(item, Mapping) else item
                for key, item in self.send_mail_options.items()
            },
            "mailerOptions": dict(self.mailer_options),
            "twilioOptions": self.twilio_options.to_dict(),
        }
