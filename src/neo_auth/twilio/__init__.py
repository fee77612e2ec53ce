"""Twilio Verify configuration used by the second-factor lifecycle."""

from .secrets import TwilioSecrets
from .options import TwilioOptions

__all__ = [
    "TwilioSecrets",
    "TwilioOptions",
]
