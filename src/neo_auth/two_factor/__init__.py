"""Second-factor lifecycle: enrollment, verification and revocation."""

from .status import SecondFactorStatus
from .responses import CreateResponse, VerifyResponse, DeleteResponse
from .security import SecurityCode
from .state import SecondFactorState

__all__ = [
    "SecondFactorStatus",
    "CreateResponse",
    "VerifyResponse",
    "DeleteResponse",
    "SecurityCode",
    "SecondFactorState",
]
