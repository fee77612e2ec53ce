"""Second-factor record and its lifecycle operations."""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..core.exceptions import InvalidStateTransitionError
from ..core.validation import (
    require_enum,
    require_instance,
    require_mapping,
    require_non_empty_string,
)
from .responses import CreateResponse, DeleteResponse, VerifyResponse
from .status import SecondFactorStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SecondFactorState:
    """One enrolled factor, keyed externally by ``factor_sid``.

    Handles ONLY the lifecycle rules. Every operation returns a new state;
    the provider call that produced the response happens elsewhere.
    """

    status: SecondFactorStatus
    factor_sid: str
    identity: str
    qr_code: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "status", require_enum(self.status, SecondFactorStatus, "status")
        )
        require_non_empty_string(self.factor_sid, "factorSid")
        require_non_empty_string(self.identity, "identity")
        require_non_empty_string(self.qr_code, "qr_code")

    @property
    def is_verified(self) -> bool:
        return self.status is SecondFactorStatus.VERIFIED

    @property
    def is_disabled(self) -> bool:
        return self.status is SecondFactorStatus.DISABLED

    @classmethod
    def enroll(
        cls,
        create_response: CreateResponse,
        qr_code: Optional[str] = None,
    ) -> "SecondFactorState":
        """Start tracking a freshly created factor.

        Args:
            create_response: Provider response of the Create operation
            qr_code: Rendered QR code; defaults to the provisioning uri

        Returns:
            UNVERIFIED state for the new factor
        """
        require_instance(create_response, CreateResponse, "create_response")
        state = cls(
            status=SecondFactorStatus.UNVERIFIED,
            factor_sid=create_response.factor_sid,
            identity=create_response.identity,
            qr_code=create_response.uri if qr_code is None else qr_code,
        )
        logger.info(f"Second factor {state.factor_sid} enrolled (unverified)")
        return state

    def apply_verification(self, verify_response: VerifyResponse) -> "SecondFactorState":
        """Apply the outcome of a verification attempt.

        Returns:
            VERIFIED state on success, this state unchanged on failure

        Raises:
            InvalidStateTransitionError: If the factor is DISABLED
        """
        require_instance(verify_response, VerifyResponse, "verify_response")
        self._ensure_can_transition(SecondFactorStatus.VERIFIED)
        if not verify_response.success:
            logger.info(f"Verification of second factor {self.factor_sid} failed")
            return self
        logger.info(f"Second factor {self.factor_sid} verified")
        return self._with_status(SecondFactorStatus.VERIFIED)

    def apply_deletion(self, delete_response: DeleteResponse) -> "SecondFactorState":
        """Apply the outcome of a deletion.

        Returns:
            DISABLED state on success, this state unchanged on failure

        Raises:
            InvalidStateTransitionError: If the factor is already DISABLED
        """
        require_instance(delete_response, DeleteResponse, "delete_response")
        self._ensure_can_transition(SecondFactorStatus.DISABLED)
        if not delete_response.success:
            logger.info(f"Deletion of second factor {self.factor_sid} failed")
            return self
        logger.info(f"Second factor {self.factor_sid} disabled")
        return self._with_status(SecondFactorStatus.DISABLED)

    def _ensure_can_transition(self, target: SecondFactorStatus) -> None:
        if not self.status.can_transition_to(target):
            logger.warning(
                f"Rejected second factor {self.factor_sid} transition "
                f"{self.status.value} -> {target.value}"
            )
            raise InvalidStateTransitionError(self.status.value, target.value)

    def _with_status(self, status: SecondFactorStatus) -> "SecondFactorState":
        if status is self.status:
            return self
        return replace(self, status=status)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SecondFactorState":
        data = require_mapping(data, "twoFactor")
        return cls(
            status=data.get("status"),
            factor_sid=data.get("factorSid"),
            identity=data.get("identity"),
            qr_code=data.get("qr_code"),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "status": self.status.value,
            "factorSid": self.factor_sid,
            "identity": self.identity,
            "qr_code": self.qr_code,
        }
