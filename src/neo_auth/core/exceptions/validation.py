"""Structural validation exceptions.

Every neo-auth constructor either returns a fully valid value or raises
one of these errors naming the offending field.
"""

from typing import Any, Dict, Optional

from .base import NeoAuthError


class StructuralValidationError(NeoAuthError, ValueError):
    """Raised when an input does not have the expected shape.

    Handles ONLY the representation of a structural failure.
    The message always reads "<field> <expectation>", e.g.
    "email must match a valid address pattern".
    """

    def __init__(
        self,
        field: str,
        expectation: str,
        *,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize validation failure.

        Args:
            field: Name of the offending field (wire name or dotted path)
            expectation: The expectation the value violated
            context: Additional context for debugging
        """
        super().__init__(
            f"{field} {expectation}",
            error_code="VALIDATION_ERROR",
            details={"field": field, "expectation": expectation, **(context or {})},
        )
        self.field = field
        self.expectation = expectation

    def __reduce__(self):
        return (self.__class__, (self.field, self.expectation))


class InvalidStateTransitionError(StructuralValidationError):
    """Raised when a second-factor record is asked for a transition it cannot make."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            "status",
            f"cannot transition from {current} to {target}",
            context={"current": current, "target": target},
        )
        self.current = current
        self.target = target

    def __reduce__(self):
        return (self.__class__, (self.current, self.target))
