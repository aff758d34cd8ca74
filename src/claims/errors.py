"""Error taxonomy for claim submission and review."""

from enum import Enum
from typing import Any, Dict, Optional


class ValidationErrorKind(str, Enum):
    """Which submission input failed validation."""
    INVALID_HOURS = "InvalidHours"
    INVALID_RATE = "InvalidRate"
    INVALID_LECTURER = "InvalidLecturer"
    INVALID_TOTAL = "InvalidTotal"


class ClaimError(Exception):
    """
    Base exception for all claim operations.

    Carries a machine-readable error type alongside the message so callers
    can report the failure without inspecting the exception class.

    Attributes:
        error_type: Short identifier for the failure
        message: Human-readable message
        details: Additional context for logging/serialization
    """

    error_type = "ClaimError"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.error_type}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for logging/serialization.

        Returns:
            Dictionary representation of error
        """
        return {
            "error": self.error_type,
            "message": self.message,
            **self.details,
        }


class ValidationError(ClaimError):
    """Raised by submit when an input is missing, non-numeric or not positive."""

    def __init__(self, kind: ValidationErrorKind, message: str, value: Any = None):
        self.kind = kind
        super().__init__(message, {"field_value": None if value is None else str(value)})

    @property
    def error_type(self) -> str:  # type: ignore[override]
        return self.kind.value


class NotFoundError(ClaimError):
    """Raised when a claim id does not exist in the store."""

    error_type = "NotFound"

    def __init__(self, claim_id: int):
        self.claim_id = claim_id
        super().__init__(f"Claim {claim_id} not found", {"claim_id": claim_id})


class InvalidTransitionError(ClaimError):
    """Raised when approve/reject is applied to a claim that is no longer pending."""

    error_type = "InvalidTransition"

    def __init__(self, claim_id: int, current: str, requested: str):
        self.claim_id = claim_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Claim {claim_id} is {current} and cannot be moved to {requested}",
            {"claim_id": claim_id, "current_status": current, "requested_status": requested},
        )


class DocumentTooLargeError(ClaimError):
    """Raised when a supporting document exceeds the upload ceiling."""

    error_type = "DocumentTooLarge"

    def __init__(self, size_bytes: int, max_bytes: int):
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        limit_mb = max_bytes // (1024 * 1024)
        super().__init__(
            f"File size exceeds {limit_mb}MB limit. Please choose a smaller file.",
            {"size_bytes": size_bytes, "max_bytes": max_bytes},
        )
