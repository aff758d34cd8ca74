"""
Lecturer claims module.

Claim schema, status state machine, total calculation and document checks.
"""

from .attachments import (
    MAX_DOCUMENT_BYTES,
    SUPPORTED_DOCUMENT_TYPES,
    check_document_size,
    document_display_name,
    is_supported_document,
)
from .calculator import compute_total, format_amount, parse_number
from .errors import (
    ClaimError,
    DocumentTooLargeError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
    ValidationErrorKind,
)
from .schema import ALLOWED_TRANSITIONS, NO_DOCUMENT, Claim, ClaimStatus

__all__ = [
    # Schema
    "Claim",
    "ClaimStatus",
    "ALLOWED_TRANSITIONS",
    "NO_DOCUMENT",
    # Calculation
    "compute_total",
    "format_amount",
    "parse_number",
    # Documents
    "MAX_DOCUMENT_BYTES",
    "SUPPORTED_DOCUMENT_TYPES",
    "check_document_size",
    "document_display_name",
    "is_supported_document",
    # Errors
    "ClaimError",
    "ValidationError",
    "ValidationErrorKind",
    "NotFoundError",
    "InvalidTransitionError",
    "DocumentTooLargeError",
]
