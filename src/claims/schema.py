"""
Claim schema for lecturer hourly-work claims.

Defines the Pydantic claim model and the status state machine.
"""

import math
from datetime import date
from enum import Enum
from typing import Dict, FrozenSet

from pydantic import BaseModel, Field, field_validator, model_validator


# Stored document name when no file is attached
NO_DOCUMENT = "None"


# ============================================================================
# Status
# ============================================================================


class ClaimStatus(str, Enum):
    """Lifecycle state of a claim."""
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    def can_transition_to(self, target: "ClaimStatus") -> bool:
        """Check whether moving from this status to ``target`` is legal."""
        return target in ALLOWED_TRANSITIONS[self]

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self]


# Approved and Rejected have no outgoing edges
ALLOWED_TRANSITIONS: Dict[ClaimStatus, FrozenSet[ClaimStatus]] = {
    ClaimStatus.PENDING: frozenset({ClaimStatus.APPROVED, ClaimStatus.REJECTED}),
    ClaimStatus.APPROVED: frozenset(),
    ClaimStatus.REJECTED: frozenset(),
}


# ============================================================================
# Claim
# ============================================================================


class Claim(BaseModel):
    """
    A lecturer's request for payment for worked hours.

    Created only through ClaimStore.submit. Instances are frozen; approve and
    reject replace the stored claim with a copy carrying the new status.
    """

    claim_id: int = Field(ge=1, description="Store-assigned sequential identifier")
    lecturer_name: str = Field(min_length=1, description="Submitting lecturer")
    submitted_on: date = Field(description="Date the claim was submitted")

    hours: float = Field(gt=0, description="Hours worked")
    hourly_rate: float = Field(gt=0, description="Rate per hour")
    total_amount: float = Field(description="hours * hourly_rate at full precision")

    status: ClaimStatus = Field(default=ClaimStatus.PENDING, description="Lifecycle state")
    notes: str = Field(default="", description="Free-text notes from the lecturer")
    document_name: str = Field(default=NO_DOCUMENT, description="Attached file display name")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "claim_id": 1,
                    "lecturer_name": "Dr. Smith",
                    "submitted_on": "2024-10-17",
                    "hours": 40,
                    "hourly_rate": 75,
                    "total_amount": 3000,
                    "status": "Approved",
                    "notes": "Regular teaching hours for October",
                    "document_name": "syllabus.pdf",
                }
            ]
        }
    }

    @field_validator("hours", "hourly_rate")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Reject infinite values that would pass the gt=0 bound."""
        if not math.isfinite(v):
            raise ValueError("must be a finite number")
        return v

    @field_validator("document_name")
    @classmethod
    def validate_document_name(cls, v: str) -> str:
        """Substitute the sentinel for a blank document name."""
        v = v.strip()
        return v or NO_DOCUMENT

    @model_validator(mode="after")
    def validate_total(self) -> "Claim":
        """Ensure the stored total matches hours * rate."""
        if self.total_amount != self.hours * self.hourly_rate:
            raise ValueError("total_amount must equal hours * hourly_rate")
        return self

    @property
    def submitted_on_display(self) -> str:
        """Submission date formatted for listings, e.g. 'Oct 19, 2026'."""
        return self.submitted_on.strftime("%b %d, %Y")

    @property
    def has_document(self) -> bool:
        return self.document_name != NO_DOCUMENT

    @property
    def document_info(self) -> str:
        """Document summary line for the manager view."""
        if self.has_document:
            return f"📎 {self.document_name}"
        return "No documents"
