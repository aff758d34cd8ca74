"""
In-memory claim storage.

Holds every submitted claim for the lifetime of the process, assigns
sequential ids and enforces the Pending -> Approved/Rejected state machine.
No durability is provided.
"""

import logging
import math
import threading
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Union

from ..claims.calculator import parse_number
from ..claims.errors import (
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
    ValidationErrorKind,
)
from ..claims.schema import NO_DOCUMENT, Claim, ClaimStatus

logger = logging.getLogger(__name__)


def _parse_positive(value: Any, kind: ValidationErrorKind, message: str) -> float:
    """Parse a submission amount, raising ValidationError unless it is > 0."""
    number = parse_number(value)
    if number is None or number <= 0:
        raise ValidationError(kind, message, value)
    return number


class ClaimStore:
    """
    Authoritative holder of all claims.

    Usage:
        store = ClaimStore()

        # Submit a claim
        claim = store.submit("Dr. Smith", "40", "75", notes="October hours")

        # Manager view
        pending = store.list_by_status(ClaimStatus.PENDING)

        # Review
        store.approve(claim.claim_id)
    """

    def __init__(self, today: Callable[[], date] = date.today):
        """
        Initialize an empty store.

        Args:
            today: Clock used to stamp submission dates
        """
        self._today = today
        self._claims: List[Claim] = []
        self._by_id: Dict[int, Claim] = {}
        self._next_id = 1
        # Guards _claims, _by_id and _next_id together
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._claims)

    def submit(
        self,
        lecturer_name: str,
        hours: Any,
        hourly_rate: Any,
        notes: Optional[str] = None,
        document_name: Optional[str] = None,
    ) -> Claim:
        """
        Validate and record a new claim.

        Args:
            lecturer_name: Identity of the submitting lecturer
            hours: Hours worked (str or number)
            hourly_rate: Rate per hour (str or number)
            notes: Optional free-text notes
            document_name: Optional display name of the attached file

        Returns:
            The new claim, in Pending status

        Raises:
            ValidationError: If the lecturer is blank or hours/rate are not positive numbers,
                or their product overflows
        """
        name = (lecturer_name or "").strip()
        if not name:
            raise ValidationError(
                ValidationErrorKind.INVALID_LECTURER,
                "Please provide the lecturer name.",
                lecturer_name,
            )
        hours_value = _parse_positive(
            hours, ValidationErrorKind.INVALID_HOURS, "Please enter valid hours worked."
        )
        rate_value = _parse_positive(
            hourly_rate, ValidationErrorKind.INVALID_RATE, "Please enter valid hourly rate."
        )
        total = hours_value * rate_value
        if not math.isfinite(total):
            raise ValidationError(
                ValidationErrorKind.INVALID_TOTAL,
                "Total amount is too large.",
                f"{hours_value} x {rate_value}",
            )

        document = (document_name or "").strip() or NO_DOCUMENT

        with self._lock:
            claim = Claim(
                claim_id=self._next_id,
                lecturer_name=name,
                submitted_on=self._today(),
                hours=hours_value,
                hourly_rate=rate_value,
                total_amount=total,
                status=ClaimStatus.PENDING,
                notes=notes or "",
                document_name=document,
            )
            self._next_id += 1
            self._claims.append(claim)
            self._by_id[claim.claim_id] = claim

        logger.info(
            f"Claim {claim.claim_id} submitted by {claim.lecturer_name}: "
            f"{claim.hours} h x {claim.hourly_rate} = {claim.total_amount}"
        )
        return claim

    def get(self, claim_id: int) -> Optional[Claim]:
        """
        Retrieve a claim by ID.

        Returns:
            Claim or None if not found
        """
        with self._lock:
            return self._by_id.get(claim_id)

    def list_all(self) -> List[Claim]:
        """List every claim in submission order."""
        with self._lock:
            return list(self._claims)

    def list_by_status(self, status: Union[ClaimStatus, str]) -> List[Claim]:
        """
        List claims with the given status in submission order.

        Args:
            status: ClaimStatus or its value ('Pending', 'Approved', 'Rejected')

        Raises:
            ValueError: If ``status`` is not a known status value
        """
        status = ClaimStatus(status)
        with self._lock:
            return [claim for claim in self._claims if claim.status == status]

    def count(self, status: Optional[Union[ClaimStatus, str]] = None) -> int:
        """Count claims, optionally by status."""
        if status is None:
            return len(self)
        return len(self.list_by_status(status))

    def approve(self, claim_id: int) -> Claim:
        """Move a pending claim to Approved."""
        return self._transition(claim_id, ClaimStatus.APPROVED)

    def reject(self, claim_id: int) -> Claim:
        """Move a pending claim to Rejected."""
        return self._transition(claim_id, ClaimStatus.REJECTED)

    def _transition(self, claim_id: int, target: ClaimStatus) -> Claim:
        """Apply a status transition atomically, or raise without changing anything."""
        with self._lock:
            claim = self._by_id.get(claim_id)
            if claim is None:
                logger.warning(f"Cannot move claim {claim_id} to {target.value}: not found")
                raise NotFoundError(claim_id)

            if not claim.status.can_transition_to(target):
                logger.warning(
                    f"Cannot move claim {claim_id} from {claim.status.value} to {target.value}"
                )
                raise InvalidTransitionError(claim_id, claim.status.value, target.value)

            # Ids start at 1 and claims are never removed, so the id fixes the position
            claim = claim.model_copy(update={"status": target})
            self._claims[claim_id - 1] = claim
            self._by_id[claim_id] = claim

        logger.info(f"Claim {claim_id} from {claim.lecturer_name} {target.value.lower()}")
        return claim
