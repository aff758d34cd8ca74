"""Demonstration claims loaded into a fresh store."""

import logging
from typing import List

from ..claims.schema import Claim
from .claim_store import ClaimStore

logger = logging.getLogger(__name__)


SAMPLE_CLAIMS = [
    {
        "lecturer_name": "Dr. Smith",
        "hours": 40,
        "hourly_rate": 75,
        "notes": "Regular teaching hours for October",
        "document_name": "syllabus.pdf",
        "approve": True,
    },
    {
        "lecturer_name": "Prof. Johnson",
        "hours": 35,
        "hourly_rate": 80,
        "notes": "Additional workshop preparation",
        "document_name": "workshop_plan.docx",
        "approve": False,
    },
]


def seed_sample_claims(store: ClaimStore) -> List[Claim]:
    """
    Submit the sample claims, approving those marked for approval.

    Returns:
        The seeded claims in submission order
    """
    seeded = []
    for sample in SAMPLE_CLAIMS:
        claim = store.submit(
            sample["lecturer_name"],
            sample["hours"],
            sample["hourly_rate"],
            notes=sample["notes"],
            document_name=sample["document_name"],
        )
        if sample["approve"]:
            claim = store.approve(claim.claim_id)
        seeded.append(claim)

    logger.info(f"Seeded {len(seeded)} sample claims")
    return seeded
