"""
Storage module for claims.

Provides in-memory storage for:
- Lecturer claims and their review status
- Sample data for demonstrations
"""

from .claim_store import ClaimStore
from .sample_data import SAMPLE_CLAIMS, seed_sample_claims

__all__ = [
    "ClaimStore",
    "SAMPLE_CLAIMS",
    "seed_sample_claims",
]
