"""Console presentation for the claim tracker."""

from .console import (
    STATUS_COLORS,
    ClaimConsole,
    build_claim_card,
    build_claims_table,
    build_pending_view,
)

__all__ = [
    "STATUS_COLORS",
    "ClaimConsole",
    "build_claim_card",
    "build_claims_table",
    "build_pending_view",
]
