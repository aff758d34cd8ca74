"""
FastAPI application for the claim tracker.

Provides:
- Claim total preview and submission for lecturers
- Claim listings for the tracking and manager views
- Approve/reject endpoints for managers
"""

import logging

logging.getLogger("python_multipart").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

from contextlib import asynccontextmanager
from typing import List, Optional, Union

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from ..claims.attachments import check_document_size
from ..claims.calculator import compute_total, format_amount
from ..claims.errors import (
    ClaimError,
    DocumentTooLargeError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from ..claims.schema import Claim, ClaimStatus
from ..storage import ClaimStore, seed_sample_claims
from ..utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


ERROR_STATUS_CODES = {
    ValidationError: 422,
    NotFoundError: 404,
    InvalidTransitionError: 409,
    DocumentTooLargeError: 413,
}


# =============================================================================
# Request / Response Models
# =============================================================================


# Strict members stop JSON booleans being coerced to 1.0; a bool is passed
# through unchanged so submit reports it as invalid input
FormNumber = Union[StrictFloat, StrictInt, StrictStr, StrictBool]


class TotalPreviewRequest(BaseModel):
    """Raw form values; either may be blank or malformed."""
    hours: FormNumber = ""
    hourly_rate: FormNumber = ""


class TotalPreviewResponse(BaseModel):
    total_amount: float
    display: str


class ClaimSubmission(BaseModel):
    """Claim form submitted by a lecturer."""
    hours: FormNumber = Field(description="Hours worked")
    hourly_rate: FormNumber = Field(description="Rate per hour")
    notes: Optional[str] = Field(None, description="Free-text notes")
    document_name: Optional[str] = Field(None, description="Display name of the attached file")
    document_size_bytes: Optional[int] = Field(None, ge=0, description="Size of the attached file")
    lecturer_name: Optional[str] = Field(
        None, description="Submitting lecturer (defaults to the configured current lecturer)"
    )


# =============================================================================
# App Factory
# =============================================================================


def get_store(request: Request) -> ClaimStore:
    """Dependency returning the app's claim store."""
    return request.app.state.claim_store


def get_app_settings(request: Request) -> Settings:
    """Dependency returning the app's settings."""
    return request.app.state.settings


def create_app(settings: Optional[Settings] = None, store: Optional[ClaimStore] = None) -> FastAPI:
    """
    Build the claim tracker API.

    Args:
        settings: Application settings (defaults to get_settings())
        store: Claim store to serve (defaults to a fresh store, seeded if configured)
    """
    settings = settings or get_settings()
    if store is None:
        store = ClaimStore()
        if settings.seed_sample_data:
            seed_sample_claims(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Starting claim tracker with {len(store)} claims")
        yield
        logger.info("Shutting down claim tracker...")

    app = FastAPI(
        title="Claim Tracker",
        description="Lecturer hourly-work claim submission and approval",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.claim_store = store
    app.state.settings = settings

    @app.exception_handler(ClaimError)
    async def claim_error_handler(request: Request, exc: ClaimError):
        status_code = ERROR_STATUS_CODES.get(type(exc), 400)
        return JSONResponse(status_code=status_code, content=exc.to_dict())

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------

    @app.get("/")
    def root(store: ClaimStore = Depends(get_store)):
        """Root endpoint - basic health check."""
        return {
            "service": "Claim Tracker",
            "status": "running",
            "claims": len(store),
        }

    @app.get("/health")
    def health_check(
        store: ClaimStore = Depends(get_store),
        settings: Settings = Depends(get_app_settings),
    ):
        """Detailed health check endpoint."""
        return {
            "status": "healthy",
            "claims": {status.value: store.count(status) for status in ClaimStatus},
            "config": {
                "current_lecturer": settings.current_lecturer,
                "max_document_mb": settings.max_document_mb,
            },
        }

    # -------------------------------------------------------------------------
    # Lecturer
    # -------------------------------------------------------------------------

    @app.post("/claims/preview", response_model=TotalPreviewResponse)
    def preview_total(form: TotalPreviewRequest):
        """Compute the display total for the claim form."""
        total = compute_total(form.hours, form.hourly_rate)
        return TotalPreviewResponse(total_amount=total, display=format_amount(total))

    @app.post("/claims", response_model=Claim, status_code=201)
    def submit_claim(
        form: ClaimSubmission,
        store: ClaimStore = Depends(get_store),
        settings: Settings = Depends(get_app_settings),
    ):
        """Submit a new claim in Pending status."""
        if form.document_size_bytes is not None:
            check_document_size(form.document_size_bytes, settings.max_document_bytes)

        return store.submit(
            form.lecturer_name or settings.current_lecturer,
            form.hours,
            form.hourly_rate,
            notes=form.notes,
            document_name=form.document_name,
        )

    @app.get("/claims", response_model=List[Claim])
    def list_claims(status: Optional[ClaimStatus] = None, store: ClaimStore = Depends(get_store)):
        """Tracking view: all claims, optionally filtered by status."""
        if status is None:
            return store.list_all()
        return store.list_by_status(status)

    # -------------------------------------------------------------------------
    # Manager
    # -------------------------------------------------------------------------

    @app.get("/claims/pending", response_model=List[Claim])
    def list_pending(store: ClaimStore = Depends(get_store)):
        """Manager view: claims awaiting a decision."""
        return store.list_by_status(ClaimStatus.PENDING)

    @app.get("/claims/{claim_id}", response_model=Claim)
    def get_claim(claim_id: int, store: ClaimStore = Depends(get_store)):
        """Get a single claim."""
        claim = store.get(claim_id)
        if claim is None:
            raise NotFoundError(claim_id)
        return claim

    @app.post("/claims/{claim_id}/approve", response_model=Claim)
    def approve_claim(claim_id: int, store: ClaimStore = Depends(get_store)):
        """Approve a pending claim."""
        return store.approve(claim_id)

    @app.post("/claims/{claim_id}/reject", response_model=Claim)
    def reject_claim(claim_id: int, store: ClaimStore = Depends(get_store)):
        """Reject a pending claim."""
        return store.reject(claim_id)

    return app


app = create_app()
