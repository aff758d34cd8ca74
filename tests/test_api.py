"""
Tests for the claim tracker FastAPI app.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.claims.attachments import MAX_DOCUMENT_BYTES
from src.storage import ClaimStore
from src.utils.config import Settings


@pytest.fixture
def store() -> ClaimStore:
    return ClaimStore(today=lambda: date(2024, 10, 17))


@pytest.fixture
def client(store) -> TestClient:
    settings = Settings(current_lecturer="Dr. Smith", seed_sample_data=False)
    return TestClient(create_app(settings=settings, store=store))


def submit(client, **overrides):
    payload = {"hours": "40", "hourly_rate": "75", "notes": "notes"}
    payload.update(overrides)
    return client.post("/claims", json=payload)


# ============================================================================
# Health
# ============================================================================


def test_root_and_health(client):
    submit(client)

    root = client.get("/")
    assert root.status_code == 200
    assert root.json()["claims"] == 1

    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["claims"] == {"Pending": 1, "Approved": 0, "Rejected": 0}
    assert health.json()["config"]["current_lecturer"] == "Dr. Smith"


def test_default_app_seeds_sample_claims():
    client = TestClient(create_app(settings=Settings(seed_sample_data=True)))

    claims = client.get("/claims").json()

    assert [c["status"] for c in claims] == ["Approved", "Pending"]


# ============================================================================
# Lecturer
# ============================================================================


@pytest.mark.parametrize(
    "hours, rate, expected, display",
    [
        ("40", "75", 3000.0, "$3000.00"),
        ("35.5", "80", 2840.0, "$2840.00"),
        ("", "75", 0.0, "$0.00"),
        ("abc", "10", 0.0, "$0.00"),
    ],
)
def test_preview_total(client, hours, rate, expected, display):
    response = client.post("/claims/preview", json={"hours": hours, "hourly_rate": rate})

    assert response.status_code == 200
    assert response.json() == {"total_amount": expected, "display": display}


def test_submit_claim(client):
    response = submit(client)

    assert response.status_code == 201
    data = response.json()
    assert data["claim_id"] == 1
    assert data["lecturer_name"] == "Dr. Smith"
    assert data["status"] == "Pending"
    assert data["document_name"] == "None"
    assert data["total_amount"] == 3000
    assert data["submitted_on"] == "2024-10-17"


def test_submit_uses_explicit_lecturer(client):
    response = submit(client, lecturer_name="Prof. Johnson", hours=35, hourly_rate=80)

    assert response.status_code == 201
    assert response.json()["lecturer_name"] == "Prof. Johnson"
    assert response.json()["total_amount"] == 2800


@pytest.mark.parametrize(
    "overrides, error",
    [
        ({"hours": "0"}, "InvalidHours"),
        ({"hours": "abc"}, "InvalidHours"),
        ({"hourly_rate": -5}, "InvalidRate"),
    ],
)
def test_submit_validation_errors(client, store, overrides, error):
    response = submit(client, **overrides)

    assert response.status_code == 422
    assert response.json()["error"] == error
    assert len(store) == 0


@pytest.mark.parametrize(
    "overrides, error",
    [
        ({"hours": True}, "InvalidHours"),
        ({"hourly_rate": False}, "InvalidRate"),
    ],
)
def test_submit_rejects_boolean_amounts(client, store, overrides, error):
    response = submit(client, **overrides)

    assert response.status_code == 422
    assert response.json()["error"] == error
    assert len(store) == 0


def test_preview_treats_boolean_as_blank(client):
    response = client.post("/claims/preview", json={"hours": True, "hourly_rate": "75"})

    assert response.status_code == 200
    assert response.json() == {"total_amount": 0.0, "display": "$0.00"}


def test_submit_accepts_numeric_json(client):
    response = submit(client, hours=7.5, hourly_rate=20)

    assert response.status_code == 201
    assert response.json()["total_amount"] == 150.0


def test_submit_rejects_large_document(client, store):
    response = submit(client, document_name="huge.pdf", document_size_bytes=MAX_DOCUMENT_BYTES + 1)

    assert response.status_code == 413
    assert response.json()["error"] == "DocumentTooLarge"
    assert len(store) == 0


def test_submit_accepts_document_within_limit(client):
    response = submit(client, document_name="syllabus.pdf", document_size_bytes=1024)

    assert response.status_code == 201
    assert response.json()["document_name"] == "syllabus.pdf"


# ============================================================================
# Listings and review
# ============================================================================


def test_list_and_filter(client):
    submit(client)
    submit(client)
    client.post("/claims/1/approve")

    assert [c["claim_id"] for c in client.get("/claims").json()] == [1, 2]
    assert [c["claim_id"] for c in client.get("/claims/pending").json()] == [2]
    assert [c["claim_id"] for c in client.get("/claims", params={"status": "Approved"}).json()] == [1]
    assert client.get("/claims", params={"status": "Archived"}).status_code == 422


def test_get_claim(client):
    submit(client)

    assert client.get("/claims/1").json()["claim_id"] == 1

    missing = client.get("/claims/7")
    assert missing.status_code == 404
    assert missing.json() == {"error": "NotFound", "message": "Claim 7 not found", "claim_id": 7}


def test_approve_then_approve_again(client):
    claim_id = submit(client).json()["claim_id"]

    approved = client.post(f"/claims/{claim_id}/approve")
    assert approved.status_code == 200
    assert approved.json()["status"] == "Approved"

    again = client.post(f"/claims/{claim_id}/approve")
    assert again.status_code == 409
    assert again.json()["error"] == "InvalidTransition"
    assert again.json()["current_status"] == "Approved"


def test_reject_then_approve(client):
    claim_id = submit(client).json()["claim_id"]

    assert client.post(f"/claims/{claim_id}/reject").json()["status"] == "Rejected"
    assert client.post(f"/claims/{claim_id}/approve").status_code == 409
    assert client.get(f"/claims/{claim_id}").json()["status"] == "Rejected"


def test_review_unknown_claim(client):
    assert client.post("/claims/99/reject").status_code == 404
