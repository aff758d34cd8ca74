"""
Tests for supporting document checks.
"""

import pytest

from src.claims.attachments import (
    MAX_DOCUMENT_BYTES,
    check_document_size,
    document_display_name,
    is_supported_document,
)
from src.claims.errors import DocumentTooLargeError


def test_size_at_limit_is_accepted():
    check_document_size(MAX_DOCUMENT_BYTES)
    check_document_size(0)


def test_size_over_limit_is_rejected():
    with pytest.raises(DocumentTooLargeError) as exc_info:
        check_document_size(MAX_DOCUMENT_BYTES + 1)

    assert exc_info.value.message == "File size exceeds 5MB limit. Please choose a smaller file."
    assert exc_info.value.to_dict()["size_bytes"] == MAX_DOCUMENT_BYTES + 1


def test_display_name_is_base_name(tmp_path):
    doc = tmp_path / "nested" / "timesheet.pdf"
    doc.parent.mkdir()
    doc.write_bytes(b"%PDF-1.4")

    assert document_display_name(doc) == "timesheet.pdf"
    assert document_display_name(str(doc)) == "timesheet.pdf"


def test_display_name_applies_custom_limit(tmp_path):
    doc = tmp_path / "large.xlsx"
    doc.write_bytes(b"x" * 11)

    with pytest.raises(DocumentTooLargeError):
        document_display_name(doc, max_bytes=10)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        document_display_name(tmp_path / "missing.pdf")


@pytest.mark.parametrize(
    "name, expected",
    [("plan.PDF", True), ("plan.docx", True), ("hours.xlsx", True), ("notes.txt", False)],
)
def test_supported_document_types(name, expected):
    assert is_supported_document(name) is expected
