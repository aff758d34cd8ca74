"""
Supporting document checks.

The file picker belongs to the presentation layer; these helpers enforce the
upload ceiling and derive the display name stored on the claim.
"""

import logging
from pathlib import Path
from typing import Union

from .errors import DocumentTooLargeError

logger = logging.getLogger(__name__)

MAX_DOCUMENT_BYTES = 5 * 1024 * 1024

# Preferred picker filter; any file type is still accepted
SUPPORTED_DOCUMENT_TYPES = (".pdf", ".docx", ".xlsx")


def check_document_size(size_bytes: int, max_bytes: int = MAX_DOCUMENT_BYTES) -> None:
    """Raise DocumentTooLargeError if ``size_bytes`` exceeds ``max_bytes``."""
    if size_bytes > max_bytes:
        logger.warning(f"Rejected document of {size_bytes} bytes (limit {max_bytes})")
        raise DocumentTooLargeError(size_bytes, max_bytes)


def is_supported_document(path: Union[str, Path]) -> bool:
    """Check whether the file matches the preferred document types."""
    return Path(path).suffix.lower() in SUPPORTED_DOCUMENT_TYPES


def document_display_name(path: Union[str, Path], max_bytes: int = MAX_DOCUMENT_BYTES) -> str:
    """
    Validate a chosen file and return the name to store on the claim.

    Args:
        path: Path to the selected file
        max_bytes: Upload ceiling in bytes

    Returns:
        The file's base name

    Raises:
        FileNotFoundError: If the file does not exist
        DocumentTooLargeError: If the file exceeds ``max_bytes``
    """
    path = Path(path)
    check_document_size(path.stat().st_size, max_bytes)
    return path.name
