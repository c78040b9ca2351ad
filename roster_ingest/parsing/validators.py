from __future__ import annotations

from collections.abc import Sequence

"""Structural validation of an ingested document.

Only two conditions are fatal: nothing to parse, or a header row without a
single non-blank label. Headers whose labels map to no canonical field are
accepted; their rows are filled by the enhancer. Missing or malformed values
inside rows are repaired by the enhancer and never raise.
"""

__all__ = [
    "IngestError",
    "EmptyDocumentError",
    "NoColumnsError",
    "validate_data_rows",
    "validate_document",
    "validate_header",
]


class IngestError(Exception):
    """Base exception for rejected ingestion calls."""


class EmptyDocumentError(IngestError):
    """Raised when the document has no usable data lines."""

    error_type = "EMPTY_DOCUMENT"


class NoColumnsError(IngestError):
    """Raised when the header row has no non-blank label."""

    error_type = "NO_COLUMNS"


def validate_document(lines: Sequence[object]) -> None:
    """Reject documents with zero non-blank lines/rows."""
    if not lines:
        raise EmptyDocumentError("Empty file or no valid rows found")


def validate_header(labels: Sequence[str]) -> None:
    """Reject a header row made only of blank labels."""
    if not any(label.strip() for label in labels):
        raise NoColumnsError("No column headers found in the header row")


def validate_data_rows(rows: Sequence[object]) -> None:
    """Reject documents that contain a header but no data rows."""
    if not rows:
        raise EmptyDocumentError("No data found in the file")
