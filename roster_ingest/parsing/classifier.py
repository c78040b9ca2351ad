from __future__ import annotations

from collections.abc import Sequence

from ..models.ingest_result import DocumentFormat

"""Simple / complex format decision, evaluated once per document."""

__all__ = [
    "classify_format",
]

_SIMPLE_REQUIRED = "programme"
_SIMPLE_ANY = ("robe", "folder", "name")


def classify_format(lines: Sequence[str]) -> DocumentFormat:
    """Classify a document by its first line.

    SIMPLE iff the lower-cased first line contains "programme" and at least
    one of "robe", "folder" or "name". An empty document is COMPLEX.
    """
    if not lines:
        return DocumentFormat.COMPLEX
    first = lines[0].lower()
    if _SIMPLE_REQUIRED in first and any(word in first for word in _SIMPLE_ANY):
        return DocumentFormat.SIMPLE
    return DocumentFormat.COMPLEX
