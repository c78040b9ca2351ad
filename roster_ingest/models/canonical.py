from __future__ import annotations

from enum import Enum

"""Canonical record fields for normalized teacher/role rosters.

Every record leaving the ingestion pipeline is a plain ``dict[str, str]`` that
carries exactly the six keys defined by :class:`CanonicalField`. Downstream
consumers (storage sync, UI tables, exports) depend on that fixed shape.
"""

__all__ = [
    "CanonicalField",
    "CONTENT_FIELDS",
    "DEFAULT_HEADER_LABELS",
    "empty_record",
    "is_canonical_label",
]


class CanonicalField(str, Enum):
    """Output keys of a normalized record.

    Values are the human-readable column labels used in exported CSV files.
    """
    PROGRAMME_NAME = "Programme Name"
    ROBE_EMAIL = "Robe Email ID"
    FOLDER_EMAIL = "Folder Email ID"
    ACCOMPANYING_TEACHER = "Accompanying Teacher"
    FOLDER_IN_CHARGE = "Folder in Charge"
    CLASS_SECTION = "Class Section"


# Fields the enhancer guarantees to fill (ClassSection may stay empty)
CONTENT_FIELDS: tuple[CanonicalField, ...] = (
    CanonicalField.PROGRAMME_NAME,
    CanonicalField.ROBE_EMAIL,
    CanonicalField.FOLDER_EMAIL,
    CanonicalField.ACCOMPANYING_TEACHER,
    CanonicalField.FOLDER_IN_CHARGE,
)

# Synthesized header when no header row can be located
DEFAULT_HEADER_LABELS: tuple[str, ...] = tuple(f.value for f in CONTENT_FIELDS)

_CANONICAL_BY_LOWER = {f.value.lower(): f for f in CanonicalField}


def empty_record() -> dict[str, str]:
    """Return a record with all six canonical keys set to empty strings."""
    return {f.value: "" for f in CanonicalField}


def is_canonical_label(label: str) -> CanonicalField | None:
    """Return the canonical field whose label equals ``label`` (case-insensitive)."""
    return _CANONICAL_BY_LOWER.get(label.strip().lower())
