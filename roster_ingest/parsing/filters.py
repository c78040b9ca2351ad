from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from ..models.canonical import CanonicalField

"""Row filter for header/continuation fragments parsed as data.

Broken multi-row headers and merged-cell exports leave label text such as
"Programme Name" or "Sl. No" in data positions. A row carrying such text is
not a roster entry and is removed after enhancement.
"""

__all__ = [
    "HEADER_FRAGMENT_KEYWORDS",
    "PLACEHOLDER_VALUES",
    "SL_NO",
    "is_contaminated",
    "is_sentinel_value",
    "looks_like_header_fragment",
]

HEADER_FRAGMENT_KEYWORDS = ("programme", "email", "folder", "accompanying", "charge")
SL_NO = "Sl. No"
_CLASS_WISE_RE = re.compile(r"class\s*wise", re.IGNORECASE)

# Literal fallbacks written by the enhancer; never treated as header text
PLACEHOLDER_VALUES = frozenset({
    "teacher@example.com",
    "folder@example.com",
    "Robe Teacher",
    "Folder Teacher",
})


def is_sentinel_value(value: str) -> bool:
    """True for known garbage left behind by broken multi-row headers."""
    stripped = value.strip()
    return (
        stripped == SL_NO
        or _CLASS_WISE_RE.search(stripped) is not None
    )


def looks_like_header_fragment(value: str) -> bool:
    lowered = value.lower()
    return any(word in lowered for word in HEADER_FRAGMENT_KEYWORDS)


def _any_fragment(values: Iterable[str]) -> bool:
    return any(
        isinstance(v, str) and v not in PLACEHOLDER_VALUES and looks_like_header_fragment(v)
        for v in values
    )


def is_contaminated(record: Mapping[str, str], raw_fields: Mapping[str, str] | None = None) -> bool:
    """Decide whether a produced row is a mis-parsed header fragment.

    The enhanced record and, when given, the raw field map it was built from
    are both inspected: enhancement may copy header text in from a synonym
    column, and it also replaces sentinel values that only the raw row still
    shows.
    """
    teacher_key = CanonicalField.ACCOMPANYING_TEACHER.value
    if record.get(teacher_key) == SL_NO:
        return True
    if _any_fragment(record.values()):
        return True
    if raw_fields is not None:
        if raw_fields.get(teacher_key) == SL_NO:
            return True
        if _any_fragment(raw_fields.values()):
            return True
    return False
