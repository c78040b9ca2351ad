from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..models.canonical import DEFAULT_HEADER_LABELS, CanonicalField, is_canonical_label
from ..models.ingest_result import DocumentFormat
from ..models.row_data import RawRow
from .tokenizer import parse_row

"""Header location and label normalization.

Header labels are mapped to canonical fields through one ordered rule table
(:data:`HEADER_RULES`); the first matching rule wins, so the order of the
table is the priority. Each rule is a plain predicate over the lower-cased
label and can be tested on its own.
"""

__all__ = [
    "HEADER_RULES",
    "HEADER_SCAN_LIMIT",
    "HeaderResolution",
    "normalize_header_name",
    "resolve_headers",
    "resolve_grid_headers",
]

logger = logging.getLogger(__name__)

# Complex documents: header must appear within this many lines
HEADER_SCAN_LIMIT = 10
HEADER_KEYWORDS = ("programme", "program", "email", "robe", "folder", "name")


def _has(label: str, *words: str) -> bool:
    return all(w in label for w in words)


HeaderRule = tuple[str, Callable[[str], bool], CanonicalField]

HEADER_RULES: tuple[HeaderRule, ...] = (
    (
        "programme",
        lambda s: _has(s, "program") or _has(s, "course") or _has(s, "class"),
        CanonicalField.PROGRAMME_NAME,
    ),
    (
        "robe email",
        lambda s: _has(s, "robe", "email") or _has(s, "teacher", "email") or _has(s, "accompanying"),
        CanonicalField.ROBE_EMAIL,
    ),
    (
        "folder email",
        lambda s: _has(s, "folder", "email") or _has(s, "charge", "email"),
        CanonicalField.FOLDER_EMAIL,
    ),
    (
        "accompanying teacher name",
        lambda s: "name" in s and ("teacher" in s or "robe" in s or "accompanying" in s),
        CanonicalField.ACCOMPANYING_TEACHER,
    ),
    (
        "folder in charge name",
        lambda s: "name" in s and ("folder" in s or "charge" in s),
        CanonicalField.FOLDER_IN_CHARGE,
    ),
    (
        "teacher",
        lambda s: "teacher" in s and "email" not in s,
        CanonicalField.ACCOMPANYING_TEACHER,
    ),
    (
        "generic name",
        lambda s: "name" in s and "program" not in s,
        CanonicalField.ACCOMPANYING_TEACHER,
    ),
)


def normalize_header_name(label: str) -> str:
    """Map a raw header label to a canonical field label.

    A label that already spells a canonical field is returned as that field,
    which keeps canonical names stable under re-normalization (otherwise
    "Accompanying Teacher" would fall into the robe-email rule). Unmapped
    labels come back trimmed but otherwise unchanged.
    """
    header = label.strip()
    exact = is_canonical_label(header)
    if exact is not None:
        return exact.value
    lowered = header.lower()
    for _name, predicate, target in HEADER_RULES:
        if predicate(lowered):
            return target.value
    return header


@dataclass(frozen=True)
class HeaderResolution:
    """Outcome of header resolution for one document."""
    labels: list[str]  # raw labels (synthesized defaults in no-header mode)
    normalized: list[str]  # normalize_header_name(label) per column, "" if blank
    header_row_index: int | None  # None -> no-header mode
    rows: list[RawRow]

    @property
    def no_header(self) -> bool:
        return self.header_row_index is None


def _build_fields(normalized: Sequence[str], values: Sequence[str]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for key, value in zip(normalized, values):
        if not key:
            continue
        # several columns may share a canonical key; first non-empty value wins
        if not fields.get(key):
            fields[key] = value or ""
    return fields


def _make_rows(
    normalized: Sequence[str],
    tokenized: Sequence[Sequence[str]],
    first_line_number: int,
    *,
    positional: bool = False,
) -> list[RawRow]:
    rows: list[RawRow] = []
    for offset, values in enumerate(tokenized):
        rows.append(
            RawRow(
                index=offset,
                line_number=first_line_number + offset,
                values=tuple(values),
                fields={} if positional else _build_fields(normalized, values),
            )
        )
    return rows


def _find_header_row(lines: Sequence[str]) -> int | None:
    for i, line in enumerate(lines[:HEADER_SCAN_LIMIT]):
        lowered = line.lower()
        if any(word in lowered for word in HEADER_KEYWORDS):
            return i
    return None


def resolve_headers(lines: Sequence[str], document_format: DocumentFormat) -> HeaderResolution:
    """Locate (or synthesize) the header row and tokenize the data rows.

    Args:
        lines: Blank-free document lines
        document_format: Result of classify_format()

    Returns:
        HeaderResolution with RawRow objects for every data line
    """
    if document_format is DocumentFormat.SIMPLE:
        header_index: int | None = 0
    else:
        header_index = _find_header_row(lines)

    if header_index is None:
        logger.debug("no header row within first %d lines, using positional assignment", HEADER_SCAN_LIMIT)
        labels = list(DEFAULT_HEADER_LABELS)
        normalized = [normalize_header_name(label) for label in labels]
        tokenized = [parse_row(line) for line in lines]
        return HeaderResolution(
            labels=labels,
            normalized=normalized,
            header_row_index=None,
            rows=_make_rows(normalized, tokenized, 1, positional=True),
        )

    labels = parse_row(lines[header_index])
    normalized = [normalize_header_name(label) if label.strip() else "" for label in labels]
    logger.debug("header row %d -> %s", header_index, normalized)
    tokenized = [parse_row(line) for line in lines[header_index + 1:]]
    return HeaderResolution(
        labels=labels,
        normalized=normalized,
        header_row_index=header_index,
        rows=_make_rows(normalized, tokenized, header_index + 2),
    )


def resolve_grid_headers(grid: Sequence[Sequence[str]]) -> HeaderResolution:
    """Header resolution for spreadsheet grids: row 0 is always the header."""
    if not grid:
        return HeaderResolution(labels=[], normalized=[], header_row_index=0, rows=[])
    labels = [cell.strip() for cell in grid[0]]
    normalized = [normalize_header_name(label) if label else "" for label in labels]
    return HeaderResolution(
        labels=labels,
        normalized=normalized,
        header_row_index=0,
        rows=_make_rows(normalized, [list(r) for r in grid[1:]], 2),
    )
