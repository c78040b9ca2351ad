from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

"""Result of a single ingestion call.

IngestionResult bundles the normalized records with the structural decisions
taken while parsing (format, header position, pool sizes). It carries no
per-value confidence information.
"""

__all__ = [
    "DocumentFormat",
    "IngestionResult",
]


class DocumentFormat(Enum):
    """Top-level parsing strategy chosen from the first line."""
    SIMPLE = "simple"
    COMPLEX = "complex"
    GRID = "grid"  # spreadsheet grid, first row is always the header


@dataclass(frozen=True)
class IngestionResult:
    """Normalized records plus parsing diagnostics for one document."""
    records: list[dict[str, str]]  # NormalizedRecord list (caller owns it)
    document_format: DocumentFormat
    header_labels: list[str]  # raw header labels as found (or synthesized)
    header_row_index: int | None  # 0-based line index; None in no-header mode
    raw_row_count: int  # data rows before filtering
    dropped_rows: int = 0  # rows removed as header/continuation fragments
    pool_sizes: dict[str, int] = field(default_factory=dict)

    @property
    def no_header_mode(self) -> bool:
        return self.header_row_index is None and self.document_format is DocumentFormat.COMPLEX
