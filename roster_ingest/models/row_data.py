from __future__ import annotations

from dataclasses import dataclass, field

"""RawRow model for the roster ingestion pipeline.

A RawRow is one non-blank document line (or spreadsheet row) after
tokenization. ``fields`` is filled in by header resolution and maps either a
canonical field label or an unmapped raw label to the cell value.
"""

__all__ = [
    "RawRow",
]


@dataclass(frozen=True)
class RawRow:
    """Tokenized document line prior to enhancement.

    ``index`` is the 0-based position among data rows and drives generated
    labels such as ``"Class 3"``; ``line_number`` is the 1-based position of
    the line in the cleaned (blank-free) document.
    """
    index: int  # position among data rows
    line_number: int  # position in the cleaned document (1-based)
    values: tuple[str, ...]  # cells in document order
    fields: dict[str, str] = field(default_factory=dict)  # label -> value
