from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ..excel.reader import (
    SPREADSHEET_SUFFIXES,
    TEXT_SUFFIXES,
    UnsupportedFileError,
    read_spreadsheet,
    read_text_file,
    stringify_cell,
)
from ..models.entity_pool import PoolKind
from ..models.ingest_result import DocumentFormat, IngestionResult
from ..parsing.classifier import classify_format
from ..parsing.enhancer import assign_positional, enhance_row
from ..parsing.entities import scan_entities
from ..parsing.filters import is_contaminated
from ..parsing.headers import HeaderResolution, resolve_grid_headers, resolve_headers
from ..parsing.tokenizer import split_lines
from ..parsing.validators import validate_data_rows, validate_document, validate_header

"""Ingestion orchestration for one roster document.

Runs tokenizer -> classifier -> header resolver -> entity scan -> enhancer ->
row filter synchronously and returns the records together with the parsing
decisions. Every call builds its own entity pool; nothing is kept between
calls.
"""

__all__ = [
    "ingest_file",
    "ingest_grid",
    "ingest_text",
]

logger = logging.getLogger(__name__)


def _normalize(
    resolution: HeaderResolution,
    scan_lines: Sequence[str],
    document_format: DocumentFormat,
) -> IngestionResult:
    validate_header(resolution.normalized)
    validate_data_rows(resolution.rows)

    pool = scan_entities(scan_lines)
    records: list[dict[str, str]] = []
    dropped = 0
    for row in resolution.rows:
        raw_fields = assign_positional(row.values) if resolution.no_header else row.fields
        # header text rows are dropped before they can take pool entries
        record = None if is_contaminated(raw_fields) else enhance_row(raw_fields, row.index, pool)
        if record is None or is_contaminated(record):
            logger.debug("dropping header-like row at line %d: %s", row.line_number, list(row.values))
            dropped += 1
            continue
        records.append(record)

    logger.debug(
        "unused pool entries: %s",
        {kind.value: pool.remaining(kind) for kind in PoolKind},
    )

    logger.info(
        "format=%s header_row=%s rows=%d records=%d dropped=%d",
        document_format.value,
        resolution.header_row_index,
        len(resolution.rows),
        len(records),
        dropped,
    )
    return IngestionResult(
        records=records,
        document_format=document_format,
        header_labels=list(resolution.labels),
        header_row_index=resolution.header_row_index,
        raw_row_count=len(resolution.rows),
        dropped_rows=dropped,
        pool_sizes=pool.sizes(),
    )


def ingest_text(text: str) -> IngestionResult:
    """Ingest a CSV document held in memory.

    Args:
        text: Whole document; a leading BOM is ignored

    Returns:
        IngestionResult with one NormalizedRecord per surviving data row

    Raises:
        EmptyDocumentError: no non-blank lines, or no data after the header
        NoColumnsError: the header row has only blank labels
    """
    lines = split_lines(text)
    validate_document(lines)
    document_format = classify_format(lines)
    logger.debug("detected %s format (%d lines)", document_format.value, len(lines))
    resolution = resolve_headers(lines, document_format)
    return _normalize(resolution, lines, document_format)


def ingest_grid(grid: Sequence[Sequence[Any]]) -> IngestionResult:
    """Ingest a spreadsheet grid whose first non-empty row is the header.

    Cells are stringified (None/NaN -> ""), and rows without any content are
    dropped before the header is taken.
    """
    rows = [[stringify_cell(cell) for cell in row] for row in grid]
    rows = [row for row in rows if any(cell != "" for cell in row)]
    validate_document(rows)
    resolution = resolve_grid_headers(rows)
    scan_lines = [",".join(row) for row in rows]
    return _normalize(resolution, scan_lines, DocumentFormat.GRID)


def ingest_file(path: Path, encoding: str = "utf-8") -> IngestionResult:
    """Read ``path`` with the matching reader and ingest it."""
    suffix = path.suffix.lower()
    if suffix in TEXT_SUFFIXES:
        return ingest_text(read_text_file(path, encoding=encoding))
    if suffix in SPREADSHEET_SUFFIXES:
        return ingest_grid(read_spreadsheet(path))
    raise UnsupportedFileError(f"unsupported file type: {path.name}")
