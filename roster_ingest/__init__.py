"""Heuristic ingestion and normalization of teacher/role-assignment rosters.

Typical use::

    from roster_ingest import ingest_text, export_csv

    result = ingest_text(csv_text)
    csv_out = export_csv(result.records)
"""

from roster_ingest.excel.reader import SpreadsheetReadError, UnsupportedFileError
from roster_ingest.models.canonical import CanonicalField
from roster_ingest.models.ingest_result import DocumentFormat, IngestionResult
from roster_ingest.parsing.headers import normalize_header_name
from roster_ingest.parsing.tokenizer import parse_row
from roster_ingest.parsing.validators import EmptyDocumentError, IngestError, NoColumnsError
from roster_ingest.services.exporter import export_csv, serialize_row
from roster_ingest.services.pipeline import ingest_file, ingest_grid, ingest_text

__version__ = "0.1.0"

__all__ = [
    "CanonicalField",
    "DocumentFormat",
    "EmptyDocumentError",
    "IngestError",
    "IngestionResult",
    "NoColumnsError",
    "SpreadsheetReadError",
    "UnsupportedFileError",
    "export_csv",
    "ingest_file",
    "ingest_grid",
    "ingest_text",
    "normalize_header_name",
    "parse_row",
    "serialize_row",
]
