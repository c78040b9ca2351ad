from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""Batch result models for roster ingestion runs.

Aggregates per-file outcomes into the numbers reported on the SUMMARY line.
"""


@dataclass(frozen=True)
class FileStat:
    """Per-file processing statistics (internal helper for BatchResult)."""
    file_name: str
    status: str  # success/failed
    records: int  # normalized records written
    elapsed_seconds: float
    dropped_rows: int = 0
    document_format: str | None = None


@dataclass(frozen=True)
class BatchResult:
    """Aggregated results for a batch ingestion run."""
    success_files: int
    failed_files: int
    total_records: int
    dropped_rows: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    file_stats: list[FileStat] | None = None

    @property
    def total_files(self) -> int:
        return self.success_files + self.failed_files
