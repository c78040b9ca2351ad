from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

"""SourceFile domain model and FileStatus enum for batch ingestion.

The SourceFile represents the processing context for a single roster file,
tracking its status through the batch lifecycle from pending to
success/failed.
"""


class FileStatus(Enum):
    """Status enum for SourceFile processing lifecycle.

    State transitions: pending -> (success | failed)

    - PENDING: File discovered but not yet processed
    - SUCCESS: File ingested and its normalized export written
    - FAILED: File rejected (empty, no columns, unreadable)
    """
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceFile:
    """Processing context for a single roster file."""
    path: Path                           # Full path to the input file
    name: str                            # File name
    start_time: datetime | None = None   # Processing start (UTC)
    end_time: datetime | None = None     # Processing end (UTC)
    status: FileStatus = FileStatus.PENDING
    record_count: int = 0                # Normalized records produced
    dropped_rows: int = 0                # Rows removed by the row filter
    document_format: str | None = None   # simple / complex / grid
    output_path: Path | None = None      # Written export, if any
    error: str | None = None             # Failure reason summary
