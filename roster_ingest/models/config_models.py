from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclasses for the roster ingestion tool.

The loader in roster_ingest.config.loader validates the YAML file and builds
these objects; everything downstream only sees the frozen dataclass.
"""

DEFAULT_FILE_TYPES: tuple[str, ...] = (".csv", ".xlsx")
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class IngestConfig:
    """Root configuration object for a batch ingestion run.

    ``file_types`` are lower-case suffixes including the dot; only files with
    one of these suffixes are picked up from ``source_directory``.
    """
    source_directory: str  # Directory scanned (non-recursive) for rosters
    output_directory: str  # Where <stem>.normalized.csv files are written
    file_types: tuple[str, ...] = field(default=DEFAULT_FILE_TYPES)
    encoding: str = DEFAULT_ENCODING  # Text encoding for CSV inputs
