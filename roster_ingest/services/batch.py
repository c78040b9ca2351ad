from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..excel.reader import SpreadsheetReadError, UnsupportedFileError
from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.config_models import IngestConfig
from ..models.processing_result import BatchResult, FileStat
from ..models.source_file import FileStatus, SourceFile
from ..parsing.validators import IngestError
from .exporter import write_csv
from .pipeline import ingest_file
from .progress import ProgressTracker

"""Batch orchestration over a directory of roster files.

Scans the configured directory, ingests each file independently, writes the
normalized export next to the others in the output directory and aggregates
the per-file outcome. A rejected file never stops the run.
"""

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".normalized.csv"


class ProcessingError(Exception):
    """Fatal batch error (missing or unreadable source directory)."""


def scan_source_files(directory: Path, file_types: tuple[str, ...]) -> list[Path]:
    """Non-recursive scan for files with one of ``file_types`` (sorted by name).

    Raises:
        ProcessingError: If the directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    wanted = {t.lower() for t in file_types}
    try:
        return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in wanted)
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def output_path_for(source: Path, output_directory: Path) -> Path:
    return output_directory / f"{source.stem}{OUTPUT_SUFFIX}"


def process_file(path: Path, config: IngestConfig, error_log: ErrorLogBuffer) -> SourceFile:
    """Ingest one file and write its export; failures are recorded, not raised."""
    start_time = datetime.now(UTC)
    try:
        result = ingest_file(path, encoding=config.encoding)
    except (IngestError, SpreadsheetReadError, UnsupportedFileError) as e:
        error_type = getattr(e, "error_type", "INGEST_ERROR")
        logger.warning(f"{path.name}: {e}")
        error_log.append(ErrorRecord.create(file=path.name, row=-1, error_type=error_type, message=str(e)))
        return SourceFile(
            path=path,
            name=path.name,
            start_time=start_time,
            end_time=datetime.now(UTC),
            status=FileStatus.FAILED,
            error=str(e),
        )

    out = write_csv(result.records, output_path_for(path, Path(config.output_directory)))
    logger.info(f"{path.name}: {len(result.records)} records -> {out}")
    return SourceFile(
        path=path,
        name=path.name,
        start_time=start_time,
        end_time=datetime.now(UTC),
        status=FileStatus.SUCCESS,
        record_count=len(result.records),
        dropped_rows=result.dropped_rows,
        document_format=result.document_format.value,
        output_path=out,
    )


def process_all(config: IngestConfig, error_log: ErrorLogBuffer | None = None) -> BatchResult:
    """Ingest every roster file of the configured source directory.

    Returns:
        BatchResult with aggregated counts and per-file stats

    Raises:
        ProcessingError: For fatal errors that prevent processing
    """
    start_time = datetime.now(UTC)
    error_log = error_log if error_log is not None else ErrorLogBuffer()
    file_paths = scan_source_files(Path(config.source_directory), config.file_types)

    file_stats: list[FileStat] = []
    total_dropped = 0

    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)
            source = process_file(file_path, config, error_log)
            ok = source.status == FileStatus.SUCCESS
            if ok:
                total_dropped += source.dropped_rows
            progress.finish_file(success=ok, records=source.record_count)

            elapsed = 0.0
            if source.start_time is not None and source.end_time is not None:
                elapsed = (source.end_time - source.start_time).total_seconds()
            file_stats.append(
                FileStat(
                    file_name=file_path.name,
                    status=source.status.value,
                    records=source.record_count,
                    elapsed_seconds=elapsed,
                    dropped_rows=source.dropped_rows,
                    document_format=source.document_format,
                )
            )

    log_path = error_log.flush()
    if log_path is not None:
        logger.info(f"error log written: {log_path}")

    end_time = datetime.now(UTC)
    return BatchResult(
        success_files=progress.succeeded,
        failed_files=progress.failed,
        total_records=progress.records,
        dropped_rows=total_dropped,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=file_stats,
    )
