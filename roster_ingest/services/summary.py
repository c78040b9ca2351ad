from __future__ import annotations

from ..models.processing_result import BatchResult

"""SUMMARY line rendering for batch ingestion runs."""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation for tiny durations
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: BatchResult) -> str:
    """Render the SUMMARY line for a batch run.

    Format:
    SUMMARY files={total} success={success} failed={failed} records={records}
    dropped_rows={dropped} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> result = BatchResult(
        ...     success_files=2, failed_files=1, total_records=40, dropped_rows=3,
        ...     start_time=t, end_time=t, elapsed_seconds=1.5,
        ... )
        >>> render_summary_line(result)
        'SUMMARY files=3 success=2 failed=1 records=40 dropped_rows=3 elapsed_sec=1.5'
    """
    return (
        f"SUMMARY files={result.total_files} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"records={result.total_records} "
        f"dropped_rows={result.dropped_rows} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
