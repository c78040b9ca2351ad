from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display for batch runs (tqdm, TTY only).

One bar per run, advanced once per roster file, with the running
success/failed/records tallies shown as the bar postfix. When stdout is not a
terminal the tracker still counts but draws nothing, so redirected output
contains only labeled log lines.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """True when stdout is an interactive terminal."""
    return sys.stdout.isatty()


class ProgressTracker:
    """Per-run roster file progress with running tallies."""

    def __init__(self, total_files: int, *, description: str = "Ingesting files") -> None:
        self.total_files = total_files
        self.description = description
        self.current_file = 0
        self.succeeded = 0
        self.failed = 0
        self.records = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None = None
        if self.enabled:
            self.pbar = tqdm(
                total=total_files,
                desc=description,
                unit="file",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )

    def start_file(self, file_path: Path) -> None:
        self.current_file += 1
        if self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({file_path.name})")

    def finish_file(self, success: bool = True, records: int = 0) -> None:
        """Count the finished file and advance the bar by one."""
        if success:
            self.succeeded += 1
            self.records += records
        else:
            self.failed += 1
        if self.pbar is not None:
            self.pbar.set_postfix(success=self.succeeded, failed=self.failed, records=self.records)
            self.pbar.update(1)
            self.pbar.set_description(self.description)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
