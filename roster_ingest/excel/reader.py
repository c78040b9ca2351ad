from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

"""Roster file readers.

Text files are decoded as a whole and handed to the CSV pipeline. Binary
spreadsheets are read with pandas (first sheet only, no header inference,
every cell as text) and handed over as a 2-D grid of strings.
"""

__all__ = [
    "SpreadsheetReadError",
    "UnsupportedFileError",
    "SPREADSHEET_SUFFIXES",
    "TEXT_SUFFIXES",
    "read_spreadsheet",
    "read_text_file",
    "stringify_cell",
]

TEXT_SUFFIXES = frozenset({".csv", ".txt"})
SPREADSHEET_SUFFIXES = frozenset({".xlsx", ".xlsm", ".xls"})


class SpreadsheetReadError(Exception):
    """Raised when a file cannot be read or decoded."""

    error_type = "SPREADSHEET_READ_ERROR"


class UnsupportedFileError(Exception):
    """Raised for suffixes that no reader handles."""

    error_type = "UNSUPPORTED_FILE"


def stringify_cell(value: Any) -> str:
    """Cell value -> trimmed string; None/NaN become ""."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value).strip()


def read_text_file(path: Path, encoding: str = "utf-8") -> str:
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise SpreadsheetReadError(f"failed to read {path.name}: {e}") from e


def read_spreadsheet(path: Path) -> list[list[str]]:
    """Read the first sheet of a workbook into a grid of strings.

    Parameters
    ----------
    path: workbook path (.xlsx / .xlsm via openpyxl, .xls via xlrd)

    Raises
    ------
    SpreadsheetReadError: the workbook could not be opened or parsed
    """
    try:
        df = pd.read_excel(path, sheet_name=0, header=None, dtype=object, keep_default_na=False)
    except Exception as e:  # pandas/openpyxl raise a wide variety of errors
        raise SpreadsheetReadError(f"failed to read spreadsheet {path.name}: {e}") from e
    return [[stringify_cell(v) for v in row] for row in df.itertuples(index=False, name=None)]
