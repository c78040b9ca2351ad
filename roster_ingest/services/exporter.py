from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

"""CSV export of normalized (or any string-keyed) records.

The header is the union of all record keys in first-seen order, so records
with different key sets export into one table; missing keys become empty
cells. Values containing a comma or a double quote are quoted with inner
quotes doubled. Lines are joined with ``\\n``.
"""

__all__ = [
    "collect_headers",
    "escape_value",
    "export_csv",
    "serialize_row",
    "write_csv",
]


def collect_headers(records: Iterable[Mapping[str, object]]) -> list[str]:
    headers: dict[str, None] = {}
    for record in records:
        for key in record.keys():
            headers.setdefault(key, None)
    return list(headers)


def escape_value(value: object) -> str:
    text = "" if value is None else str(value)
    if "," in text or '"' in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def serialize_row(fields: Sequence[object]) -> str:
    """Serialize one row of values to a CSV line (no terminator)."""
    return ",".join(escape_value(v) for v in fields)


def export_csv(records: Sequence[Mapping[str, object]]) -> str:
    """Render records as CSV text.

    Returns:
        CSV text, or "" when there is nothing to export
    """
    if not records:
        return ""
    headers = collect_headers(records)
    lines = [serialize_row(headers)]
    for record in records:
        lines.append(serialize_row([record.get(h, "") for h in headers]))
    return "\n".join(lines)


def write_csv(records: Sequence[Mapping[str, object]], path: Path, encoding: str = "utf-8") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(export_csv(records), encoding=encoding)
    return path
