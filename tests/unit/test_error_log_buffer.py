from __future__ import annotations

import json
from pathlib import Path

from roster_ingest.logging.error_log import ErrorLogBuffer, ErrorRecord

ERROR_LOG_KEYS = {"timestamp", "file", "row", "error_type", "message"}


def test_error_record_creation_and_json_line():
    rec = ErrorRecord.create(
        file="roster.csv",
        row=-1,
        error_type="EMPTY_DOCUMENT",
        message="Empty file or no valid rows found",
    )
    data = json.loads(rec.to_json_line())
    assert data["file"] == "roster.csv"
    assert data["row"] == -1
    assert data["error_type"] == "EMPTY_DOCUMENT"
    assert data["timestamp"].endswith("Z")
    assert set(data.keys()) == ERROR_LOG_KEYS


def test_non_ascii_messages_are_kept():
    rec = ErrorRecord.create("名簿.csv", -1, "NO_COLUMNS", "ヘッダーなし")
    assert "名簿.csv" in rec.to_json_line()


def test_error_log_buffer_flush(temp_workdir: Path):
    buf = ErrorLogBuffer()
    buf.append(ErrorRecord.create("a.csv", -1, "EMPTY_DOCUMENT", "empty"))
    buf.append(ErrorRecord.create("b.xlsx", -1, "SPREADSHEET_READ_ERROR", "bad zip"))
    path = buf.flush()
    assert path is not None and path.exists()
    assert path.parent.name == "logs"
    assert path.name.startswith("errors-") and path.suffix == ".log"
    lines = path.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 2
    for raw in lines:
        assert set(json.loads(raw).keys()) == ERROR_LOG_KEYS
    # buffer is cleared after flush
    assert len(buf) == 0


def test_error_log_buffer_multiple_flushes_append(tmp_path: Path):
    buf = ErrorLogBuffer(logs_dir=tmp_path / "logs")
    buf.append(ErrorRecord.create("a.csv", -1, "EMPTY_DOCUMENT", "one"))
    path = buf.flush()
    buf.append(ErrorRecord.create("a.csv", -1, "EMPTY_DOCUMENT", "two"))
    path2 = buf.flush()
    assert path == path2
    assert len(path.read_text(encoding="utf-8").strip().splitlines()) == 2


def test_empty_buffer_writes_nothing(tmp_path: Path):
    logs_dir = tmp_path / "logs"
    assert ErrorLogBuffer(logs_dir=logs_dir).flush() is None
    assert not logs_dir.exists()
