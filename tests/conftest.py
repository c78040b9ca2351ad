# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

SIMPLE_ROSTER = (
    "Programme Name,Robe Email ID,Folder Email ID,Accompanying Teacher,Folder in Charge\n"
    "BCA,a@x.com,b@x.com,Alice Smith,Bob Jones\n"
    "MCA,c@x.com,d@x.com,Carol White,Dan Brown\n"
)

COMPLEX_ROSTER = (
    "Convocation Duty Roster 2024\n"
    "Sl. No,Course,Teacher Email,Coordinator Email,Teacher Name,Folder In-Charge Name\n"
    "1,BCA,a@x.com,b@x.com,Alice Smith,Bob Jones\n"
    "2,MCA,,d@x.com,Carol White,Dan Brown\n"
)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
output_directory: ./out
file_types: [".csv", ".xlsx"]
encoding: utf-8
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "ingest.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def simple_roster_text() -> str:
    return SIMPLE_ROSTER


@pytest.fixture()
def complex_roster_text() -> str:
    return COMPLEX_ROSTER


@pytest.fixture()
def roster_files(temp_workdir: Path) -> list[Path]:
    """Two valid CSV rosters in ./data."""
    files = []
    for name, text in [("simple.csv", SIMPLE_ROSTER), ("complex.csv", COMPLEX_ROSTER)]:
        f = temp_workdir / "data" / name
        f.write_text(text, encoding="utf-8")
        files.append(f)
    return files
