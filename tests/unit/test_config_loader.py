from __future__ import annotations

from pathlib import Path

import pytest

from roster_ingest.config.loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    ConfigError,
    load_config,
    resolve_config_path,
)
from roster_ingest.models.config_models import DEFAULT_FILE_TYPES


def _write(tmp_path: Path, text: str) -> Path:
    cfg = tmp_path / "ingest.yml"
    cfg.write_text(text, encoding="utf-8")
    return cfg


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg.source_directory == "./data"
    assert cfg.output_directory == "./out"
    assert cfg.file_types == (".csv", ".xlsx")
    assert cfg.encoding == "utf-8"


def test_defaults_applied(tmp_path: Path):
    cfg = load_config(_write(tmp_path, "source_directory: ./in\noutput_directory: ./out\n"))
    assert cfg.file_types == DEFAULT_FILE_TYPES
    assert cfg.encoding == "utf-8"


def test_file_types_lower_cased(tmp_path: Path):
    text = "source_directory: a\noutput_directory: b\nfile_types: ['.CSV', '.Txt']\n"
    assert load_config(_write(tmp_path, text)).file_types == (".csv", ".txt")


def test_missing_file(tmp_path: Path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.yml")


def test_invalid_yaml(tmp_path: Path):
    with pytest.raises(ConfigError, match="invalid yaml"):
        load_config(_write(tmp_path, "source_directory: [unclosed\n"))


def test_root_must_be_mapping(tmp_path: Path):
    with pytest.raises(ConfigError, match="mapping"):
        load_config(_write(tmp_path, "- a\n- b\n"))


@pytest.mark.parametrize(
    "text",
    [
        "source_directory: ./data\n",  # output_directory missing
        "source_directory: a\noutput_directory: b\nsheet_mappings: {}\n",  # unknown key
        "source_directory: a\noutput_directory: b\nfile_types: ['csv']\n",  # no leading dot
        "source_directory: a\noutput_directory: b\nfile_types: []\n",
    ],
)
def test_schema_violations(tmp_path: Path, text: str):
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(_write(tmp_path, text))


def test_resolve_config_path_precedence(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert resolve_config_path() == DEFAULT_CONFIG_PATH
    monkeypatch.setenv(CONFIG_ENV_VAR, "alt/ingest.yml")
    assert resolve_config_path() == Path("alt/ingest.yml")
    assert resolve_config_path(Path("explicit.yml")) == Path("explicit.yml")
