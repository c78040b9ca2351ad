from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from roster_ingest.models.config_models import DEFAULT_ENCODING, DEFAULT_FILE_TYPES, IngestConfig

"""Config loader.

Responsibilities:
- Load YAML config (config/ingest.yml unless ROSTER_INGEST_CONFIG says otherwise)
- Validate it against the bundled JSON schema
- Apply defaults (file_types, encoding)
"""

DEFAULT_CONFIG_PATH = Path("config/ingest.yml")
CONFIG_ENV_VAR = "ROSTER_INGEST_CONFIG"
SCHEMA_PATH = Path(__file__).parent / "ingest_schema.json"


class ConfigError(Exception):
    pass


def resolve_config_path(explicit: Path | None = None) -> Path:
    """Explicit path > ROSTER_INGEST_CONFIG > config/ingest.yml."""
    if explicit is not None:
        return explicit
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data fails validation (missing required keys, wrong types,
            unknown keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> IngestConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    file_types = tuple(s.lower() for s in data.get("file_types", DEFAULT_FILE_TYPES))
    return IngestConfig(
        source_directory=data["source_directory"],
        output_directory=data["output_directory"],
        file_types=file_types,
        encoding=data.get("encoding", DEFAULT_ENCODING),
    )
