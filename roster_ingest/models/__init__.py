"""Domain models for the roster ingestion pipeline.

This package contains the value objects passed between the parsing stages
and the batch runner.
"""

from .canonical import CONTENT_FIELDS, DEFAULT_HEADER_LABELS, CanonicalField, empty_record
from .config_models import IngestConfig
from .entity_pool import EntityPool, PoolKind
from .ingest_result import DocumentFormat, IngestionResult
from .row_data import RawRow

__all__ = [
    # Record shape
    "CanonicalField",
    "CONTENT_FIELDS",
    "DEFAULT_HEADER_LABELS",
    "empty_record",
    # Configuration models
    "IngestConfig",
    # Processing models
    "DocumentFormat",
    "EntityPool",
    "IngestionResult",
    "PoolKind",
    "RawRow",
]
