from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from ..models.entity_pool import EntityPool
from .filters import is_sentinel_value

"""Whole-document entity harvesting.

One pass over every raw line, independent of where (or whether) a header
row was found. The candidates feed the row enhancer when a row lacks a value.
"""

__all__ = [
    "EMAIL_RE",
    "PROGRAM_CODE_RE",
    "scan_entities",
    "extract_emails",
    "extract_program_codes",
    "extract_teacher_names",
]

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PROGRAM_CODE_RE = re.compile(r"\b\d+[A-Za-z]+\b")
_DIGIT_RE = re.compile(r"\d")
_NAME_EXCLUDE_RE = re.compile(r"programme|email|folder|robe", re.IGNORECASE)

PROGRAMME_LINE_WORDS = ("bachelor", "master", "programme")
MIN_PROGRAMME_SEGMENT = 5  # segment must be longer than this
MIN_NAME_LENGTH = 3  # name must be longer than this


def _segments(line: str) -> list[str]:
    return [part.strip() for part in line.split(",")]


def extract_emails(line: str) -> list[str]:
    return EMAIL_RE.findall(line)


def extract_program_codes(line: str) -> list[str]:
    codes = PROGRAM_CODE_RE.findall(line)
    lowered = line.lower()
    if any(word in lowered for word in PROGRAMME_LINE_WORDS):
        codes.extend(seg for seg in _segments(line) if len(seg) > MIN_PROGRAMME_SEGMENT)
    return codes


def _is_name_candidate(segment: str) -> bool:
    return (
        len(segment) > MIN_NAME_LENGTH
        and "@" not in segment
        and _DIGIT_RE.search(segment) is None
        and _NAME_EXCLUDE_RE.search(segment) is None
        and not is_sentinel_value(segment)
    )


def extract_teacher_names(line: str) -> list[str]:
    return [seg for seg in _segments(line) if _is_name_candidate(seg)]


def scan_entities(lines: Iterable[str]) -> EntityPool:
    """Harvest emails, programme codes and name-like tokens from all lines.

    Args:
        lines: Raw document lines (spreadsheet rows joined with commas)

    Returns:
        A fresh EntityPool; each pool keeps first-occurrence order
    """
    emails: list[str] = []
    codes: list[str] = []
    names: list[str] = []
    for line in lines:
        emails.extend(extract_emails(line))
        codes.extend(extract_program_codes(line))
        names.extend(extract_teacher_names(line))
    pool = EntityPool.from_candidates(emails=emails, program_codes=codes, teacher_names=names)
    logger.debug("entity pool sizes %s", pool.sizes())
    return pool
