from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from ..models.canonical import CONTENT_FIELDS, DEFAULT_HEADER_LABELS, CanonicalField, empty_record
from ..models.entity_pool import EntityPool, PoolKind
from .entities import EMAIL_RE, PROGRAM_CODE_RE
from .filters import is_sentinel_value, looks_like_header_fragment

"""Row enhancement: turn a raw field map into a complete NormalizedRecord.

For every content field the enhancer tries, in order:

1. the value already in the field, if it is valid for that field;
2. same-row recovery from another column whose label matches one of the
   field's synonyms and whose value is valid;
3. the next unused entry of the matching entity pool (secondary roles may
   share the pool's only member with the primary role);
4. a literal placeholder (or ``"Class N"`` for the programme).

ClassSection is never drawn from a pool; it stays empty when no column
provides it.
"""

__all__ = [
    "FIELD_POLICIES",
    "PLACEHOLDERS",
    "FieldPolicy",
    "assign_positional",
    "enhance_row",
    "is_valid_email",
    "is_valid_name",
    "is_valid_programme",
]

PLACEHOLDERS: dict[CanonicalField, str] = {
    CanonicalField.ROBE_EMAIL: "teacher@example.com",
    CanonicalField.FOLDER_EMAIL: "folder@example.com",
    CanonicalField.ACCOMPANYING_TEACHER: "Robe Teacher",
    CanonicalField.FOLDER_IN_CHARGE: "Folder Teacher",
}

MIN_POSITIONAL_LENGTH = 5


def is_valid_email(value: str) -> bool:
    return "@" in value


def is_valid_name(value: str) -> bool:
    return bool(value.strip()) and not is_sentinel_value(value)


def _is_recoverable_name(value: str) -> bool:
    return is_valid_name(value) and "@" not in value


def is_valid_programme(value: str) -> bool:
    return bool(value.strip()) and "programme" not in value.lower()


def _is_valid_section(value: str) -> bool:
    return bool(value.strip()) and not is_sentinel_value(value)


@dataclass(frozen=True)
class FieldPolicy:
    """How one canonical field is validated, recovered and back-filled."""
    field: CanonicalField
    synonyms: tuple[tuple[str, ...], ...]  # any group whose words all occur in the key
    is_valid: Callable[[str], bool]
    is_recoverable: Callable[[str], bool]
    pool: PoolKind | None = None
    share_sole: bool = False  # reuse the pool's only member once exhausted
    exclude: tuple[str, ...] = ()  # key words that disqualify a synonym column

    def matches_key(self, key: str) -> bool:
        lowered = key.lower()
        if any(word in lowered for word in self.exclude):
            return False
        return any(all(word in lowered for word in group) for group in self.synonyms)

    def accepts_pool_value(self, value: str) -> bool:
        return self.is_valid(value) and not looks_like_header_fragment(value)


FIELD_POLICIES: dict[CanonicalField, FieldPolicy] = {
    CanonicalField.PROGRAMME_NAME: FieldPolicy(
        field=CanonicalField.PROGRAMME_NAME,
        synonyms=(("program",), ("course",), ("class",)),
        is_valid=is_valid_programme,
        is_recoverable=is_valid_programme,
        pool=PoolKind.PROGRAM_CODES,
        exclude=("section",),
    ),
    CanonicalField.ROBE_EMAIL: FieldPolicy(
        field=CanonicalField.ROBE_EMAIL,
        synonyms=(("robe",), ("accompanying",), ("teacher email",)),
        is_valid=is_valid_email,
        is_recoverable=is_valid_email,
        pool=PoolKind.EMAILS,
    ),
    CanonicalField.FOLDER_EMAIL: FieldPolicy(
        field=CanonicalField.FOLDER_EMAIL,
        synonyms=(("folder",), ("in charge",), ("coordinator email",)),
        is_valid=is_valid_email,
        is_recoverable=is_valid_email,
        pool=PoolKind.EMAILS,
        share_sole=True,
    ),
    CanonicalField.ACCOMPANYING_TEACHER: FieldPolicy(
        field=CanonicalField.ACCOMPANYING_TEACHER,
        synonyms=(("teacher name",), ("accompanying",), ("robe in charge",)),
        is_valid=is_valid_name,
        is_recoverable=_is_recoverable_name,
        pool=PoolKind.TEACHER_NAMES,
    ),
    CanonicalField.FOLDER_IN_CHARGE: FieldPolicy(
        field=CanonicalField.FOLDER_IN_CHARGE,
        synonyms=(("folder", "charge"), ("coordinator name",)),
        is_valid=is_valid_name,
        is_recoverable=_is_recoverable_name,
        pool=PoolKind.TEACHER_NAMES,
        share_sole=True,
    ),
    CanonicalField.CLASS_SECTION: FieldPolicy(
        field=CanonicalField.CLASS_SECTION,
        synonyms=(("section",),),
        is_valid=_is_valid_section,
        is_recoverable=_is_valid_section,
    ),
}


def _recover(policy: FieldPolicy, fields: Mapping[str, str]) -> str | None:
    for key, value in fields.items():
        if key == policy.field.value or not value:
            continue
        if policy.matches_key(key) and policy.is_recoverable(value):
            return value
    return None


def _draw(policy: FieldPolicy, pool: EntityPool) -> str | None:
    if policy.pool is None:
        return None
    value = pool.draw(policy.pool, policy.accepts_pool_value)
    if value is None and policy.share_sole:
        value = pool.sole(policy.pool, policy.accepts_pool_value)
    return value


def _fallback(policy: FieldPolicy, row_index: int) -> str:
    if policy.field is CanonicalField.PROGRAMME_NAME:
        return f"Class {row_index + 1}"
    return PLACEHOLDERS.get(policy.field, "")


def _fill(policy: FieldPolicy, fields: Mapping[str, str], row_index: int, pool: EntityPool) -> str:
    current = fields.get(policy.field.value) or ""
    if policy.is_valid(current):
        return current
    recovered = _recover(policy, fields)
    if recovered is not None:
        return recovered
    drawn = _draw(policy, pool)
    if drawn is not None:
        return drawn
    return _fallback(policy, row_index)


def enhance_row(fields: Mapping[str, str], row_index: int, pool: EntityPool) -> dict[str, str]:
    """Produce a NormalizedRecord from one raw field map.

    Args:
        fields: Label -> value map of the row (canonical and unmapped labels)
        row_index: 0-based data row position, used for "Class N" labels
        pool: Entity pool of the current ingestion call; its cursors advance

    Returns:
        Dict with exactly the six canonical keys, all string values
    """
    record = empty_record()
    for field in CONTENT_FIELDS:
        record[field.value] = _fill(FIELD_POLICIES[field], fields, row_index, pool)
    section = FIELD_POLICIES[CanonicalField.CLASS_SECTION]
    current = fields.get(section.field.value) or ""
    if section.is_valid(current):
        record[section.field.value] = current
    else:
        record[section.field.value] = _recover(section, fields) or ""
    return record


def _labelish(value: str) -> bool:
    lowered = value.lower()
    return "programme" in lowered or "name" in lowered


def assign_positional(values: Sequence[str]) -> dict[str, str]:
    """Content-sniffing field assignment for documents without a header row.

    Values containing "@" fill the robe email, then the folder email; when a
    value embeds addresses in free text the addresses themselves are used.
    Other values that look like a programme code or are long enough fill the
    programme, then the accompanying teacher, then the folder in charge.
    """
    fields = {label: "" for label in DEFAULT_HEADER_LABELS}
    robe = CanonicalField.ROBE_EMAIL.value
    folder = CanonicalField.FOLDER_EMAIL.value
    programme = CanonicalField.PROGRAMME_NAME.value
    teacher = CanonicalField.ACCOMPANYING_TEACHER.value
    in_charge = CanonicalField.FOLDER_IN_CHARGE.value
    for value in values:
        if "@" in value:
            for address in EMAIL_RE.findall(value) or [value]:
                if not fields[robe]:
                    fields[robe] = address
                elif not fields[folder]:
                    fields[folder] = address
        elif PROGRAM_CODE_RE.search(value) or len(value) > MIN_POSITIONAL_LENGTH:
            if not fields[programme]:
                fields[programme] = value
            elif not fields[teacher] and not _labelish(value):
                fields[teacher] = value
            elif not fields[in_charge] and not _labelish(value):
                fields[in_charge] = value
    return fields
