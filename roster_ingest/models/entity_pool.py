from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

"""EntityPool value object.

Holds the email / programme-code / teacher-name candidates harvested from one
document together with a per-kind cursor. A pool is created for a single
ingestion call and handed to the row enhancer; it is never shared between
calls.
"""

__all__ = [
    "PoolKind",
    "EntityPool",
]


class PoolKind(Enum):
    """Entity categories harvested by the scanner."""
    EMAILS = "emails"
    PROGRAM_CODES = "program_codes"
    TEACHER_NAMES = "teacher_names"


def _unique(items: Iterable[str]) -> tuple[str, ...]:
    # dict keeps insertion order -> first occurrence wins
    return tuple(dict.fromkeys(item for item in items if item))


@dataclass
class EntityPool:
    """Ordered, de-duplicated entity candidates with "next unused" cursors.

    Cursors only move forward. Draws advance across rows of the same
    ingestion call; a new pool (and therefore fresh cursors) is built for
    every call.
    """
    emails: tuple[str, ...] = ()
    program_codes: tuple[str, ...] = ()
    teacher_names: tuple[str, ...] = ()
    _cursors: dict[PoolKind, int] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_candidates(
        cls,
        emails: Iterable[str] = (),
        program_codes: Iterable[str] = (),
        teacher_names: Iterable[str] = (),
    ) -> EntityPool:
        """Build a pool from raw candidate lists, de-duplicating each one."""
        return cls(
            emails=_unique(emails),
            program_codes=_unique(program_codes),
            teacher_names=_unique(teacher_names),
        )

    def members(self, kind: PoolKind) -> tuple[str, ...]:
        return getattr(self, kind.value)

    def remaining(self, kind: PoolKind) -> int:
        return max(0, len(self.members(kind)) - self._cursors.get(kind, 0))

    def draw(self, kind: PoolKind, accept: Callable[[str], bool] | None = None) -> str | None:
        """Return the next unused member of ``kind`` or ``None`` when exhausted.

        Members rejected by ``accept`` are skipped and count as used.
        """
        items = self.members(kind)
        pos = self._cursors.get(kind, 0)
        while pos < len(items):
            candidate = items[pos]
            pos += 1
            if accept is None or accept(candidate):
                self._cursors[kind] = pos
                return candidate
        self._cursors[kind] = pos
        return None

    def sole(self, kind: PoolKind, accept: Callable[[str], bool] | None = None) -> str | None:
        """Return the only member of ``kind`` when the pool holds exactly one.

        Used by secondary roles (folder email / folder in charge) to share the
        single harvested value with the primary role. Does not move the cursor.
        """
        items = self.members(kind)
        if len(items) != 1:
            return None
        if accept is not None and not accept(items[0]):
            return None
        return items[0]

    def sizes(self) -> dict[str, int]:
        return {kind.value: len(self.members(kind)) for kind in PoolKind}
