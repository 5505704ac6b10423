from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from uuid import UUID


@dataclass(slots=True, frozen=True)
class AncestryRow:
    """Pedigree pointers of one live bird, as returned by the ancestry store."""

    id: UUID
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    sex: str | None = None

    @property
    def parent_ids(self) -> set[UUID]:
        return {pid for pid in (self.sire_id, self.dam_id) if pid is not None}


def unique_ids(ids: Iterable[UUID | None]) -> list[UUID]:
    """Drop ``None`` and duplicates, keeping first-seen order."""
    seen: set[UUID] = set()
    out: list[UUID] = []
    for value in ids:
        if value is None or value in seen:
            continue
        seen.add(value)
        out.append(value)
    return out


def index_rows(rows: Iterable[AncestryRow]) -> dict[UUID, AncestryRow]:
    return {row.id: row for row in rows}
