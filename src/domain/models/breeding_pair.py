from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class BreedingPair:
    id: UUID
    tenant_id: UUID
    sire_id: UUID
    dam_id: UUID
    start_date: date
    end_date: date | None = None  # open-ended while the pair is still together
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        tenant_id: UUID,
        sire_id: UUID,
        dam_id: UUID,
        start_date: date,
        end_date: date | None = None,
        notes: str | None = None,
    ) -> BreedingPair:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            sire_id=sire_id,
            dam_id=dam_id,
            start_date=start_date,
            end_date=end_date,
            notes=notes,
            created_at=now,
            updated_at=now,
            version=1,
        )
