from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.bird_sex import BirdSex
from src.domain.value_objects.bird_status import BirdStatus
from src.domain.value_objects.visual_id import VisualId


@dataclass(slots=True)
class Bird:
    id: UUID
    tenant_id: UUID
    visual_id_type: str
    visual_id_color: str
    visual_id_number: str
    breed_primary: str
    breed_secondary: str | None = None
    sex: str = BirdSex.UNKNOWN.value
    hatch_date: date | None = None

    # Genealogy fields
    sire_id: UUID | None = None
    dam_id: UUID | None = None

    status: str = BirdStatus.ALIVE.value
    status_date: date | None = None
    notes: str | None = None

    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        tenant_id: UUID,
        visual_id: VisualId,
        breed_primary: str,
        breed_secondary: str | None = None,
        sex: str = BirdSex.UNKNOWN.value,
        hatch_date: date | None = None,
        sire_id: UUID | None = None,
        dam_id: UUID | None = None,
        status: str = BirdStatus.ALIVE.value,
        status_date: date | None = None,
        notes: str | None = None,
    ) -> Bird:
        now = datetime.now(timezone.utc)
        if status_date is None and BirdStatus(status).requires_status_date():
            status_date = now.date()
        return cls(
            id=uuid4(),
            tenant_id=tenant_id,
            visual_id_type=visual_id.type,
            visual_id_color=visual_id.color,
            visual_id_number=visual_id.number,
            breed_primary=breed_primary,
            breed_secondary=breed_secondary,
            sex=sex,
            hatch_date=hatch_date,
            sire_id=sire_id,
            dam_id=dam_id,
            status=status,
            status_date=status_date,
            notes=notes,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def visual_id(self) -> VisualId:
        return VisualId(
            type=self.visual_id_type,
            color=self.visual_id_color,
            number=self.visual_id_number,
        )
