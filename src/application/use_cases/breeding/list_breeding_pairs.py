from __future__ import annotations

from datetime import date
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breeding_pair import BreedingPair

MAX_LIMIT = 100


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    *,
    sire_id: UUID | None = None,
    dam_id: UUID | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
    limit: int | None = None,
) -> list[BreedingPair]:
    if date_from and date_to and date_to < date_from:
        raise ValidationError("date_to cannot be before date_from", details=[{"path": "date_to"}])
    if limit is not None:
        if limit <= 0:
            raise ValidationError("limit must be positive", details=[{"path": "limit"}])
        limit = min(limit, MAX_LIMIT)
    return await uow.breeding_pairs.list(
        tenant_id,
        sire_id=sire_id,
        dam_id=dam_id,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
    )
