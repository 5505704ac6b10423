from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.birds.parent_checks import ensure_bird_choices
from src.domain.models.bird import Bird


@dataclass(slots=True)
class ListBirdsResult:
    items: list[Bird]
    total: int
    limit: int
    offset: int


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    *,
    limit: int,
    offset: int = 0,
    sex: str | None = None,
    status: str | None = None,
    breed_primary: str | None = None,
    search: str | None = None,
    sire_id: UUID | None = None,
    dam_id: UUID | None = None,
    parent_id: UUID | None = None,
) -> ListBirdsResult:
    if limit <= 0 or limit > 100:
        raise ValidationError("limit must be between 1 and 100")
    if offset < 0:
        raise ValidationError("offset must be zero or positive")
    ensure_bird_choices(sex=sex, status=status)

    items, total = await uow.birds.list(
        tenant_id,
        limit=limit,
        offset=offset,
        sex=sex,
        status=status,
        breed_primary=breed_primary,
        search=search.strip() if search else None,
        sire_id=sire_id,
        dam_id=dam_id,
        parent_id=parent_id,
    )
    return ListBirdsResult(items=items, total=total, limit=limit, offset=offset)
