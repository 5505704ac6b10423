from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.birds.parent_checks import (
    clean_breed_primary,
    ensure_bird_choices,
    ensure_parents_in_tenant,
    ensure_real_visual_id_number,
)
from src.domain.models.bird import Bird
from src.domain.value_objects.bird_status import BirdStatus
from src.domain.value_objects.role import Role
from src.domain.value_objects.visual_id import VisualId


@dataclass(slots=True)
class CreateBirdInput:
    visual_id_type: str
    visual_id_color: str
    visual_id_number: str
    breed_primary: str
    sex: str
    breed_secondary: str | None = None
    hatch_date: date | None = None
    # Genealogy fields
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    status: str = BirdStatus.ALIVE.value
    status_date: date | None = None
    notes: str | None = None


def ensure_can_create(role: Role) -> None:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to create birds")


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    payload: CreateBirdInput,
) -> Bird:
    ensure_can_create(role)
    ensure_bird_choices(
        sex=payload.sex, status=payload.status, visual_id_type=payload.visual_id_type
    )
    breed_primary = clean_breed_primary(payload.breed_primary)
    ensure_real_visual_id_number(payload.visual_id_number)
    await ensure_parents_in_tenant(uow, tenant_id, payload.sire_id, payload.dam_id)

    bird = Bird.create(
        tenant_id=tenant_id,
        visual_id=VisualId(
            type=payload.visual_id_type,
            color=payload.visual_id_color,
            number=payload.visual_id_number,
        ),
        breed_primary=breed_primary,
        breed_secondary=payload.breed_secondary,
        sex=payload.sex,
        hatch_date=payload.hatch_date,
        sire_id=payload.sire_id,
        dam_id=payload.dam_id,
        status=payload.status,
        status_date=payload.status_date,
        notes=payload.notes,
    )
    created = await uow.birds.add(bird)
    await uow.commit()
    return created
