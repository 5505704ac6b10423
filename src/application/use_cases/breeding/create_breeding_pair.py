from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.breeding.pairing_checks import (
    ensure_date_range,
    raise_for_rejection,
)
from src.domain.models.breeding_pair import BreedingPair
from src.domain.services.pair_risk import PairRiskResult, analyze_pair
from src.domain.services.pairing_rules import validate_pairing
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateBreedingPairInput:
    sire_id: UUID
    dam_id: UUID
    start_date: date
    end_date: date | None = None
    notes: str | None = None


@dataclass(slots=True)
class CreateBreedingPairOutput:
    pair: BreedingPair
    risk: PairRiskResult


def ensure_can_create(role: Role) -> None:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to create breeding pairs")


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    payload: CreateBreedingPairInput,
) -> CreateBreedingPairOutput:
    ensure_can_create(role)
    ensure_date_range(payload.start_date, payload.end_date)

    # Role and existence violations block the save, risk warnings do not
    raise_for_rejection(
        await validate_pairing(uow.birds, tenant_id, payload.sire_id, payload.dam_id)
    )
    risk = await analyze_pair(uow.birds, tenant_id, payload.sire_id, payload.dam_id)

    pair = BreedingPair.create(
        tenant_id=tenant_id,
        sire_id=payload.sire_id,
        dam_id=payload.dam_id,
        start_date=payload.start_date,
        end_date=payload.end_date,
        notes=payload.notes,
    )
    created = await uow.breeding_pairs.add(pair)
    await uow.commit()
    logger.info(
        "Breeding pair created: tenant=%s pair=%s warnings=%s",
        tenant_id,
        created.id,
        [c.value for c in risk.codes],
    )
    return CreateBreedingPairOutput(pair=created, risk=risk)
