from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breeding_pair import BreedingPair


async def execute(uow: UnitOfWork, tenant_id: UUID, pair_id: UUID) -> BreedingPair:
    pair = await uow.breeding_pairs.get(tenant_id, pair_id)
    if not pair:
        raise NotFound("Breeding pair not found")
    return pair
