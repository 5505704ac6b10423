from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.services.pair_risk import PairRiskResult, analyze_pair


async def execute(uow: UnitOfWork, tenant_id: UUID, sire_id: UUID, dam_id: UUID) -> PairRiskResult:
    result = await analyze_pair(uow.birds, tenant_id, sire_id, dam_id)
    if not result.found:
        # Unknown birds mean the risk cannot be evaluated, never "no risk"
        raise NotFound("Bird not found")
    return result
