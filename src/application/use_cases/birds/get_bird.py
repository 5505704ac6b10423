from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.bird import Bird


async def execute(uow: UnitOfWork, tenant_id: UUID, bird_id: UUID) -> Bird:
    bird = await uow.birds.get(tenant_id, bird_id)
    if not bird:
        raise NotFound("Bird not found")
    return bird
