from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.ancestry import unique_ids
from src.domain.models.bird import Bird


@dataclass(slots=True)
class ParentNode:
    bird: Bird
    sire: Bird | None = None
    dam: Bird | None = None


@dataclass(slots=True)
class Lineage:
    bird: Bird
    sire: ParentNode | None = None
    dam: ParentNode | None = None


async def execute(uow: UnitOfWork, tenant_id: UUID, bird_id: UUID) -> Lineage:
    """Bird with its parents and grandparents.

    Ancestors are resolved one generation per batched read; deleted or foreign
    ancestors show up as unknown (``None``).
    """
    bird = await uow.birds.get(tenant_id, bird_id)
    if not bird:
        raise NotFound("Bird not found")

    parent_ids = unique_ids([bird.sire_id, bird.dam_id])
    parents = (
        {b.id: b for b in await uow.birds.get_many(tenant_id, parent_ids)} if parent_ids else {}
    )

    grandparent_ids = unique_ids(pid for p in parents.values() for pid in (p.sire_id, p.dam_id))
    grandparents = (
        {b.id: b for b in await uow.birds.get_many(tenant_id, grandparent_ids)}
        if grandparent_ids
        else {}
    )

    def node(parent_id: UUID | None) -> ParentNode | None:
        parent = parents.get(parent_id) if parent_id else None
        if parent is None:
            return None
        return ParentNode(
            bird=parent,
            sire=grandparents.get(parent.sire_id) if parent.sire_id else None,
            dam=grandparents.get(parent.dam_id) if parent.dam_id else None,
        )

    return Lineage(bird=bird, sire=node(bird.sire_id), dam=node(bird.dam_id))
