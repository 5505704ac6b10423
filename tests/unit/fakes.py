from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import UUID

from src.domain.models.ancestry import AncestryRow
from src.domain.models.bird import Bird
from src.domain.models.breeding_pair import BreedingPair
from src.domain.value_objects.visual_id import VisualId


def make_bird(
    tenant_id: UUID,
    *,
    bird_id: UUID | None = None,
    sex: str = "unknown",
    sire_id: UUID | None = None,
    dam_id: UUID | None = None,
    breed_primary: str = "Rhode Island Red",
    breed_secondary: str | None = None,
    number: str = "1",
) -> Bird:
    bird = Bird.create(
        tenant_id=tenant_id,
        visual_id=VisualId(type="leg_band", color="red", number=number),
        breed_primary=breed_primary,
        breed_secondary=breed_secondary,
        sex=sex,
        sire_id=sire_id,
        dam_id=dam_id,
    )
    if bird_id is not None:
        bird.id = bird_id
    return bird


class InMemoryBirds:
    """Bird store keyed by id, scoped per tenant, counting ancestry round trips."""

    def __init__(self, birds: list[Bird] | None = None) -> None:
        self.rows: dict[UUID, Bird] = {}
        self.ancestry_calls: list[list[UUID]] = []
        for bird in birds or []:
            self.rows[bird.id] = bird

    def put(self, bird: Bird) -> Bird:
        self.rows[bird.id] = bird
        return bird

    def _live(self, tenant_id: UUID, bird_id: UUID) -> Bird | None:
        bird = self.rows.get(bird_id)
        if bird is None or bird.tenant_id != tenant_id or bird.deleted_at is not None:
            return None
        return bird

    async def fetch_ancestry(self, tenant_id: UUID, ids) -> list[AncestryRow]:
        self.ancestry_calls.append(list(ids))
        out = []
        for bird_id in ids:
            bird = self._live(tenant_id, bird_id)
            if bird is not None:
                out.append(
                    AncestryRow(id=bird.id, sire_id=bird.sire_id, dam_id=bird.dam_id, sex=bird.sex)
                )
        return out

    async def add(self, bird: Bird) -> Bird:
        return self.put(bird)

    async def get(self, tenant_id: UUID, bird_id: UUID) -> Bird | None:
        return self._live(tenant_id, bird_id)

    async def get_many(self, tenant_id: UUID, ids, *, include_deleted: bool = False) -> list[Bird]:
        if include_deleted:
            found = (self.rows.get(i) for i in ids)
            return [b for b in found if b is not None and b.tenant_id == tenant_id]
        return [b for b in (self._live(tenant_id, i) for i in ids) if b is not None]

    async def list(self, tenant_id: UUID, *, limit: int, offset: int = 0, **filters):
        items = [b for b in self.rows.values() if self._live(tenant_id, b.id) is not None]
        for key in ("sex", "status", "sire_id", "dam_id"):
            if filters.get(key) is not None:
                items = [b for b in items if getattr(b, key) == filters[key]]
        return items[offset : offset + limit], len(items)

    async def update(self, tenant_id: UUID, bird_id: UUID, data: dict, expected_version: int):
        bird = self._live(tenant_id, bird_id)
        if bird is None or bird.version != expected_version:
            return None
        updated = replace(bird, **data, version=expected_version + 1)
        self.rows[bird_id] = updated
        return updated

    async def delete(self, tenant_id: UUID, bird_id: UUID) -> bool:
        bird = self._live(tenant_id, bird_id)
        if bird is None:
            return False
        bird.deleted_at = datetime.now(timezone.utc)
        return True


class InMemoryBreedingPairs:
    def __init__(self) -> None:
        self.rows: dict[UUID, BreedingPair] = {}

    async def add(self, pair: BreedingPair) -> BreedingPair:
        self.rows[pair.id] = pair
        return pair

    async def get(self, tenant_id: UUID, pair_id: UUID) -> BreedingPair | None:
        pair = self.rows.get(pair_id)
        return pair if pair and pair.tenant_id == tenant_id else None

    async def list(self, tenant_id: UUID, **filters) -> list[BreedingPair]:
        return [p for p in self.rows.values() if p.tenant_id == tenant_id]

    async def update(self, tenant_id: UUID, pair_id: UUID, data: dict, expected_version: int):
        pair = await self.get(tenant_id, pair_id)
        if pair is None or pair.version != expected_version:
            return None
        updated = replace(pair, **data, version=expected_version + 1)
        self.rows[pair_id] = updated
        return updated


def make_uow(birds: InMemoryBirds | None = None, pairs: InMemoryBreedingPairs | None = None):
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    async def rollback():
        return None

    return SimpleNamespace(
        birds=birds or InMemoryBirds(),
        breeding_pairs=pairs or InMemoryBreedingPairs(),
        commit=commit,
        rollback=rollback,
        commits=commits,
    )
