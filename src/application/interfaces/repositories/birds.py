from __future__ import annotations

from collections.abc import Collection
from typing import Protocol
from uuid import UUID

from src.domain.models.ancestry import AncestryRow
from src.domain.models.bird import Bird


class BirdRepository(Protocol):
    async def add(self, bird: Bird) -> Bird: ...

    async def get(self, tenant_id: UUID, bird_id: UUID) -> Bird | None: ...

    async def get_many(
        self, tenant_id: UUID, ids: Collection[UUID], *, include_deleted: bool = False
    ) -> list[Bird]: ...

    async def fetch_ancestry(
        self, tenant_id: UUID, ids: Collection[UUID]
    ) -> list[AncestryRow]: ...

    async def list(
        self,
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
    ) -> tuple[list[Bird], int]: ...

    async def update(
        self,
        tenant_id: UUID,
        bird_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Bird | None: ...

    async def delete(self, tenant_id: UUID, bird_id: UUID) -> bool: ...
