from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.breeding_pair import BreedingPair


class BreedingPairRepository(Protocol):
    async def add(self, pair: BreedingPair) -> BreedingPair: ...

    async def get(self, tenant_id: UUID, pair_id: UUID) -> BreedingPair | None: ...

    async def list(
        self,
        tenant_id: UUID,
        *,
        sire_id: UUID | None = None,
        dam_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        limit: int | None = None,
    ) -> list[BreedingPair]: ...

    async def update(
        self,
        tenant_id: UUID,
        pair_id: UUID,
        data: dict,
        expected_version: int,
    ) -> BreedingPair | None: ...
