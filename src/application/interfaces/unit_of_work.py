from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.birds import BirdRepository
from src.application.interfaces.repositories.breeding_pairs import BreedingPairRepository


class UnitOfWork(Protocol):
    birds: BirdRepository
    breeding_pairs: BreedingPairRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
