from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.breeding_pairs import BreedingPairRepository
from src.domain.models.breeding_pair import BreedingPair
from src.infrastructure.db.orm.breeding_pair import BreedingPairORM


class BreedingPairsSQLAlchemyRepository(BreedingPairRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedingPairORM) -> BreedingPair:
        return BreedingPair(
            id=orm.id,
            tenant_id=orm.tenant_id,
            sire_id=orm.sire_id,
            dam_id=orm.dam_id,
            start_date=orm.start_date,
            end_date=orm.end_date,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, pair: BreedingPair) -> BreedingPair:
        orm = BreedingPairORM(
            id=pair.id,
            tenant_id=pair.tenant_id,
            sire_id=pair.sire_id,
            dam_id=pair.dam_id,
            start_date=pair.start_date,
            end_date=pair.end_date,
            notes=pair.notes,
            created_at=pair.created_at,
            updated_at=pair.updated_at,
            version=pair.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Breeding pair could not be stored") from exc
        return self._to_domain(orm)

    async def get(self, tenant_id: UUID, pair_id: UUID) -> BreedingPair | None:
        stmt = (
            select(BreedingPairORM)
            .where(BreedingPairORM.tenant_id == tenant_id)
            .where(BreedingPairORM.id == pair_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        tenant_id: UUID,
        *,
        sire_id: UUID | None = None,
        dam_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        limit: int | None = None,
    ) -> list[BreedingPair]:
        stmt = select(BreedingPairORM).where(BreedingPairORM.tenant_id == tenant_id)
        if sire_id is not None:
            stmt = stmt.where(BreedingPairORM.sire_id == sire_id)
        if dam_id is not None:
            stmt = stmt.where(BreedingPairORM.dam_id == dam_id)
        # Overlap with [date_from, date_to]; a pair without end_date is still ongoing
        if date_to is not None:
            stmt = stmt.where(BreedingPairORM.start_date <= date_to)
        if date_from is not None:
            stmt = stmt.where(
                or_(BreedingPairORM.end_date.is_(None), BreedingPairORM.end_date >= date_from)
            )
        stmt = stmt.order_by(BreedingPairORM.start_date.desc(), BreedingPairORM.id)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(
        self,
        tenant_id: UUID,
        pair_id: UUID,
        data: dict,
        expected_version: int,
    ) -> BreedingPair | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(BreedingPairORM)
            .where(BreedingPairORM.tenant_id == tenant_id, BreedingPairORM.id == pair_id)
            .where(BreedingPairORM.version == expected_version)
            .values(**values)
            .returning(BreedingPairORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError(
                "Failed to update breeding pair due to constraint violation"
            ) from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)
