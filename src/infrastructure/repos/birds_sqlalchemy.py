from __future__ import annotations

from collections.abc import Collection
from uuid import UUID

from sqlalchemy import Select, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, InfrastructureError
from src.application.interfaces.repositories.birds import BirdRepository
from src.domain.models.ancestry import AncestryRow
from src.domain.models.bird import Bird
from src.infrastructure.db.orm.bird import BirdORM


class BirdsSQLAlchemyRepository(BirdRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BirdORM) -> Bird:
        return Bird(
            id=orm.id,
            tenant_id=orm.tenant_id,
            visual_id_type=orm.visual_id_type,
            visual_id_color=orm.visual_id_color,
            visual_id_number=orm.visual_id_number,
            breed_primary=orm.breed_primary,
            breed_secondary=orm.breed_secondary,
            sex=orm.sex,
            hatch_date=orm.hatch_date,
            sire_id=orm.sire_id,
            dam_id=orm.dam_id,
            status=orm.status,
            status_date=orm.status_date,
            notes=orm.notes,
            deleted_at=orm.deleted_at,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    def _live(self, tenant_id: UUID) -> Select:
        return (
            select(BirdORM)
            .where(BirdORM.tenant_id == tenant_id)
            .where(BirdORM.deleted_at.is_(None))
        )

    async def add(self, bird: Bird) -> Bird:
        orm = BirdORM(
            id=bird.id,
            tenant_id=bird.tenant_id,
            visual_id_type=bird.visual_id_type,
            visual_id_color=bird.visual_id_color,
            visual_id_number=bird.visual_id_number,
            breed_primary=bird.breed_primary,
            breed_secondary=bird.breed_secondary,
            sex=bird.sex,
            hatch_date=bird.hatch_date,
            sire_id=bird.sire_id,
            dam_id=bird.dam_id,
            status=bird.status,
            status_date=bird.status_date,
            notes=bird.notes,
            deleted_at=bird.deleted_at,
            created_at=bird.created_at,
            updated_at=bird.updated_at,
            version=bird.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Bird could not be stored") from exc
        return self._to_domain(orm)

    async def get(self, tenant_id: UUID, bird_id: UUID) -> Bird | None:
        stmt = self._live(tenant_id).where(BirdORM.id == bird_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_many(
        self, tenant_id: UUID, ids: Collection[UUID], *, include_deleted: bool = False
    ) -> list[Bird]:
        if not ids:
            return []
        if include_deleted:
            stmt = select(BirdORM).where(BirdORM.tenant_id == tenant_id)
        else:
            stmt = self._live(tenant_id)
        stmt = stmt.where(BirdORM.id.in_(list(ids)))
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def fetch_ancestry(
        self, tenant_id: UUID, ids: Collection[UUID]
    ) -> list[AncestryRow]:
        if not ids:
            return []
        # Tenant and id are matched together so a foreign parent id never resolves
        stmt = (
            select(BirdORM.id, BirdORM.sire_id, BirdORM.dam_id, BirdORM.sex)
            .where(BirdORM.tenant_id == tenant_id)
            .where(BirdORM.deleted_at.is_(None))
            .where(BirdORM.id.in_(list(ids)))
        )
        result = await self.session.execute(stmt)
        return [
            AncestryRow(id=row.id, sire_id=row.sire_id, dam_id=row.dam_id, sex=row.sex)
            for row in result.all()
        ]

    def _apply_filters(
        self,
        stmt: Select,
        *,
        sex: str | None,
        status: str | None,
        breed_primary: str | None,
        search: str | None,
        sire_id: UUID | None,
        dam_id: UUID | None,
        parent_id: UUID | None,
    ) -> Select:
        if sex is not None:
            stmt = stmt.where(BirdORM.sex == sex)
        if status is not None:
            stmt = stmt.where(BirdORM.status == status)
        if breed_primary:
            stmt = stmt.where(func.lower(BirdORM.breed_primary) == breed_primary.lower())
        if sire_id is not None:
            stmt = stmt.where(BirdORM.sire_id == sire_id)
        if dam_id is not None:
            stmt = stmt.where(BirdORM.dam_id == dam_id)
        if parent_id is not None:
            stmt = stmt.where(or_(BirdORM.sire_id == parent_id, BirdORM.dam_id == parent_id))
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(BirdORM.visual_id_number).like(pattern),
                    func.lower(BirdORM.visual_id_color).like(pattern),
                    func.lower(BirdORM.breed_primary).like(pattern),
                    func.lower(BirdORM.breed_secondary).like(pattern),
                )
            )
        return stmt

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
    ) -> tuple[list[Bird], int]:
        filters = dict(
            sex=sex,
            status=status,
            breed_primary=breed_primary,
            search=search,
            sire_id=sire_id,
            dam_id=dam_id,
            parent_id=parent_id,
        )
        stmt = self._apply_filters(self._live(tenant_id), **filters)
        stmt = stmt.order_by(BirdORM.created_at.desc(), BirdORM.id).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        items = [self._to_domain(orm) for orm in result.scalars().all()]

        count_stmt = self._apply_filters(
            select(func.count(BirdORM.id))
            .where(BirdORM.tenant_id == tenant_id)
            .where(BirdORM.deleted_at.is_(None)),
            **filters,
        )
        total = (await self.session.execute(count_stmt)).scalar() or 0
        return items, total

    async def update(
        self,
        tenant_id: UUID,
        bird_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Bird | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(BirdORM)
            .where(BirdORM.tenant_id == tenant_id, BirdORM.id == bird_id)
            .where(BirdORM.version == expected_version)
            .where(BirdORM.deleted_at.is_(None))
            .values(**values)
            .returning(BirdORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update bird due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def delete(self, tenant_id: UUID, bird_id: UUID) -> bool:
        stmt = (
            update(BirdORM)
            .where(BirdORM.tenant_id == tenant_id)
            .where(BirdORM.id == bird_id)
            .where(BirdORM.deleted_at.is_(None))
            .values(deleted_at=func.now(), version=BirdORM.version + 1)
            .returning(BirdORM.id)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to delete bird") from exc
        return result.scalar_one_or_none() is not None
