from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, Index, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class BirdORM(Base):
    __tablename__ = "birds"
    __table_args__ = (
        Index("ix_birds_tenant_sire", "tenant_id", "sire_id"),
        Index("ix_birds_tenant_dam", "tenant_id", "dam_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    tenant_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    visual_id_type: Mapped[str] = mapped_column(String(20), nullable=False)
    visual_id_color: Mapped[str] = mapped_column(String(64), nullable=False)
    visual_id_number: Mapped[str] = mapped_column(String(64), nullable=False)
    breed_primary: Mapped[str] = mapped_column(String(255), nullable=False)
    breed_secondary: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sex: Mapped[str] = mapped_column(String(10), nullable=False, server_default="unknown")
    hatch_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Genealogy fields
    sire_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("birds.id"), nullable=True
    )
    dam_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("birds.id"), nullable=True
    )

    status: Mapped[str] = mapped_column(String(10), nullable=False, server_default="alive")
    status_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
