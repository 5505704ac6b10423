from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BirdBase(BaseModel):
    visual_id_type: str  # zip_tie, leg_band, metal_band, other
    visual_id_color: str = Field(min_length=1)
    visual_id_number: str = Field(min_length=1)
    breed_primary: str = Field(min_length=1)
    breed_secondary: str | None = None
    sex: str  # rooster, hen, unknown
    hatch_date: date | None = None

    # Genealogy fields
    sire_id: UUID | None = None
    dam_id: UUID | None = None

    status: str = "alive"  # alive, sold, deceased
    status_date: date | None = None
    notes: str | None = None


class BirdCreate(BirdBase):
    model_config = ConfigDict(extra="forbid")


class BirdUpdate(BaseModel):
    """Partial update: only fields present in the body are changed."""

    model_config = ConfigDict(extra="forbid")

    version: int
    visual_id_type: str | None = None
    visual_id_color: str | None = None
    visual_id_number: str | None = None
    breed_primary: str | None = Field(default=None, min_length=1)
    breed_secondary: str | None = None
    sex: str | None = None
    hatch_date: date | None = None
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    status: str | None = None
    status_date: date | None = None
    notes: str | None = None


class BirdResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tenant_id: UUID
    visual_id_type: str
    visual_id_color: str
    visual_id_number: str
    breed_primary: str
    breed_secondary: str | None = None
    sex: str
    hatch_date: date | None = None
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    status: str
    status_date: date | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime
    version: int


class BirdsListResponse(BaseModel):
    items: list[BirdResponse]
    total: int
    limit: int
    offset: int


class ParentNodeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    bird: BirdResponse
    sire: BirdResponse | None = None
    dam: BirdResponse | None = None


class LineageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    bird: BirdResponse
    sire: ParentNodeResponse | None = None
    dam: ParentNodeResponse | None = None
