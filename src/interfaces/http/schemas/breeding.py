from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.services.pair_risk import PairRiskResult


class BreedingPairCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sire_id: UUID
    dam_id: UUID
    start_date: date
    end_date: date | None = None
    notes: str | None = None


class BreedingPairUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: int
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    start_date: date | None = None
    end_date: date | None = None
    notes: str | None = None


class BreedingPairResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tenant_id: UUID
    sire_id: UUID
    dam_id: UUID
    start_date: date
    end_date: date | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime
    version: int


class BreedingPairsListResponse(BaseModel):
    items: list[BreedingPairResponse]


class PairWarningResponse(BaseModel):
    code: str
    message: str


class PairRiskMetaResponse(BaseModel):
    found: bool
    shared_parent_ids: list[UUID]
    shared_grandparent_ids: list[UUID]
    query_count: int


class PairRiskResponse(BaseModel):
    warnings: list[PairWarningResponse]
    meta: PairRiskMetaResponse

    @classmethod
    def from_result(cls, result: PairRiskResult) -> PairRiskResponse:
        return cls.model_validate(result.to_dict())


class BreedingPairCreatedResponse(BreedingPairResponse):
    # Advisory only; the pair is saved regardless of warnings
    risk: PairRiskResponse


class OffspringRow(BaseModel):
    model_config = ConfigDict(extra="forbid")

    visual_id_type: str | None = None
    visual_id_color: str | None = Field(default=None, min_length=1)
    visual_id_number: str | None = Field(default=None, min_length=1)
    hatch_date: str | None = None
    sex: str | None = None
    breed_primary: str | None = Field(default=None, min_length=1)
    breed_secondary: str | None = Field(default=None, min_length=1)
    notes: str | None = None


class OffspringBatchCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    offspring: list[OffspringRow] = Field(min_length=1)


class OffspringCreated(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    visual_id_type: str
    visual_id_color: str
    visual_id_number: str
    breed_primary: str
    breed_secondary: str | None = None


class OffspringRowError(BaseModel):
    index: int
    path: str
    message: str


class OffspringBatchResponse(BaseModel):
    created: list[OffspringCreated]
    errors: list[OffspringRowError]
