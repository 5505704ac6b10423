from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.breeding import (
    create_breeding_pair,
    create_offspring_batch,
    get_breeding_pair,
    list_breeding_pairs,
    preview_pair_risk,
    update_breeding_pair,
)
from src.config.settings import Settings
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_app_settings, get_auth_context, get_uow
from src.interfaces.http.schemas.breeding import (
    BreedingPairCreate,
    BreedingPairCreatedResponse,
    BreedingPairResponse,
    BreedingPairsListResponse,
    BreedingPairUpdate,
    OffspringBatchCreate,
    OffspringBatchResponse,
    OffspringCreated,
    OffspringRowError,
    PairRiskResponse,
)

router = APIRouter(prefix="/breeding-pairs", tags=["breeding"])


@router.get("/pair-risk", response_model=PairRiskResponse)
async def pair_risk_endpoint(
    sire_id: UUID = Query(...),
    dam_id: UUID = Query(...),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> PairRiskResponse:
    """Read-only risk preview for a candidate pair."""
    result = await preview_pair_risk.execute(uow, context.tenant_id, sire_id, dam_id)
    return PairRiskResponse.from_result(result)


@router.post("", response_model=BreedingPairCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_breeding_pair_endpoint(
    payload: BreedingPairCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> BreedingPairCreatedResponse:
    result = await create_breeding_pair.execute(
        uow,
        context.tenant_id,
        context.role,
        create_breeding_pair.CreateBreedingPairInput(**payload.model_dump()),
    )
    pair = BreedingPairResponse.model_validate(result.pair)
    return BreedingPairCreatedResponse(
        **pair.model_dump(), risk=PairRiskResponse.from_result(result.risk)
    )


@router.get("", response_model=BreedingPairsListResponse)
async def list_breeding_pairs_endpoint(
    sire_id: UUID | None = Query(None),
    dam_id: UUID | None = Query(None),
    date_from: date | None = Query(None, alias="from"),
    date_to: date | None = Query(None, alias="to"),
    limit: int | None = Query(None, ge=1),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> BreedingPairsListResponse:
    items = await list_breeding_pairs.execute(
        uow,
        context.tenant_id,
        sire_id=sire_id,
        dam_id=dam_id,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
    )
    return BreedingPairsListResponse(
        items=[BreedingPairResponse.model_validate(p) for p in items]
    )


@router.get("/{pair_id}", response_model=BreedingPairResponse)
async def get_breeding_pair_endpoint(
    pair_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> BreedingPairResponse:
    pair = await get_breeding_pair.execute(uow, context.tenant_id, pair_id)
    return BreedingPairResponse.model_validate(pair)


@router.patch("/{pair_id}", response_model=BreedingPairResponse)
async def update_breeding_pair_endpoint(
    pair_id: UUID,
    payload: BreedingPairUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> BreedingPairResponse:
    pair = await update_breeding_pair.execute(
        uow,
        context.tenant_id,
        context.role,
        pair_id,
        update_breeding_pair.UpdateBreedingPairInput(**payload.model_dump(exclude_unset=True)),
    )
    return BreedingPairResponse.model_validate(pair)


@router.post(
    "/{pair_id}/offspring",
    response_model=OffspringBatchResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_offspring_endpoint(
    pair_id: UUID,
    payload: OffspringBatchCreate,
    context: AuthContext = Depends(get_auth_context),
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
) -> OffspringBatchResponse:
    rows = [
        create_offspring_batch.OffspringRowInput(**row.model_dump(exclude_unset=True))
        for row in payload.offspring
    ]
    result = await create_offspring_batch.execute(
        uow,
        context.tenant_id,
        context.role,
        pair_id,
        rows,
        max_rows=settings.offspring_batch_max_rows,
    )
    return OffspringBatchResponse(
        created=[OffspringCreated.model_validate(b) for b in result.created],
        errors=[OffspringRowError(**e) for e in result.errors],
    )
