from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.application.use_cases.birds import (
    create_bird,
    delete_bird,
    get_bird,
    get_lineage,
    list_birds,
    update_bird,
)
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.birds import (
    BirdCreate,
    BirdResponse,
    BirdsListResponse,
    BirdUpdate,
    LineageResponse,
)

router = APIRouter(prefix="/birds", tags=["birds"])


@router.get("/", response_model=BirdsListResponse)
async def list_birds_endpoint(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    sex: str | None = Query(None, description="rooster, hen or unknown"),
    status_filter: str | None = Query(None, alias="status", description="alive, sold, deceased"),
    breed_primary: str | None = Query(None),
    search: str | None = Query(None, description="Text search across visual id and breeds"),
    sire_id: UUID | None = Query(None),
    dam_id: UUID | None = Query(None),
    parent_id: UUID | None = Query(None, description="Children of this bird in either slot"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> BirdsListResponse:
    result = await list_birds.execute(
        uow,
        context.tenant_id,
        limit=limit,
        offset=offset,
        sex=sex,
        status=status_filter,
        breed_primary=breed_primary,
        search=search,
        sire_id=sire_id,
        dam_id=dam_id,
        parent_id=parent_id,
    )
    return BirdsListResponse(
        items=[BirdResponse.model_validate(b) for b in result.items],
        total=result.total,
        limit=result.limit,
        offset=result.offset,
    )


@router.post("/", response_model=BirdResponse, status_code=status.HTTP_201_CREATED)
async def create_bird_endpoint(
    payload: BirdCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> BirdResponse:
    bird = await create_bird.execute(
        uow,
        context.tenant_id,
        context.role,
        create_bird.CreateBirdInput(**payload.model_dump()),
    )
    return BirdResponse.model_validate(bird)


@router.get("/{bird_id}", response_model=BirdResponse)
async def get_bird_endpoint(
    bird_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> BirdResponse:
    bird = await get_bird.execute(uow, context.tenant_id, bird_id)
    return BirdResponse.model_validate(bird)


@router.get("/{bird_id}/lineage", response_model=LineageResponse)
async def get_lineage_endpoint(
    bird_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> LineageResponse:
    lineage = await get_lineage.execute(uow, context.tenant_id, bird_id)
    return LineageResponse.model_validate(lineage)


@router.patch("/{bird_id}", response_model=BirdResponse)
async def update_bird_endpoint(
    bird_id: UUID,
    payload: BirdUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> BirdResponse:
    # Only fields sent in the body reach the use case, so an explicit null clears a parent
    bird = await update_bird.execute(
        uow,
        context.tenant_id,
        context.role,
        bird_id,
        update_bird.UpdateBirdInput(**payload.model_dump(exclude_unset=True)),
    )
    return BirdResponse.model_validate(bird)


@router.delete("/{bird_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bird_endpoint(
    bird_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_bird.execute(uow, context.tenant_id, context.role, bird_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
