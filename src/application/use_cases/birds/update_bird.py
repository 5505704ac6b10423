from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.birds.parent_checks import (
    clean_breed_primary,
    ensure_bird_choices,
    ensure_parents_in_tenant,
    ensure_real_visual_id_number,
)
from src.domain.models.bird import Bird
from src.domain.value_objects.bird_status import BirdStatus
from src.domain.value_objects.role import Role
from src.domain.value_objects.unset import UNSET

UPDATABLE_FIELDS = (
    "visual_id_type",
    "visual_id_color",
    "visual_id_number",
    "breed_primary",
    "breed_secondary",
    "sex",
    "hatch_date",
    # Genealogy fields
    "sire_id",
    "dam_id",
    "status",
    "status_date",
    "notes",
)


@dataclass(slots=True)
class UpdateBirdInput:
    """Partial update; fields left as ``UNSET`` are not touched."""

    version: int
    visual_id_type: Any = UNSET
    visual_id_color: Any = UNSET
    visual_id_number: Any = UNSET
    breed_primary: Any = UNSET
    breed_secondary: Any = UNSET
    sex: Any = UNSET
    hatch_date: Any = UNSET
    sire_id: Any = UNSET
    dam_id: Any = UNSET
    status: Any = UNSET
    status_date: Any = UNSET
    notes: Any = UNSET


def ensure_can_update(role: Role) -> None:
    if not role.can_update():
        raise PermissionDenied("Role not allowed to update birds")


def _changed_fields(payload: UpdateBirdInput) -> dict:
    data: dict = {}
    for field_name in UPDATABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not UNSET:
            data[field_name] = value
    for required in ("visual_id_type", "visual_id_color", "visual_id_number", "breed_primary"):
        if required in data and not data[required]:
            raise ValidationError(f"{required} cannot be empty", details=[{"path": required}])
    if "breed_primary" in data:
        data["breed_primary"] = clean_breed_primary(data["breed_primary"])
    if "visual_id_number" in data:
        ensure_real_visual_id_number(data["visual_id_number"])
    for nullable_choice in ("sex", "status"):
        if nullable_choice in data and data[nullable_choice] is None:
            raise ValidationError(
                f"{nullable_choice} cannot be null", details=[{"path": nullable_choice}]
            )
    return data


def _apply_status_date(data: dict) -> None:
    status = data.get("status")
    if status is None:
        return
    if data.get("status_date") is None:
        if BirdStatus(status).requires_status_date():
            data["status_date"] = datetime.now(timezone.utc).date()
        else:
            data["status_date"] = None


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    bird_id: UUID,
    payload: UpdateBirdInput,
) -> Bird:
    ensure_can_update(role)
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await uow.birds.get(tenant_id, bird_id)
    if not existing:
        raise NotFound("Bird not found")

    data = _changed_fields(payload)
    if not data:
        return existing
    ensure_bird_choices(
        sex=data.get("sex"), status=data.get("status"), visual_id_type=data.get("visual_id_type")
    )

    for field_name in ("sire_id", "dam_id"):
        if data.get(field_name) == bird_id:
            raise ValidationError(
                "A bird cannot be its own parent", details=[{"path": field_name}]
            )
    await ensure_parents_in_tenant(uow, tenant_id, data.get("sire_id"), data.get("dam_id"))
    _apply_status_date(data)

    updated = await uow.birds.update(
        tenant_id,
        bird_id,
        data=data,
        expected_version=payload.version,
    )
    if not updated:
        raise ConflictError("Version mismatch while updating bird")
    await uow.commit()
    return updated
