from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.breeding.pairing_checks import (
    ensure_date_range,
    raise_for_rejection,
)
from src.domain.models.breeding_pair import BreedingPair
from src.domain.services.pairing_rules import validate_pairing
from src.domain.value_objects.role import Role
from src.domain.value_objects.unset import UNSET


@dataclass(slots=True)
class UpdateBreedingPairInput:
    version: int
    sire_id: Any = UNSET
    dam_id: Any = UNSET
    start_date: Any = UNSET
    end_date: Any = UNSET
    notes: Any = UNSET


def ensure_can_update(role: Role) -> None:
    if not role.can_update():
        raise PermissionDenied("Role not allowed to update breeding pairs")


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    pair_id: UUID,
    payload: UpdateBreedingPairInput,
) -> BreedingPair:
    ensure_can_update(role)
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await uow.breeding_pairs.get(tenant_id, pair_id)
    if not existing:
        raise NotFound("Breeding pair not found")

    data: dict = {}
    for field_name in ("sire_id", "dam_id", "start_date", "end_date", "notes"):
        value = getattr(payload, field_name)
        if value is UNSET:
            continue
        if value is None and field_name in ("sire_id", "dam_id", "start_date"):
            raise ValidationError(f"{field_name} cannot be null", details=[{"path": field_name}])
        data[field_name] = value
    if not data:
        return existing

    ensure_date_range(
        data.get("start_date", existing.start_date),
        data.get("end_date", existing.end_date),
    )
    sire_changed = data.get("sire_id", existing.sire_id) != existing.sire_id
    dam_changed = data.get("dam_id", existing.dam_id) != existing.dam_id
    if sire_changed or dam_changed:
        # Only a reassigned slot is looked up again
        raise_for_rejection(
            await validate_pairing(
                uow.birds,
                tenant_id,
                data.get("sire_id", existing.sire_id),
                data.get("dam_id", existing.dam_id),
                check_sire=sire_changed,
                check_dam=dam_changed,
            )
        )

    updated = await uow.breeding_pairs.update(
        tenant_id,
        pair_id,
        data=data,
        expected_version=payload.version,
    )
    if not updated:
        raise ConflictError("Version mismatch while updating breeding pair")
    await uow.commit()
    return updated
