from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.bird import Bird
from src.domain.services.offspring_defaults import (
    default_breeds,
    resolve_breeds,
    resolve_visual_id,
)
from src.domain.value_objects.bird_sex import BirdSex
from src.domain.value_objects.bird_status import BirdStatus
from src.domain.value_objects.role import Role
from src.domain.value_objects.unset import UNSET
from src.domain.value_objects.visual_id import PLACEHOLDER_PREFIX, VisualIdType

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROWS = 200


@dataclass(slots=True)
class OffspringRowInput:
    visual_id_type: str | None = None
    visual_id_color: str | None = None
    visual_id_number: str | None = None
    hatch_date: str | None = None  # parsed per row so a bad value only fails its row
    sex: str | None = None
    breed_primary: Any = UNSET
    breed_secondary: Any = UNSET
    notes: str | None = None


@dataclass(slots=True)
class OffspringBatchResult:
    created: list[Bird] = field(default_factory=list)
    errors: list[dict[str, Any]] = field(default_factory=list)


def ensure_can_record(role: Role) -> None:
    if not role.can_record_offspring():
        raise PermissionDenied("Role not allowed to record offspring")


def parse_hatch_date(value: str | None) -> date | None:
    if value is None or not value.strip():
        return None
    raw = value.strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
    except ValueError as exc:
        raise ValueError("Hatch date: must be a valid date.") from exc


def _row_error(index: int, field_name: str, message: str) -> dict[str, Any]:
    return {"index": index, "path": f"offspring.{index}.{field_name}", "message": message}


def _check_row(index: int, row: OffspringRowInput) -> tuple[date | None, list[dict[str, Any]]]:
    errors: list[dict[str, Any]] = []
    hatch_date = None
    try:
        hatch_date = parse_hatch_date(row.hatch_date)
    except ValueError as exc:
        errors.append(_row_error(index, "hatch_date", str(exc)))
    if row.sex is not None and row.sex not in {s.value for s in BirdSex}:
        errors.append(_row_error(index, "sex", "Sex: must be rooster, hen or unknown."))
    if row.visual_id_type is not None and row.visual_id_type not in {
        t.value for t in VisualIdType
    }:
        errors.append(_row_error(index, "visual_id_type", "Visual ID type is not valid."))
    if isinstance(row.breed_primary, str) and not row.breed_primary.strip():
        errors.append(_row_error(index, "breed_primary", "Breed primary cannot be blank."))
    if row.visual_id_number and row.visual_id_number.strip().upper().startswith(
        PLACEHOLDER_PREFIX
    ):
        errors.append(
            _row_error(index, "visual_id_number", "Visual ID number is reserved for placeholders.")
        )
    return hatch_date, errors


async def execute(
    uow: UnitOfWork,
    tenant_id: UUID,
    role: Role,
    pair_id: UUID,
    rows: list[OffspringRowInput],
    *,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> OffspringBatchResult:
    """Create one bird per row, all children of the pair's sire and dam.

    Rows are independent: a row that fails validation is reported in
    ``errors`` and the remaining rows are still created.
    """
    ensure_can_record(role)
    if not rows or len(rows) > max_rows:
        raise ValidationError(
            f"offspring must contain between 1 and {max_rows} rows",
            details=[{"path": "offspring"}],
        )

    pair = await uow.breeding_pairs.get(tenant_id, pair_id)
    if not pair:
        raise NotFound("Breeding pair not found")
    # A parent deleted after pairing still passes its breeds to the chicks
    found = await uow.birds.get_many(tenant_id, [pair.sire_id, pair.dam_id], include_deleted=True)
    parents = {b.id: b for b in found}
    sire = parents.get(pair.sire_id)
    dam = parents.get(pair.dam_id)
    if sire is None or dam is None:
        raise ValidationError("Breeding pair missing sire/dam.")

    defaults = default_breeds(
        sire.breed_primary, sire.breed_secondary, dam.breed_primary, dam.breed_secondary
    )

    result = OffspringBatchResult()
    for index, row in enumerate(rows):
        hatch_date, errors = _check_row(index, row)
        if errors:
            result.errors.extend(errors)
            continue
        breeds = resolve_breeds(defaults, row.breed_primary, row.breed_secondary)
        bird = Bird.create(
            tenant_id=tenant_id,
            visual_id=resolve_visual_id(
                index, row.visual_id_type, row.visual_id_color, row.visual_id_number
            ),
            breed_primary=breeds.breed_primary,
            breed_secondary=breeds.breed_secondary,
            sex=row.sex or BirdSex.UNKNOWN.value,
            hatch_date=hatch_date,
            sire_id=pair.sire_id,
            dam_id=pair.dam_id,
            status=BirdStatus.ALIVE.value,
            notes=row.notes,
        )
        result.created.append(await uow.birds.add(bird))

    if not result.created:
        raise ValidationError("No offspring could be created.", details=result.errors)
    await uow.commit()
    logger.info(
        "Offspring recorded: tenant=%s pair=%s created=%d failed_rows=%d",
        tenant_id,
        pair_id,
        len(result.created),
        len({e["index"] for e in result.errors}),
    )
    return result
