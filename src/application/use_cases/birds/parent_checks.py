from __future__ import annotations

from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.ancestry import index_rows, unique_ids
from src.domain.value_objects.bird_sex import BirdSex
from src.domain.value_objects.bird_status import BirdStatus
from src.domain.value_objects.visual_id import PLACEHOLDER_PREFIX, VisualIdType


async def ensure_parents_in_tenant(
    uow: UnitOfWork,
    tenant_id: UUID,
    sire_id: UUID | None,
    dam_id: UUID | None,
) -> None:
    """Recorded parents must be live birds of the same tenant."""
    wanted = unique_ids([sire_id, dam_id])
    if not wanted:
        return
    found = index_rows(await uow.birds.fetch_ancestry(tenant_id, wanted))
    for field_name, parent_id in (("sire_id", sire_id), ("dam_id", dam_id)):
        if parent_id is not None and parent_id not in found:
            raise ValidationError(
                f"Invalid {field_name} (not found in organization).",
                details=[{"path": field_name}],
            )


def ensure_choice(field_name: str, value: str | None, choices: type) -> None:
    if value is None:
        return
    allowed = {c.value for c in choices}
    if value not in allowed:
        raise ValidationError(
            f"Invalid {field_name}. Must be one of: {', '.join(sorted(allowed))}",
            details=[{"path": field_name}],
        )


def ensure_bird_choices(
    *, sex: str | None = None, status: str | None = None, visual_id_type: str | None = None
) -> None:
    ensure_choice("sex", sex, BirdSex)
    ensure_choice("status", status, BirdStatus)
    ensure_choice("visual_id_type", visual_id_type, VisualIdType)


def clean_breed_primary(value: str, path: str = "breed_primary") -> str:
    cleaned = value.strip()
    if not cleaned:
        raise ValidationError("breed_primary is required", details=[{"path": path}])
    return cleaned


def ensure_real_visual_id_number(value: str, path: str = "visual_id_number") -> None:
    # Placeholder numbers are reserved for offspring recorded without a band
    if value.strip().upper().startswith(PLACEHOLDER_PREFIX):
        raise ValidationError(
            f"visual_id_number cannot start with {PLACEHOLDER_PREFIX}", details=[{"path": path}]
        )
