from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from src.domain.models.ancestry import AncestryRow, index_rows, unique_ids
from src.domain.ports.ancestry_store import AncestryStore
from src.domain.value_objects.bird_sex import BirdSex


class RejectionReason(str, Enum):
    NOT_FOUND = "not_found"
    ROLE_NOT_ALLOWED = "role_not_allowed"
    SAME_BIRD = "same_bird"


@dataclass(slots=True, frozen=True)
class PairingRejection:
    field: str  # "sire_id" | "dam_id"
    reason: RejectionReason
    message: str

    def to_detail(self) -> dict[str, str]:
        return {"path": self.field, "code": self.reason.value, "message": self.message}


def _sex_of(row: AncestryRow) -> BirdSex | None:
    try:
        return BirdSex(row.sex) if row.sex is not None else None
    except ValueError:
        return None


def check_sire_slot(row: AncestryRow | None) -> PairingRejection | None:
    if row is None:
        return PairingRejection(
            "sire_id", RejectionReason.NOT_FOUND, "Invalid sire_id (not found in organization)."
        )
    sex = _sex_of(row)
    if sex is None or not sex.can_sire():
        return PairingRejection(
            "sire_id", RejectionReason.ROLE_NOT_ALLOWED, "Sire must be rooster or unknown."
        )
    return None


def check_dam_slot(row: AncestryRow | None) -> PairingRejection | None:
    if row is None:
        return PairingRejection(
            "dam_id", RejectionReason.NOT_FOUND, "Invalid dam_id (not found in organization)."
        )
    sex = _sex_of(row)
    if sex is None or not sex.can_dam():
        return PairingRejection(
            "dam_id", RejectionReason.ROLE_NOT_ALLOWED, "Dam must be hen or unknown."
        )
    return None


async def validate_pairing(
    store: AncestryStore,
    tenant_id: UUID,
    sire_id: UUID,
    dam_id: UUID,
    *,
    check_sire: bool = True,
    check_dam: bool = True,
) -> PairingRejection | None:
    """Hard preconditions for saving a pairing; ``None`` means the pair may be saved.

    ``check_sire``/``check_dam`` turn off the lookup of a slot that is not being
    changed (partial updates of an existing pair). Risk warnings are a separate,
    advisory concern, see :func:`src.domain.services.pair_risk.analyze_pair`.
    """
    wanted = unique_ids([sire_id if check_sire else None, dam_id if check_dam else None])
    rows = index_rows(await store.fetch_ancestry(tenant_id, wanted)) if wanted else {}

    if check_sire:
        rejection = check_sire_slot(rows.get(sire_id))
        if rejection:
            return rejection
    if check_dam:
        rejection = check_dam_slot(rows.get(dam_id))
        if rejection:
            return rejection
    if sire_id == dam_id:
        return PairingRejection(
            "dam_id", RejectionReason.SAME_BIRD, "Sire and dam must be different birds."
        )
    return None
