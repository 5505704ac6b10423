"""Inbreeding risk between two candidate parents.

The analysis only looks at recorded ancestry two generations up and costs at
most two batched reads against the ancestry store: one for the pair itself and,
when any of them has a recorded parent, one for those parents.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import UUID

from src.domain.models.ancestry import AncestryRow, index_rows, unique_ids
from src.domain.ports.ancestry_store import AncestryStore

logger = logging.getLogger(__name__)


class PairWarningCode(str, Enum):
    PARENT_CHILD = "parent_child"
    FULL_SIBLINGS = "full_siblings"
    HALF_SIBLINGS = "half_siblings"
    SHARED_GRANDPARENT = "shared_grandparent"


SIRE_IS_PARENT_MESSAGE = (
    "High risk: the selected sire is a parent of the selected dam (parent-child pairing)."
)
DAM_IS_PARENT_MESSAGE = (
    "High risk: the selected dam is a parent of the selected sire (parent-child pairing)."
)
FULL_SIBLINGS_MESSAGE = "Risk: these birds are full siblings (share both parents)."
HALF_SIBLINGS_MESSAGE = "Risk: these birds are half siblings (share one parent)."
SHARED_GRANDPARENT_MESSAGE = "Risk: these birds share a grandparent (based on known lineage)."


@dataclass(slots=True, frozen=True)
class PairWarning:
    code: PairWarningCode
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.message}


@dataclass(slots=True)
class PairRiskResult:
    """Outcome of a pair analysis.

    ``found`` is False when either bird is not a live bird of the tenant. That
    means the risk could not be evaluated and must not be read as "no risk".
    """

    found: bool
    warnings: list[PairWarning] = field(default_factory=list)
    shared_parent_ids: list[UUID] = field(default_factory=list)
    shared_grandparent_ids: list[UUID] = field(default_factory=list)
    query_count: int = 0

    @property
    def codes(self) -> list[PairWarningCode]:
        return [w.code for w in self.warnings]

    def to_dict(self) -> dict[str, Any]:
        return {
            "warnings": [w.to_dict() for w in self.warnings],
            "meta": {
                "found": self.found,
                "shared_parent_ids": [str(i) for i in self.shared_parent_ids],
                "shared_grandparent_ids": [str(i) for i in self.shared_grandparent_ids],
                "query_count": self.query_count,
            },
        }


def parent_child_warning(
    sire_id: UUID, dam_id: UUID, sire: AncestryRow, dam: AncestryRow
) -> PairWarning | None:
    # Compares the input ids against the other bird's pointers, not derived sets
    if sire_id in (dam.sire_id, dam.dam_id):
        return PairWarning(PairWarningCode.PARENT_CHILD, SIRE_IS_PARENT_MESSAGE)
    if dam_id in (sire.sire_id, sire.dam_id):
        return PairWarning(PairWarningCode.PARENT_CHILD, DAM_IS_PARENT_MESSAGE)
    return None


def sibling_warning(sire: AncestryRow, dam: AncestryRow) -> PairWarning | None:
    same_sire = sire.sire_id is not None and sire.sire_id == dam.sire_id
    same_dam = sire.dam_id is not None and sire.dam_id == dam.dam_id
    if same_sire and same_dam:
        return PairWarning(PairWarningCode.FULL_SIBLINGS, FULL_SIBLINGS_MESSAGE)
    if same_sire or same_dam:
        return PairWarning(PairWarningCode.HALF_SIBLINGS, HALF_SIBLINGS_MESSAGE)
    return None


def grandparents_of(child: AncestryRow, parents: Mapping[UUID, AncestryRow]) -> set[UUID]:
    """Union of the parents' own sire/dam ids.

    A parent missing from ``parents`` (deleted, or never recorded) adds nothing.
    """
    out: set[UUID] = set()
    for parent_id in (child.sire_id, child.dam_id):
        if parent_id is None:
            continue
        parent = parents.get(parent_id)
        if parent is not None:
            out |= parent.parent_ids
    return out


async def analyze_pair(
    store: AncestryStore, tenant_id: UUID, sire_id: UUID, dam_id: UUID
) -> PairRiskResult:
    query_count = 1
    pair = index_rows(await store.fetch_ancestry(tenant_id, unique_ids([sire_id, dam_id])))
    sire = pair.get(sire_id)
    dam = pair.get(dam_id)
    if sire is None or dam is None:
        logger.debug(
            "Pair risk not evaluated, bird missing: tenant=%s sire=%s dam=%s",
            tenant_id,
            sire_id,
            dam_id,
        )
        return PairRiskResult(found=False, query_count=query_count)

    warnings: list[PairWarning] = []
    for warning in (
        parent_child_warning(sire_id, dam_id, sire, dam),
        sibling_warning(sire, dam),
    ):
        if warning is not None:
            warnings.append(warning)

    shared_grandparents: set[UUID] = set()
    parent_ids = unique_ids([sire.sire_id, sire.dam_id, dam.sire_id, dam.dam_id])
    if parent_ids:
        query_count += 1
        parents = index_rows(await store.fetch_ancestry(tenant_id, parent_ids))
        shared_grandparents = grandparents_of(sire, parents) & grandparents_of(dam, parents)
        if shared_grandparents:
            warnings.append(
                PairWarning(PairWarningCode.SHARED_GRANDPARENT, SHARED_GRANDPARENT_MESSAGE)
            )

    result = PairRiskResult(
        found=True,
        warnings=warnings,
        shared_parent_ids=sorted(sire.parent_ids & dam.parent_ids),
        shared_grandparent_ids=sorted(shared_grandparents),
        query_count=query_count,
    )
    logger.debug(
        "Pair risk evaluated: tenant=%s sire=%s dam=%s codes=%s queries=%d",
        tenant_id,
        sire_id,
        dam_id,
        [c.value for c in result.codes],
        query_count,
    )
    return result
