from __future__ import annotations

from dataclasses import dataclass

from src.domain.value_objects.unset import UNSET, _Unset
from src.domain.value_objects.visual_id import (
    PLACEHOLDER_COLOR,
    PLACEHOLDER_PREFIX,
    VisualId,
    VisualIdType,
)

MIXED_BREED = "Mixed"


def _clean(value: str | None) -> str | None:
    """Blank breed names count as unknown."""
    if value is None:
        return None
    return value.strip() or None


@dataclass(slots=True, frozen=True)
class OffspringBreeds:
    breed_primary: str
    breed_secondary: str | None


def default_breeds(
    sire_breed_primary: str | None,
    sire_breed_secondary: str | None,
    dam_breed_primary: str | None,
    dam_breed_secondary: str | None,
) -> OffspringBreeds:
    """Per-batch breed defaults for offspring of a sire and a dam.

    Two pure-bred parents of the same breed give that breed with no secondary.
    Any other combination is recorded as a cross: sire breed first (``Mixed`` when
    unknown) and the dam breed as secondary.
    """
    sire_breed_primary = _clean(sire_breed_primary)
    dam_breed_primary = _clean(dam_breed_primary)
    sire_breed_secondary = _clean(sire_breed_secondary)
    dam_breed_secondary = _clean(dam_breed_secondary)
    is_same_pure = (
        bool(sire_breed_primary)
        and sire_breed_primary == dam_breed_primary
        and not sire_breed_secondary
        and not dam_breed_secondary
    )
    if is_same_pure:
        return OffspringBreeds(breed_primary=sire_breed_primary, breed_secondary=None)
    return OffspringBreeds(
        breed_primary=sire_breed_primary or MIXED_BREED,
        breed_secondary=dam_breed_primary or None,
    )


def resolve_breeds(
    defaults: OffspringBreeds,
    breed_primary: str | None | _Unset = UNSET,
    breed_secondary: str | None | _Unset = UNSET,
) -> OffspringBreeds:
    primary = defaults.breed_primary
    if isinstance(breed_primary, str) and breed_primary.strip():
        primary = breed_primary.strip()
    # An explicit None keeps the offspring without a secondary breed
    secondary = defaults.breed_secondary if breed_secondary is UNSET else breed_secondary
    return OffspringBreeds(breed_primary=primary, breed_secondary=secondary)


def placeholder_visual_id(index: int) -> VisualId:
    """Stand-in marker for the ``index``-th (0-based) row of a batch."""
    return VisualId(
        type=VisualIdType.OTHER.value,
        color=PLACEHOLDER_COLOR,
        number=f"{PLACEHOLDER_PREFIX}{index + 1:03d}",
    )


def resolve_visual_id(
    index: int,
    visual_id_type: str | None = None,
    visual_id_color: str | None = None,
    visual_id_number: str | None = None,
) -> VisualId:
    placeholder = placeholder_visual_id(index)
    return VisualId(
        type=visual_id_type or placeholder.type,
        color=visual_id_color or placeholder.color,
        number=visual_id_number or placeholder.number,
    )
