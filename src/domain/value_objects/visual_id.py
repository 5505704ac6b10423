from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

PLACEHOLDER_COLOR = "unassigned"
PLACEHOLDER_PREFIX = "UNASSIGNED-"


class VisualIdType(str, Enum):
    ZIP_TIE = "zip_tie"
    LEG_BAND = "leg_band"
    METAL_BAND = "metal_band"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class VisualId:
    """Field-visible marker of a bird: band/tie type, its color and number."""

    type: str
    color: str
    number: str

    @property
    def is_placeholder(self) -> bool:
        return self.number.startswith(PLACEHOLDER_PREFIX)
