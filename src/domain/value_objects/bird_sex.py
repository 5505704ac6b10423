from __future__ import annotations

from enum import Enum


class BirdSex(str, Enum):
    ROOSTER = "rooster"
    HEN = "hen"
    UNKNOWN = "unknown"  # not yet sexed; accepted in either breeding slot

    def can_sire(self) -> bool:
        return self in {BirdSex.ROOSTER, BirdSex.UNKNOWN}

    def can_dam(self) -> bool:
        return self in {BirdSex.HEN, BirdSex.UNKNOWN}
