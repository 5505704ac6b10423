from __future__ import annotations

from enum import Enum


class BirdStatus(str, Enum):
    ALIVE = "alive"
    SOLD = "sold"
    DECEASED = "deceased"

    def requires_status_date(self) -> bool:
        return self in {BirdStatus.SOLD, BirdStatus.DECEASED}
