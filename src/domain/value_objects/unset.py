from __future__ import annotations

from enum import Enum
from typing import Final


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


# A field the caller did not send, as opposed to one explicitly sent as None
UNSET: Final = _Unset.UNSET
