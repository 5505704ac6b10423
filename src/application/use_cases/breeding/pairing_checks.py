from __future__ import annotations

from datetime import date

from src.application.errors import ValidationError
from src.domain.services.pairing_rules import PairingRejection


def raise_for_rejection(rejection: PairingRejection | None) -> None:
    if rejection is None:
        return
    raise ValidationError(rejection.message, details=[rejection.to_detail()])


def ensure_date_range(start_date: date, end_date: date | None) -> None:
    if end_date is not None and end_date < start_date:
        raise ValidationError(
            "end_date cannot be before start_date", details=[{"path": "end_date"}]
        )
