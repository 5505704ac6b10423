from __future__ import annotations

from collections.abc import Collection
from typing import Protocol
from uuid import UUID

from src.domain.models.ancestry import AncestryRow


class AncestryStore(Protocol):
    async def fetch_ancestry(
        self, tenant_id: UUID, ids: Collection[UUID]
    ) -> list[AncestryRow]:
        """Return rows for the live (not deleted) birds of ``tenant_id`` among ``ids``.

        One call is one round trip. Ids that do not resolve inside the tenant are
        simply absent from the result.
        """
        ...
