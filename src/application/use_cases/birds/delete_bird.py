from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.role import Role


def ensure_can_delete(role: Role) -> None:
    if not role.can_delete():
        raise PermissionDenied("Role not allowed to delete birds")


async def execute(uow: UnitOfWork, tenant_id: UUID, role: Role, bird_id: UUID) -> None:
    """Tombstone the bird; from now on it is invisible to every ancestry lookup."""
    ensure_can_delete(role)
    deleted = await uow.birds.delete(tenant_id, bird_id)
    if not deleted:
        raise NotFound("Bird not found")
    await uow.commit()
