#!/usr/bin/env python3
"""
Script to grant a user access to a tenant (farm).

This script:
1. Creates the membership of the user in the tenant (or changes its role)
2. Generates the tenant id when none is given
3. Prints a short-lived access token pinned to that tenant, signed with the configured JWT settings

Usage:
  python scripts/create_tenant.py --user-id UUID [--tenant-id UUID] [--role ADMIN]
"""

import asyncio
import sys
from dataclasses import dataclass
from pathlib import Path
from uuid import UUID, uuid4

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config.settings import get_settings  # noqa: E402
from src.domain.value_objects.role import Role  # noqa: E402
from src.infrastructure.auth.jwt_service import JWTService  # noqa: E402
from src.infrastructure.db.orm.membership import MembershipORM  # noqa: E402
from src.infrastructure.db.session import create_engine, create_session_factory  # noqa: E402


@dataclass(slots=True)
class GrantedAccess:
    user_id: UUID
    tenant_id: UUID
    role: Role
    access_token: str


async def grant_membership(
    session_factory,
    jwt_service: JWTService,
    user_id: UUID,
    tenant_id: UUID | None = None,
    role: Role = Role.ADMIN,
) -> GrantedAccess:
    tenant_uuid = tenant_id or uuid4()
    async with session_factory() as session:
        # One role per user and tenant: merging replaces an existing role
        await session.merge(MembershipORM(user_id=user_id, tenant_id=tenant_uuid, role=role))
        await session.commit()
    token = jwt_service.create_access_token(subject=user_id, tenant_id=tenant_uuid)
    return GrantedAccess(user_id=user_id, tenant_id=tenant_uuid, role=role, access_token=token)


async def main(user_id: UUID, tenant_id: UUID | None, role: Role) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    jwt_service = JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        access_token_expires_minutes=settings.jwt_access_token_expires_minutes,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )
    try:
        granted = await grant_membership(
            create_session_factory(engine), jwt_service, user_id, tenant_id, role
        )
    finally:
        await engine.dispose()

    print("\n✅ Membership granted")
    print(f"   Tenant ID: {granted.tenant_id}")
    print(f"   User ID: {granted.user_id}")
    print(f"   Role: {granted.role.value}")
    print(f"\n🔑 Access token (expires in {settings.jwt_access_token_expires_minutes} min):")
    print(f"   {granted.access_token}")
    print(f"\n   Send it as 'Authorization: Bearer <token>' with '{settings.tenant_header}'")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Grant a user a role in a tenant",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # New farm, caller becomes its admin
  python scripts/create_tenant.py --user-id 12345678-1234-5678-1234-567812345678

  # Add a worker to an existing farm
  python scripts/create_tenant.py --user-id <UUID> --tenant-id <UUID> --role WORKER
        """,
    )
    parser.add_argument("--user-id", required=True, help="Id of the user (token subject)")
    parser.add_argument("--tenant-id", help="Tenant ID (optional, auto-generated)")
    parser.add_argument(
        "--role", default=Role.ADMIN.value, choices=[r.value for r in Role], help="Role to grant"
    )

    args = parser.parse_args()

    try:
        user_uuid = UUID(args.user_id)
        tenant_uuid = UUID(args.tenant_id) if args.tenant_id else None
    except ValueError:
        print("❌ Error: --user-id and --tenant-id must be valid UUIDs")
        sys.exit(1)

    asyncio.run(main(user_uuid, tenant_uuid, Role(args.role)))
