from __future__ import annotations

from uuid import uuid4

from scripts.create_tenant import grant_membership
from src.domain.value_objects.role import Role


async def test_granted_token_opens_the_api(app, client, jwt_service):
    user_id = uuid4()

    granted = await grant_membership(app.state.session_factory, jwt_service, user_id)

    assert granted.role is Role.ADMIN
    headers = {
        "Authorization": f"Bearer {granted.access_token}",
        "X-Tenant-ID": str(granted.tenant_id),
    }
    response = await client.get("/api/v1/birds/", headers=headers)
    assert response.status_code == 200
    assert response.json()["total"] == 0


async def test_regranting_changes_the_role(app, client, jwt_service):
    user_id = uuid4()
    first = await grant_membership(app.state.session_factory, jwt_service, user_id)
    second = await grant_membership(
        app.state.session_factory, jwt_service, user_id, first.tenant_id, Role.VIEWER
    )

    headers = {
        "Authorization": f"Bearer {second.access_token}",
        "X-Tenant-ID": str(first.tenant_id),
    }
    response = await client.post(
        "/api/v1/birds/",
        json={
            "visual_id_type": "zip_tie",
            "visual_id_color": "green",
            "visual_id_number": "5",
            "breed_primary": "Silkie",
            "sex": "hen",
        },
        headers=headers,
    )
    assert response.status_code == 403


async def test_pinned_token_cannot_open_another_farm(app, client, jwt_service):
    user_id = uuid4()
    farm_a = await grant_membership(app.state.session_factory, jwt_service, user_id)
    farm_b = await grant_membership(app.state.session_factory, jwt_service, user_id, uuid4())

    replayed = await client.get(
        "/api/v1/birds/",
        headers={
            "Authorization": f"Bearer {farm_a.access_token}",
            "X-Tenant-ID": str(farm_b.tenant_id),
        },
    )
    assert replayed.status_code == 403
    assert replayed.json()["message"] == "Token not valid for this tenant"

    own = await client.get(
        "/api/v1/birds/",
        headers={
            "Authorization": f"Bearer {farm_b.access_token}",
            "X-Tenant-ID": str(farm_b.tenant_id),
        },
    )
    assert own.status_code == 200


async def test_token_with_malformed_tenant_claim_is_rejected(client, jwt_service, tenant_id):
    token = jwt_service.create_access_token(subject=uuid4(), extra_claims={"tid": "farm-1"})

    response = await client.get(
        "/api/v1/birds/",
        headers={"Authorization": f"Bearer {token}", "X-Tenant-ID": str(tenant_id)},
    )
    assert response.status_code == 401
