from __future__ import annotations

from uuid import UUID, uuid4

from sqlalchemy import select

from src.infrastructure.db.orm.bird import BirdORM


def bird_payload(number: str, sex: str, **extra) -> dict:
    payload = {
        "visual_id_type": "leg_band",
        "visual_id_color": "red",
        "visual_id_number": number,
        "breed_primary": "Rhode Island Red",
        "sex": sex,
    }
    payload.update(extra)
    return payload


async def test_birds_crud_flow(app, client, auth_headers):
    admin = auth_headers("admin")
    manager = auth_headers("manager")
    worker = auth_headers("worker")

    sire = await client.post("/api/v1/birds/", json=bird_payload("1", "rooster"), headers=admin)
    assert sire.status_code == 201
    sire_id = sire.json()["id"]

    child = await client.post(
        "/api/v1/birds/",
        json=bird_payload("2", "hen", sire_id=sire_id, hatch_date="2024-04-02"),
        headers=manager,
    )
    assert child.status_code == 201
    created = child.json()
    assert created["sire_id"] == sire_id
    assert created["status"] == "alive"
    assert created["version"] == 1

    worker_create = await client.post(
        "/api/v1/birds/", json=bird_payload("3", "hen"), headers=worker
    )
    assert worker_create.status_code == 403

    listed = await client.get(
        "/api/v1/birds/", params={"parent_id": sire_id}, headers=worker
    )
    assert listed.status_code == 200
    body = listed.json()
    assert body["total"] == 1
    assert body["items"][0]["id"] == created["id"]

    cleared = await client.patch(
        f"/api/v1/birds/{created['id']}",
        json={"version": 1, "sire_id": None, "status": "sold"},
        headers=manager,
    )
    assert cleared.status_code == 200
    updated = cleared.json()
    assert updated["sire_id"] is None
    assert updated["status"] == "sold"
    assert updated["status_date"] is not None
    assert updated["version"] == 2

    stale = await client.patch(
        f"/api/v1/birds/{created['id']}",
        json={"version": 1, "notes": "late"},
        headers=manager,
    )
    assert stale.status_code == 409

    manager_delete = await client.delete(f"/api/v1/birds/{sire_id}", headers=manager)
    assert manager_delete.status_code == 403

    admin_delete = await client.delete(f"/api/v1/birds/{sire_id}", headers=admin)
    assert admin_delete.status_code == 204

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        result = await session.execute(select(BirdORM).where(BirdORM.id == UUID(sire_id)))
        assert result.scalar_one().deleted_at is not None

    missing = await client.get(f"/api/v1/birds/{sire_id}", headers=admin)
    assert missing.status_code == 404
    assert missing.json()["code"] == "not_found"


async def test_bird_parent_must_belong_to_tenant(client, auth_headers):
    admin = auth_headers("admin")

    response = await client.post(
        "/api/v1/birds/", json=bird_payload("9", "hen", dam_id=str(uuid4())), headers=admin
    )

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "validation_error"
    assert body["details"] == [{"path": "dam_id"}]


async def test_bird_rejects_unknown_fields_and_choices(client, auth_headers):
    admin = auth_headers("admin")

    extra = await client.post(
        "/api/v1/birds/", json=bird_payload("1", "hen", color="brown"), headers=admin
    )
    assert extra.status_code == 422

    bad_sex = await client.post("/api/v1/birds/", json=bird_payload("1", "capon"), headers=admin)
    assert bad_sex.status_code == 422
    assert bad_sex.json()["details"] == [{"path": "sex"}]


async def test_lineage_endpoint(client, auth_headers):
    admin = auth_headers("admin")

    async def create(number: str, sex: str, **extra) -> str:
        response = await client.post(
            "/api/v1/birds/", json=bird_payload(number, sex, **extra), headers=admin
        )
        assert response.status_code == 201
        return response.json()["id"]

    grandsire = await create("10", "rooster")
    sire = await create("11", "rooster", sire_id=grandsire)
    dam = await create("12", "hen")
    bird = await create("13", "hen", sire_id=sire, dam_id=dam)

    response = await client.get(f"/api/v1/birds/{bird}/lineage", headers=admin)

    assert response.status_code == 200
    lineage = response.json()
    assert lineage["bird"]["id"] == bird
    assert lineage["sire"]["bird"]["id"] == sire
    assert lineage["sire"]["sire"]["id"] == grandsire
    assert lineage["sire"]["dam"] is None
    assert lineage["dam"]["bird"]["id"] == dam
    assert lineage["dam"]["sire"] is None


async def test_requests_without_membership_are_rejected(client, auth_headers):
    foreign_tenant = auth_headers("admin", uuid4())
    response = await client.get("/api/v1/birds/", headers=foreign_tenant)
    assert response.status_code == 403

    anonymous = await client.get("/api/v1/birds/")
    assert anonymous.status_code == 401

    health = await client.get("/api/v1/health")
    assert health.json() == {"status": "ok"}
