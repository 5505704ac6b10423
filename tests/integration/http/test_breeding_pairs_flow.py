from __future__ import annotations

from uuid import uuid4


async def create_bird(client, headers, number: str, sex: str, **extra) -> str:
    payload = {
        "visual_id_type": "leg_band",
        "visual_id_color": "blue",
        "visual_id_number": number,
        "breed_primary": extra.pop("breed_primary", "Rhode Island Red"),
        "sex": sex,
        **extra,
    }
    response = await client.post("/api/v1/birds/", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]


async def test_pair_risk_preview_and_pair_creation(client, auth_headers):
    admin = auth_headers("admin")
    father = await create_bird(client, admin, "1", "rooster")
    mother = await create_bird(client, admin, "2", "hen")
    sire = await create_bird(client, admin, "3", "rooster", sire_id=father, dam_id=mother)
    dam = await create_bird(client, admin, "4", "hen", sire_id=father, dam_id=mother)

    preview = await client.get(
        "/api/v1/breeding-pairs/pair-risk",
        params={"sire_id": sire, "dam_id": dam},
        headers=auth_headers("viewer"),
    )
    assert preview.status_code == 200
    risk = preview.json()
    assert [w["code"] for w in risk["warnings"]] == ["full_siblings"]
    assert risk["meta"]["found"] is True
    assert sorted(risk["meta"]["shared_parent_ids"]) == sorted([father, mother])
    assert risk["meta"]["query_count"] == 2

    created = await client.post(
        "/api/v1/breeding-pairs",
        json={"sire_id": sire, "dam_id": dam, "start_date": "2024-03-01"},
        headers=auth_headers("manager"),
    )
    assert created.status_code == 201
    pair = created.json()
    assert pair["sire_id"] == sire
    assert pair["end_date"] is None
    assert [w["code"] for w in pair["risk"]["warnings"]] == ["full_siblings"]

    fetched = await client.get(f"/api/v1/breeding-pairs/{pair['id']}", headers=admin)
    assert fetched.status_code == 200
    assert fetched.json()["version"] == 1


async def test_pair_risk_for_unknown_bird_is_not_found(client, auth_headers):
    admin = auth_headers("admin")
    sire = await create_bird(client, admin, "1", "rooster")

    response = await client.get(
        "/api/v1/breeding-pairs/pair-risk",
        params={"sire_id": sire, "dam_id": str(uuid4())},
        headers=admin,
    )

    assert response.status_code == 404


async def test_pair_creation_rejections(client, auth_headers):
    admin = auth_headers("admin")
    hen = await create_bird(client, admin, "1", "hen")
    other_hen = await create_bird(client, admin, "2", "hen")
    unsexed = await create_bird(client, admin, "3", "unknown")

    wrong_slot = await client.post(
        "/api/v1/breeding-pairs",
        json={"sire_id": hen, "dam_id": other_hen, "start_date": "2024-03-01"},
        headers=admin,
    )
    assert wrong_slot.status_code == 422
    assert wrong_slot.json()["details"][0] == {
        "path": "sire_id",
        "code": "role_not_allowed",
        "message": "Sire must be rooster or unknown.",
    }

    same_bird = await client.post(
        "/api/v1/breeding-pairs",
        json={"sire_id": unsexed, "dam_id": unsexed, "start_date": "2024-03-01"},
        headers=admin,
    )
    assert same_bird.status_code == 422
    assert same_bird.json()["details"][0]["code"] == "same_bird"

    inverted = await client.post(
        "/api/v1/breeding-pairs",
        json={
            "sire_id": unsexed,
            "dam_id": hen,
            "start_date": "2024-03-01",
            "end_date": "2024-02-01",
        },
        headers=admin,
    )
    assert inverted.status_code == 422

    worker = await client.post(
        "/api/v1/breeding-pairs",
        json={"sire_id": unsexed, "dam_id": hen, "start_date": "2024-03-01"},
        headers=auth_headers("worker"),
    )
    assert worker.status_code == 403


async def test_pair_update_and_list(client, auth_headers):
    admin = auth_headers("admin")
    sire = await create_bird(client, admin, "1", "rooster")
    dam = await create_bird(client, admin, "2", "hen")
    rooster = await create_bird(client, admin, "3", "rooster")

    created = await client.post(
        "/api/v1/breeding-pairs",
        json={"sire_id": sire, "dam_id": dam, "start_date": "2024-03-01"},
        headers=admin,
    )
    pair_id = created.json()["id"]

    closed = await client.patch(
        f"/api/v1/breeding-pairs/{pair_id}",
        json={"version": 1, "end_date": "2024-05-31", "notes": "season over"},
        headers=admin,
    )
    assert closed.status_code == 200
    assert closed.json()["end_date"] == "2024-05-31"
    assert closed.json()["version"] == 2

    bad_dam = await client.patch(
        f"/api/v1/breeding-pairs/{pair_id}",
        json={"version": 2, "dam_id": rooster},
        headers=admin,
    )
    assert bad_dam.status_code == 422
    assert bad_dam.json()["details"][0]["path"] == "dam_id"

    in_range = await client.get(
        "/api/v1/breeding-pairs",
        params={"from": "2024-05-01", "to": "2024-06-30", "sire_id": sire},
        headers=admin,
    )
    assert in_range.status_code == 200
    assert [p["id"] for p in in_range.json()["items"]] == [pair_id]

    after = await client.get(
        "/api/v1/breeding-pairs", params={"from": "2024-07-01"}, headers=admin
    )
    assert after.json()["items"] == []

    inverted = await client.get(
        "/api/v1/breeding-pairs",
        params={"from": "2024-07-01", "to": "2024-06-01"},
        headers=admin,
    )
    assert inverted.status_code == 422


async def test_offspring_batch(client, auth_headers):
    admin = auth_headers("admin")
    sire = await create_bird(client, admin, "1", "rooster", breed_primary="BreedA")
    dam = await create_bird(client, admin, "2", "hen", breed_primary="BreedB")
    created = await client.post(
        "/api/v1/breeding-pairs",
        json={"sire_id": sire, "dam_id": dam, "start_date": "2024-03-01"},
        headers=admin,
    )
    pair_id = created.json()["id"]

    response = await client.post(
        f"/api/v1/breeding-pairs/{pair_id}/offspring",
        json={
            "offspring": [
                {"hatch_date": "2024-04-02"},
                {"hatch_date": "yesterday"},
                {"visual_id_number": "77", "breed_primary": "Silkie", "breed_secondary": None},
            ]
        },
        headers=auth_headers("worker"),
    )

    assert response.status_code == 201
    body = response.json()
    assert [b["visual_id_number"] for b in body["created"]] == ["UNASSIGNED-001", "77"]
    first, third = body["created"]
    assert (first["visual_id_type"], first["visual_id_color"]) == ("other", "unassigned")
    assert (first["breed_primary"], first["breed_secondary"]) == ("BreedA", "BreedB")
    assert (third["breed_primary"], third["breed_secondary"]) == ("Silkie", None)
    assert body["errors"] == [
        {
            "index": 1,
            "path": "offspring.1.hatch_date",
            "message": "Hatch date: must be a valid date.",
        }
    ]

    children = await client.get(
        "/api/v1/birds/", params={"sire_id": sire, "dam_id": dam}, headers=admin
    )
    assert children.json()["total"] == 2

    viewer = await client.post(
        f"/api/v1/breeding-pairs/{pair_id}/offspring",
        json={"offspring": [{}]},
        headers=auth_headers("viewer"),
    )
    assert viewer.status_code == 403

    too_many = await client.post(
        f"/api/v1/breeding-pairs/{pair_id}/offspring",
        json={"offspring": [{} for _ in range(6)]},
        headers=admin,
    )
    assert too_many.status_code == 422
