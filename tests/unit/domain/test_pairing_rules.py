from __future__ import annotations

from uuid import uuid4

import pytest

from src.domain.models.ancestry import AncestryRow
from src.domain.services.pairing_rules import (
    RejectionReason,
    check_dam_slot,
    check_sire_slot,
    validate_pairing,
)
from tests.unit.fakes import InMemoryBirds, make_bird

TENANT = uuid4()


@pytest.mark.asyncio
async def test_rooster_and_hen_are_accepted_in_one_fetch():
    sire = make_bird(TENANT, sex="rooster")
    dam = make_bird(TENANT, sex="hen")
    store = InMemoryBirds([sire, dam])

    assert await validate_pairing(store, TENANT, sire.id, dam.id) is None
    assert len(store.ancestry_calls) == 1


@pytest.mark.asyncio
async def test_unknown_sex_is_accepted_in_both_slots():
    sire = make_bird(TENANT, sex="unknown")
    dam = make_bird(TENANT, sex="unknown")
    store = InMemoryBirds([sire, dam])

    assert await validate_pairing(store, TENANT, sire.id, dam.id) is None


@pytest.mark.asyncio
async def test_hen_in_sire_slot_is_rejected():
    sire = make_bird(TENANT, sex="hen")
    dam = make_bird(TENANT, sex="hen")
    store = InMemoryBirds([sire, dam])

    rejection = await validate_pairing(store, TENANT, sire.id, dam.id)

    assert rejection is not None
    assert rejection.field == "sire_id"
    assert rejection.reason is RejectionReason.ROLE_NOT_ALLOWED
    assert rejection.message == "Sire must be rooster or unknown."


@pytest.mark.asyncio
async def test_rooster_in_dam_slot_is_rejected():
    sire = make_bird(TENANT, sex="rooster")
    dam = make_bird(TENANT, sex="rooster")
    store = InMemoryBirds([sire, dam])

    rejection = await validate_pairing(store, TENANT, sire.id, dam.id)

    assert rejection.field == "dam_id"
    assert rejection.reason is RejectionReason.ROLE_NOT_ALLOWED


@pytest.mark.asyncio
async def test_missing_sire_is_reported_before_dam():
    store = InMemoryBirds()

    rejection = await validate_pairing(store, TENANT, uuid4(), uuid4())

    assert rejection.field == "sire_id"
    assert rejection.reason is RejectionReason.NOT_FOUND
    assert rejection.to_detail() == {
        "path": "sire_id",
        "code": "not_found",
        "message": "Invalid sire_id (not found in organization).",
    }


@pytest.mark.asyncio
async def test_bird_of_another_tenant_is_not_found():
    sire = make_bird(TENANT, sex="rooster")
    dam = make_bird(uuid4(), sex="hen")
    store = InMemoryBirds([sire, dam])

    rejection = await validate_pairing(store, TENANT, sire.id, dam.id)

    assert rejection.field == "dam_id"
    assert rejection.reason is RejectionReason.NOT_FOUND


@pytest.mark.asyncio
async def test_same_bird_rejected_after_slot_checks():
    bird = make_bird(TENANT, sex="unknown")
    store = InMemoryBirds([bird])

    rejection = await validate_pairing(store, TENANT, bird.id, bird.id)

    assert rejection.field == "dam_id"
    assert rejection.reason is RejectionReason.SAME_BIRD
    assert store.ancestry_calls == [[bird.id]]


@pytest.mark.asyncio
async def test_unchecked_slots_are_not_fetched():
    sire = make_bird(TENANT, sex="rooster")
    store = InMemoryBirds([sire])

    assert await validate_pairing(store, TENANT, sire.id, uuid4(), check_dam=False) is None
    assert store.ancestry_calls == [[sire.id]]

    assert (
        await validate_pairing(
            store, TENANT, uuid4(), uuid4(), check_sire=False, check_dam=False
        )
        is None
    )
    assert len(store.ancestry_calls) == 1


def test_slot_checks_reject_unrecognised_sex():
    row = AncestryRow(id=uuid4(), sex="capon")
    assert check_sire_slot(row).reason is RejectionReason.ROLE_NOT_ALLOWED
    assert check_dam_slot(row).reason is RejectionReason.ROLE_NOT_ALLOWED
