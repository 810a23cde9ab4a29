"""API tests for movements, court appearances and inmate status."""

import uuid

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_court_trip_then_conviction(client: AsyncClient, inmate, court):
    inmate_id = str(inmate.id)

    response = await client.post(
        "/movements",
        json={
            "inmate_id": inmate_id,
            "movement_type": "court",
            "departure_date": "2024-05-02",
            "reason": "Hearing at Buganda Road",
        },
    )
    assert response.status_code == 201
    movement = response.json()
    assert movement["from_prison_id"] == str(inmate.prison_id)

    response = await client.get(f"/inmates/{inmate_id}")
    assert response.json()["status"] == "at_court"

    response = await client.post(
        "/court-appearances",
        json={"inmate_id": inmate_id, "court_id": str(court.id), "scheduled_date": "2024-05-02"},
    )
    assert response.status_code == 201
    appearance_id = response.json()["id"]

    response = await client.post(
        f"/court-appearances/{appearance_id}/outcome", json={"outcome": "convicted"}
    )
    assert response.status_code == 200
    assert response.json()["outcome"] == "convicted"

    response = await client.get(f"/inmates/{inmate_id}")
    assert response.json()["status"] == "convict"


@pytest.mark.asyncio
async def test_return_does_not_revert_status(client: AsyncClient, inmate):
    response = await client.post(
        "/movements",
        json={
            "inmate_id": str(inmate.id),
            "movement_type": "hospital",
            "departure_date": "2024-05-02",
            "destination": "Mulago",
            "reason": "Referral",
        },
    )
    movement_id = response.json()["id"]

    response = await client.get("/movements/open")
    assert [m["id"] for m in response.json()] == [movement_id]

    response = await client.post(
        f"/movements/{movement_id}/return", json={"return_date": "2024-05-04"}
    )
    assert response.status_code == 200
    assert response.json()["return_date"] == "2024-05-04"

    response = await client.get("/movements/open")
    assert response.json() == []

    response = await client.get(f"/inmates/{inmate.id}")
    assert response.json()["status"] == "remand"


@pytest.mark.asyncio
async def test_transfer_moves_inmate(client: AsyncClient, inmate, other_prison):
    response = await client.post(
        "/movements",
        json={
            "inmate_id": str(inmate.id),
            "movement_type": "transfer",
            "to_prison_id": str(other_prison.id),
            "departure_date": "2024-06-01",
            "reason": "Decongestion",
        },
    )
    assert response.status_code == 201

    body = (await client.get(f"/inmates/{inmate.id}")).json()
    assert body["status"] == "transferred"
    assert body["prison_id"] == str(other_prison.id)


@pytest.mark.asyncio
async def test_transfer_without_destination_is_rejected(client: AsyncClient, inmate):
    response = await client.post(
        "/movements",
        json={
            "inmate_id": str(inmate.id),
            "movement_type": "transfer",
            "departure_date": "2024-06-01",
            "reason": "Decongestion",
        },
    )
    assert response.status_code == 400

    body = (await client.get(f"/inmates/{inmate.id}")).json()
    assert body["status"] == "remand"


@pytest.mark.asyncio
async def test_movement_for_missing_inmate(client: AsyncClient, prison):
    response = await client.post(
        "/movements",
        json={
            "inmate_id": str(uuid.uuid4()),
            "movement_type": "court",
            "departure_date": "2024-06-01",
            "reason": "Hearing",
        },
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_scheduling_sets_next_court_date(client: AsyncClient, inmate, court):
    await client.post(
        "/court-appearances",
        json={"inmate_id": str(inmate.id), "court_id": str(court.id), "scheduled_date": "2030-01-15"},
    )

    body = (await client.get(f"/inmates/{inmate.id}")).json()
    assert body["next_court_date"] == "2030-01-15"

    upcoming = (await client.get("/court-appearances/upcoming?from_date=2030-01-01")).json()
    assert len(upcoming) == 1


@pytest.mark.asyncio
async def test_escaped_inmate_stays_escaped(client: AsyncClient, inmate, court):
    response = await client.post(f"/inmates/{inmate.id}/status", json={"status": "escaped"})
    assert response.json()["status"] == "escaped"

    appearance = (
        await client.post(
            "/court-appearances",
            json={"inmate_id": str(inmate.id), "court_id": str(court.id), "scheduled_date": "2024-05-02"},
        )
    ).json()
    await client.post(
        f"/court-appearances/{appearance['id']}/outcome",
        json={"outcome": "acquitted", "next_date": "2024-06-02"},
    )

    body = (await client.get(f"/inmates/{inmate.id}")).json()
    assert body["status"] == "escaped"
    assert body["next_court_date"] == "2024-06-02"


@pytest.mark.asyncio
async def test_release_endpoint(client: AsyncClient, inmate):
    response = await client.post(
        f"/inmates/{inmate.id}/release",
        json={"release_date": "2025-01-10", "reason": "served"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "released"
    assert body["release_reason"] == "served"
    assert body["actual_release_date"] == "2025-01-10"


@pytest.mark.asyncio
async def test_release_with_unknown_reason_is_rejected(client: AsyncClient, inmate):
    response = await client.post(
        f"/inmates/{inmate.id}/release",
        json={"release_date": "2025-01-10", "reason": "escaped"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_duplicate_prison_number_returns_conflict(
    client: AsyncClient, inmate, prison, offense
):
    response = await client.post(
        "/inmates",
        json={
            "first_name": "Peter",
            "last_name": "Okot",
            "prison_number": "LUZ/2024/001",
            "dob": "1985-04-04",
            "gender": "male",
            "inmate_type": "remand",
            "prison_id": str(prison.id),
            "case_number": "CR-9/2024",
            "offense_id": str(offense.id),
            "admission_date": "2024-04-01",
        },
    )
    assert response.status_code == 409

    response = await client.get("/inmates/lookup", params={"prison_number": "LUZ/2024/001"})
    assert response.status_code == 200
    assert response.json()["first_name"] == "John"


@pytest.mark.asyncio
async def test_inmate_detail(client: AsyncClient, inmate, offense):
    response = await client.post(
        "/charges", json={"inmate_id": str(inmate.id), "offense_id": str(offense.id), "is_primary": True}
    )
    assert response.status_code == 201
    assert response.json()["status"] == "pending"

    response = await client.get(f"/inmates/{inmate.id}/detail")
    assert response.status_code == 200
    body = response.json()
    assert body["prison"]["code"] == "LUZ"
    assert body["offense"]["name"] == "Theft"
    assert len(body["charges"]) == 1
    assert body["charges"][0]["offense"]["name"] == "Theft"
    assert body["photos"] == []
    assert body["primary_photo"] is None


@pytest.mark.asyncio
async def test_missing_inmate_is_404(client: AsyncClient, db):
    response = await client.get(f"/inmates/{uuid.uuid4()}")
    assert response.status_code == 404

    response = await client.get(f"/inmates/{uuid.uuid4()}/detail")
    assert response.status_code == 404
