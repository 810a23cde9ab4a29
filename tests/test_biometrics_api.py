"""API tests for photos and fingerprints."""

import uuid

import pytest
from httpx import AsyncClient

from custody_ledger.core.errors import DependencyFailureError
from custody_ledger.services import storage_service


def _inmate_subject(inmate) -> dict:
    return {"subject_type": "inmate", "id": str(inmate.id)}


@pytest.mark.asyncio
async def test_second_primary_photo_demotes_first(client: AsyncClient, inmate):
    response = await client.post(
        "/photos",
        json={
            "subject": _inmate_subject(inmate),
            "photo_type": "mugshot_front",
            "provider": "upload",
            "storage_key": "s1",
            "is_primary": True,
        },
    )
    assert response.status_code == 201
    first_id = response.json()["id"]
    assert response.json()["is_primary"] is True
    assert response.json()["is_confirmed"] is False

    response = await client.post(
        "/photos",
        json={
            "subject": _inmate_subject(inmate),
            "photo_type": "mugshot_side",
            "provider": "external_url",
            "external_url": "http://x/y.jpg",
            "is_primary": True,
        },
    )
    assert response.status_code == 201
    second_id = response.json()["id"]

    first = (await client.get(f"/photos/{first_id}")).json()
    second = (await client.get(f"/photos/{second_id}")).json()
    assert first["is_primary"] is False
    assert second["is_primary"] is True

    primary = await client.get(
        "/photos/primary", params={"subject_type": "inmate", "subject_id": str(inmate.id)}
    )
    assert primary.json()["id"] == second_id


@pytest.mark.asyncio
async def test_photo_subject_without_id_is_rejected(client: AsyncClient, inmate):
    response = await client.post(
        "/photos",
        json={
            "subject": {"subject_type": "officer"},
            "photo_type": "profile",
            "provider": "upload",
            "storage_key": "s1",
        },
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_photo_missing_provider_payload(client: AsyncClient, inmate):
    response = await client.post(
        "/photos",
        json={
            "subject": _inmate_subject(inmate),
            "photo_type": "mugshot_front",
            "provider": "external_url",
        },
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_photo_review_workflow(client: AsyncClient, inmate, officer):
    photo = (
        await client.post(
            "/photos",
            json={
                "subject": _inmate_subject(inmate),
                "photo_type": "mugshot_front",
                "provider": "upload",
                "base64_preview": "aGVsbG8=",
            },
        )
    ).json()

    queue = (await client.get("/photos/unconfirmed")).json()
    assert [p["id"] for p in queue] == [photo["id"]]

    response = await client.post(
        f"/photos/{photo['id']}/confirm", json={"confirmed_by_id": str(officer.id)}
    )
    assert response.status_code == 200
    assert response.json()["is_confirmed"] is True
    assert response.json()["confirmed_by_id"] == str(officer.id)

    assert (await client.get("/photos/unconfirmed")).json() == []

    response = await client.post(f"/photos/{photo['id']}/reject", json={})
    assert response.json()["is_confirmed"] is False
    assert response.json()["confirm_notes"] == "Rejected"


@pytest.mark.asyncio
async def test_delete_photo_releases_storage(client: AsyncClient, inmate, monkeypatch):
    deleted: list[str] = []
    monkeypatch.setattr(storage_service, "delete_file", deleted.append)

    photo = (
        await client.post(
            "/photos",
            json={
                "subject": _inmate_subject(inmate),
                "photo_type": "mugshot_front",
                "provider": "internal",
                "storage_key": "photos/abc",
            },
        )
    ).json()

    response = await client.delete(f"/photos/{photo['id']}")
    assert response.status_code == 204
    assert deleted == ["photos/abc"]

    response = await client.get(f"/photos/{photo['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_photo_storage_failure_returns_502(client: AsyncClient, inmate, monkeypatch):
    def failing_delete(storage_key):
        raise DependencyFailureError("Failed to delete stored file")

    monkeypatch.setattr(storage_service, "delete_file", failing_delete)

    photo = (
        await client.post(
            "/photos",
            json={
                "subject": _inmate_subject(inmate),
                "photo_type": "mugshot_front",
                "provider": "internal",
                "storage_key": "photos/abc",
            },
        )
    ).json()

    response = await client.delete(f"/photos/{photo['id']}")
    assert response.status_code == 502

    response = await client.get(f"/photos/{photo['id']}")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_fingerprint_recapture_via_api(client: AsyncClient, officer, monkeypatch):
    deleted: list[str] = []
    monkeypatch.setattr(storage_service, "delete_file", deleted.append)
    subject = {"subject_type": "officer", "id": str(officer.id)}

    first = (
        await client.post(
            "/fingerprints",
            json={
                "subject": subject,
                "finger": "left_index",
                "provider": "internal",
                "storage_key": "fingerprints/A",
            },
        )
    ).json()
    await client.post(
        f"/fingerprints/{first['id']}/confirm", json={"confirmed_by_id": str(officer.id)}
    )

    response = await client.post(
        "/fingerprints",
        json={
            "subject": subject,
            "finger": "left_index",
            "provider": "internal",
            "storage_key": "fingerprints/B",
        },
    )
    assert response.status_code == 201
    second = response.json()
    assert second["id"] == first["id"]
    assert second["storage_key"] == "fingerprints/B"
    assert second["is_confirmed"] is False
    assert deleted == ["fingerprints/A"]

    listed = (
        await client.get(
            "/fingerprints", params={"subject_type": "officer", "subject_id": str(officer.id)}
        )
    ).json()
    assert len(listed) == 1

    by_finger = await client.get(
        "/fingerprints/by-finger",
        params={"subject_type": "officer", "subject_id": str(officer.id), "finger": "left_index"},
    )
    assert by_finger.json()["id"] == first["id"]


@pytest.mark.asyncio
async def test_confirm_with_unknown_officer(client: AsyncClient, inmate):
    fingerprint = (
        await client.post(
            "/fingerprints",
            json={
                "subject": _inmate_subject(inmate),
                "finger": "right_thumb",
                "provider": "external",
                "template_data": "Rk1SACAyMAA=",
            },
        )
    ).json()

    response = await client.post(
        f"/fingerprints/{fingerprint['id']}/confirm",
        json={"confirmed_by_id": str(uuid.uuid4())},
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_upload_url_then_local_upload(client: AsyncClient, local_storage):
    response = await client.post("/photos/upload-url")
    assert response.status_code == 200
    body = response.json()
    assert body["storage_key"].startswith("photos/")
    assert body["upload_url"] == f"/storage/local/{body['storage_key']}"

    response = await client.put(body["upload_url"], content=b"\xff\xd8jpeg-bytes")
    assert response.status_code == 204

    response = await client.get(body["upload_url"])
    assert response.status_code == 200
    assert response.content == b"\xff\xd8jpeg-bytes"


@pytest.mark.asyncio
async def test_officer_detail_counts(client: AsyncClient, officer, prison):
    await client.post(
        "/photos",
        json={
            "subject": {"subject_type": "officer", "id": str(officer.id)},
            "photo_type": "profile",
            "provider": "upload",
            "storage_key": "photos/o1",
            "is_primary": True,
        },
    )

    detail = (await client.get(f"/officers/{officer.id}/detail")).json()
    assert detail["photo_count"] == 1
    assert detail["primary_photo"]["storage_key"] == "photos/o1"
    assert detail["fingerprint_count"] == 0

    summaries = (await client.get(f"/prisons/{prison.id}/officers")).json()
    assert summaries[0]["photo_count"] == 1
