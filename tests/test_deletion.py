"""Tests for administrative deletes and what they take with them."""

from datetime import date

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from custody_ledger.core.errors import ConflictError, DependencyFailureError
from custody_ledger.db.models import (
    CourtAppearance,
    Fingerprint,
    Inmate,
    Movement,
    OfficerAttendance,
    Photo,
)
from custody_ledger.schemas.biometrics import FingerprintCreate, PhotoCreate
from custody_ledger.schemas.custody import CourtAppearanceCreate, MovementCreate
from custody_ledger.schemas.facilities import CourtCreate
from custody_ledger.schemas.records import ClockIn
from custody_ledger.services import (
    attendance_service,
    biometric_service,
    court_service,
    facility_service,
    inmate_service,
    movement_service,
    storage_service,
)


@pytest.fixture
def deleted_keys(monkeypatch) -> list[str]:
    keys: list[str] = []
    monkeypatch.setattr(storage_service, "delete_file", keys.append)
    return keys


def _count(db, model) -> int:
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def _capture(db, subject_type: str, subject_id, photo_key: str, fingerprint_key: str):
    subject = {"subject_type": subject_type, "id": subject_id}
    photo = biometric_service.add_photo(
        db,
        PhotoCreate(
            subject=subject, photo_type="mugshot_front", provider="upload", storage_key=photo_key
        ),
    )
    biometric_service.add_fingerprint(
        db,
        FingerprintCreate(
            subject=subject, finger="left_index", provider="internal", storage_key=fingerprint_key
        ),
    )
    db.commit()
    return photo


def test_delete_inmate_releases_biometrics_and_dependents(db, inmate, court, deleted_keys):
    _capture(db, "inmate", inmate.id, "photos/p1", "fingerprints/f1")
    movement_service.record_movement(
        db,
        MovementCreate(
            inmate_id=inmate.id,
            movement_type="hospital",
            departure_date=date(2024, 5, 2),
            reason="Referral",
        ),
    )
    court_service.schedule_appearance(
        db,
        CourtAppearanceCreate(
            inmate_id=inmate.id, court_id=court.id, scheduled_date=date(2024, 6, 1)
        ),
    )
    db.commit()

    inmate_service.delete_inmate(db, inmate.id)
    db.commit()

    assert sorted(deleted_keys) == ["fingerprints/f1", "photos/p1"]
    assert _count(db, Inmate) == 0
    assert _count(db, Photo) == 0
    assert _count(db, Fingerprint) == 0
    assert _count(db, Movement) == 0
    assert _count(db, CourtAppearance) == 0


def test_delete_inmate_storage_failure_keeps_everything(db, inmate, monkeypatch):
    _capture(db, "inmate", inmate.id, "photos/p1", "fingerprints/f1")

    def failing_delete(storage_key):
        raise DependencyFailureError(f"Failed to delete stored file {storage_key}")

    monkeypatch.setattr(storage_service, "delete_file", failing_delete)

    with pytest.raises(DependencyFailureError):
        inmate_service.delete_inmate(db, inmate.id)
    db.rollback()

    assert db.get(Inmate, inmate.id) is not None
    assert _count(db, Photo) == 1
    assert _count(db, Fingerprint) == 1


def test_delete_officer_releases_biometrics_and_attendance(
    db, officer, prison, inmate, deleted_keys
):
    _capture(db, "officer", officer.id, "photos/o1", "fingerprints/o1")
    inmate_photo = _capture(db, "inmate", inmate.id, "photos/i1", "fingerprints/i1")
    biometric_service.confirm_photo(db, inmate_photo.id, officer.id)
    attendance_service.clock_in(
        db,
        ClockIn(officer_id=officer.id, prison_id=prison.id, date=date(2024, 8, 1), shift="morning"),
    )
    db.commit()

    facility_service.delete_officer(db, officer.id)
    db.commit()
    db.expire_all()

    assert sorted(deleted_keys) == ["fingerprints/o1", "photos/o1"]
    assert _count(db, OfficerAttendance) == 0
    remaining = db.execute(select(Photo)).scalars().all()
    assert [p.storage_key for p in remaining] == ["photos/i1"]
    assert remaining[0].confirmed_by_id is None
    assert _count(db, Fingerprint) == 1


def test_delete_referenced_prison_conflicts(db, prison, inmate):
    with pytest.raises(ConflictError):
        facility_service.delete_prison(db, prison.id)
    assert facility_service.get_prison(db, prison.id) is not None


def test_delete_unreferenced_prison(db, other_prison):
    facility_service.delete_prison(db, other_prison.id)
    db.commit()
    assert facility_service.get_prison(db, other_prison.id) is None


def test_delete_referenced_court_and_offense_conflict(db, inmate, court, offense):
    court_service.schedule_appearance(
        db,
        CourtAppearanceCreate(
            inmate_id=inmate.id, court_id=court.id, scheduled_date=date(2024, 6, 1)
        ),
    )
    db.commit()

    with pytest.raises(ConflictError):
        facility_service.delete_court(db, court.id)
    with pytest.raises(ConflictError):
        facility_service.delete_offense(db, offense.id)

    spare = facility_service.create_court(db, CourtCreate(name="Mengo Chief Magistrates"))
    facility_service.delete_court(db, spare.id)
    db.commit()
    assert facility_service.get_court(db, spare.id) is None


@pytest.mark.asyncio
async def test_delete_referenced_prison_returns_409(client: AsyncClient, prison, inmate):
    response = await client.delete(f"/prisons/{prison.id}")
    assert response.status_code == 409

    response = await client.get(f"/prisons/{prison.id}")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_delete_inmate_endpoint_releases_storage(
    client: AsyncClient, db, inmate, deleted_keys
):
    _capture(db, "inmate", inmate.id, "photos/p1", "fingerprints/f1")

    response = await client.delete(f"/inmates/{inmate.id}")
    assert response.status_code == 204
    assert sorted(deleted_keys) == ["fingerprints/f1", "photos/p1"]

    response = await client.get(
        "/photos", params={"subject_type": "inmate", "subject_id": str(inmate.id)}
    )
    assert response.json() == []
