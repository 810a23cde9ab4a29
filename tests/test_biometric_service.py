"""Tests for the photo and fingerprint ledger."""

import uuid
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from custody_ledger.core.errors import DependencyFailureError, InvalidInputError, NotFoundError
from custody_ledger.db.models import Fingerprint, Photo
from custody_ledger.schemas.biometrics import FingerprintCreate, PhotoCreate
from custody_ledger.services import biometric_service, storage_service
from custody_ledger.services.biometric_service import Subject


@pytest.fixture
def deleted_keys(monkeypatch) -> list[str]:
    """Record storage deletions instead of touching a backend."""
    keys: list[str] = []
    monkeypatch.setattr(storage_service, "delete_file", keys.append)
    return keys


def _photo(subject_id, subject_type="inmate", **overrides) -> PhotoCreate:
    payload = {
        "subject": {"subject_type": subject_type, "id": subject_id},
        "photo_type": "mugshot_front",
        "provider": "upload",
        "storage_key": f"photos/{uuid.uuid4()}",
    }
    payload.update(overrides)
    return PhotoCreate(**payload)


def _fingerprint(subject_id, finger="right_thumb", subject_type="inmate", **overrides):
    payload = {
        "subject": {"subject_type": subject_type, "id": subject_id},
        "finger": finger,
        "provider": "internal",
        "storage_key": f"fingerprints/{uuid.uuid4()}",
    }
    payload.update(overrides)
    return FingerprintCreate(**payload)


def _primary_count(db, subject: Subject) -> int:
    return sum(1 for p in biometric_service.list_photos(db, subject) if p.is_primary)


# =============================================================================
# Photos
# =============================================================================

def test_add_photo_defaults(db, inmate):
    photo = biometric_service.add_photo(db, _photo(inmate.id))

    assert photo.subject_type == "inmate"
    assert photo.inmate_id == inmate.id
    assert photo.officer_id is None
    assert photo.is_confirmed is False
    assert photo.is_primary is False
    assert photo.captured_at is not None


def test_add_photo_keeps_supplied_confirmation_and_time(db, inmate):
    captured = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)
    photo = biometric_service.add_photo(
        db, _photo(inmate.id, is_confirmed=True, captured_at=captured)
    )
    assert photo.is_confirmed is True
    assert photo.captured_at.replace(tzinfo=timezone.utc) == captured


def test_add_photo_for_officer(db, officer):
    photo = biometric_service.add_photo(db, _photo(officer.id, subject_type="officer"))
    assert photo.subject_type == "officer"
    assert photo.officer_id == officer.id
    assert photo.inmate_id is None


@pytest.mark.parametrize(
    "provider,fields",
    [
        ("internal", {"storage_key": None}),
        ("upload", {"storage_key": None, "base64_preview": None}),
        ("external_url", {"storage_key": None, "external_url": None}),
    ],
)
def test_add_photo_requires_provider_payload(db, inmate, provider, fields):
    with pytest.raises(InvalidInputError):
        biometric_service.add_photo(db, _photo(inmate.id, provider=provider, **fields))


def test_upload_photo_accepts_inline_preview(db, inmate):
    photo = biometric_service.add_photo(
        db, _photo(inmate.id, storage_key=None, base64_preview="aGVsbG8=")
    )
    assert photo.base64_preview == "aGVsbG8="


def test_add_photo_for_missing_subject(db, prison):
    with pytest.raises(NotFoundError):
        biometric_service.add_photo(db, _photo(uuid.uuid4()))


def test_subject_ref_requires_id():
    with pytest.raises(ValidationError):
        PhotoCreate(
            subject={"subject_type": "inmate"},
            photo_type="mugshot_front",
            provider="upload",
            storage_key="photos/a",
        )


def test_subject_without_id_is_invalid(db):
    with pytest.raises(InvalidInputError):
        biometric_service._validate_subject(db, Subject("officer", None))


def test_primary_photo_is_unique_per_subject(db, inmate):
    subject = Subject.inmate(inmate.id)
    first = biometric_service.add_photo(db, _photo(inmate.id, is_primary=True))
    second = biometric_service.add_photo(db, _photo(inmate.id, is_primary=True))
    third = biometric_service.add_photo(db, _photo(inmate.id))

    db.refresh(first)
    assert first.is_primary is False
    assert second.is_primary is True
    assert _primary_count(db, subject) == 1

    biometric_service.set_primary_photo(db, third.id)
    db.refresh(second)
    assert second.is_primary is False
    assert _primary_count(db, subject) == 1
    assert biometric_service.get_primary_photo(db, subject).id == third.id


def test_primary_is_scoped_to_subject(db, inmate, officer):
    inmate_photo = biometric_service.add_photo(db, _photo(inmate.id, is_primary=True))
    biometric_service.add_photo(db, _photo(officer.id, subject_type="officer", is_primary=True))

    db.refresh(inmate_photo)
    assert inmate_photo.is_primary is True


def test_primary_photo_falls_back_to_first(db, inmate):
    subject = Subject.inmate(inmate.id)
    assert biometric_service.get_primary_photo(db, subject) is None

    first = biometric_service.add_photo(
        db, _photo(inmate.id, captured_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    )
    biometric_service.add_photo(
        db, _photo(inmate.id, captured_at=datetime(2024, 2, 1, tzinfo=timezone.utc))
    )
    assert biometric_service.get_primary_photo(db, subject).id == first.id


def test_confirm_and_reject_photo(db, inmate, officer):
    photo = biometric_service.add_photo(db, _photo(inmate.id))
    assert photo in biometric_service.list_unconfirmed_photos(db)

    biometric_service.confirm_photo(db, photo.id, officer.id, "Matches ID")
    assert photo.is_confirmed is True
    assert photo.confirmed_by_id == officer.id
    assert photo.confirmed_at is not None
    assert photo not in biometric_service.list_unconfirmed_photos(db)

    biometric_service.reject_photo(db, photo.id)
    assert photo.is_confirmed is False
    assert photo.confirm_notes == "Rejected"


def test_confirm_requires_existing_officer(db, inmate):
    photo = biometric_service.add_photo(db, _photo(inmate.id))
    with pytest.raises(NotFoundError):
        biometric_service.confirm_photo(db, photo.id, uuid.uuid4())


def test_delete_photo_releases_storage_first(db, inmate, deleted_keys):
    photo = biometric_service.add_photo(db, _photo(inmate.id, storage_key="photos/s1"))
    photo_id = photo.id

    biometric_service.delete_photo(db, photo_id)

    assert deleted_keys == ["photos/s1"]
    assert db.get(Photo, photo_id) is None


def test_delete_external_photo_skips_storage(db, inmate, deleted_keys):
    photo = biometric_service.add_photo(
        db,
        _photo(inmate.id, provider="external_url", storage_key=None, external_url="http://x/y.jpg"),
    )
    biometric_service.delete_photo(db, photo.id)
    assert deleted_keys == []


def test_storage_failure_keeps_photo(db, inmate, monkeypatch):
    photo = biometric_service.add_photo(db, _photo(inmate.id, storage_key="photos/s1"))
    db.commit()

    def failing_delete(storage_key):
        raise DependencyFailureError(f"Failed to delete stored file {storage_key}")

    monkeypatch.setattr(storage_service, "delete_file", failing_delete)

    with pytest.raises(DependencyFailureError):
        biometric_service.delete_photo(db, photo.id)
    db.rollback()

    assert db.get(Photo, photo.id) is not None


def test_delete_missing_photo(db):
    with pytest.raises(NotFoundError):
        biometric_service.delete_photo(db, uuid.uuid4())


# =============================================================================
# Fingerprints
# =============================================================================

def test_add_fingerprint_creates_slot(db, inmate):
    fingerprint = biometric_service.add_fingerprint(db, _fingerprint(inmate.id, quality=80))
    assert fingerprint.is_confirmed is False
    assert fingerprint.finger == "right_thumb"
    assert fingerprint.quality == 80
    assert fingerprint.captured_at is not None


@pytest.mark.parametrize(
    "provider,fields",
    [
        ("internal", {"storage_key": None}),
        ("external", {"storage_key": None, "template_data": None, "provider_ref": None}),
    ],
)
def test_add_fingerprint_requires_provider_payload(db, inmate, provider, fields):
    with pytest.raises(InvalidInputError):
        biometric_service.add_fingerprint(
            db, _fingerprint(inmate.id, provider=provider, **fields)
        )


def test_external_fingerprint_with_provider_ref(db, officer):
    fingerprint = biometric_service.add_fingerprint(
        db,
        _fingerprint(
            officer.id,
            subject_type="officer",
            provider="external",
            storage_key=None,
            provider_name="SecuGen",
            provider_ref="sg-4411",
        ),
    )
    assert fingerprint.officer_id == officer.id
    assert fingerprint.provider_ref == "sg-4411"


def test_recapture_replaces_slot_and_resets_confirmation(db, inmate, officer, deleted_keys):
    first = biometric_service.add_fingerprint(
        db, _fingerprint(inmate.id, storage_key="fingerprints/A", quality=40)
    )
    biometric_service.confirm_fingerprint(db, first.id, officer.id)
    assert first.is_confirmed is True

    second = biometric_service.add_fingerprint(
        db, _fingerprint(inmate.id, storage_key="fingerprints/B", quality=90)
    )

    assert second.id == first.id
    assert second.storage_key == "fingerprints/B"
    assert second.quality == 90
    assert second.is_confirmed is False
    assert second.confirmed_by_id is None
    assert second.confirmed_at is None
    assert deleted_keys == ["fingerprints/A"]

    slots = [
        f
        for f in biometric_service.list_fingerprints(db, Subject.inmate(inmate.id))
        if f.finger == "right_thumb"
    ]
    assert len(slots) == 1


def test_recapture_with_same_key_keeps_file(db, inmate, deleted_keys):
    biometric_service.add_fingerprint(db, _fingerprint(inmate.id, storage_key="fingerprints/A"))
    biometric_service.add_fingerprint(db, _fingerprint(inmate.id, storage_key="fingerprints/A"))
    assert deleted_keys == []


def test_recapture_keeps_fields_not_supplied(db, inmate, deleted_keys):
    biometric_service.add_fingerprint(
        db, _fingerprint(inmate.id, storage_key="fingerprints/A", provider_name="Suprema")
    )
    recaptured = biometric_service.add_fingerprint(
        db, _fingerprint(inmate.id, storage_key="fingerprints/B")
    )
    assert recaptured.provider_name == "Suprema"


def test_recapture_storage_failure_keeps_old_record(db, inmate, monkeypatch):
    fingerprint = biometric_service.add_fingerprint(
        db, _fingerprint(inmate.id, storage_key="fingerprints/A")
    )
    db.commit()

    def failing_delete(storage_key):
        raise DependencyFailureError("storage down")

    monkeypatch.setattr(storage_service, "delete_file", failing_delete)

    with pytest.raises(DependencyFailureError):
        biometric_service.add_fingerprint(
            db, _fingerprint(inmate.id, storage_key="fingerprints/B")
        )
    db.rollback()

    assert db.get(Fingerprint, fingerprint.id).storage_key == "fingerprints/A"


def test_distinct_fingers_are_distinct_slots(db, inmate):
    subject = Subject.inmate(inmate.id)
    biometric_service.add_fingerprint(db, _fingerprint(inmate.id, finger="right_thumb"))
    biometric_service.add_fingerprint(db, _fingerprint(inmate.id, finger="left_thumb"))

    fingers = {f.finger for f in biometric_service.list_fingerprints(db, subject)}
    assert fingers == {"right_thumb", "left_thumb"}
    assert biometric_service.get_fingerprint_by_finger(db, subject, "left_thumb") is not None
    assert biometric_service.get_fingerprint_by_finger(db, subject, "left_index") is None


def test_delete_fingerprint_releases_storage(db, inmate, deleted_keys):
    fingerprint = biometric_service.add_fingerprint(
        db, _fingerprint(inmate.id, storage_key="fingerprints/A")
    )
    fingerprint_id = fingerprint.id
    biometric_service.delete_fingerprint(db, fingerprint_id)

    assert deleted_keys == ["fingerprints/A"]
    assert db.get(Fingerprint, fingerprint_id) is None


def test_reject_fingerprint_with_notes(db, inmate):
    fingerprint = biometric_service.add_fingerprint(db, _fingerprint(inmate.id))
    biometric_service.reject_fingerprint(db, fingerprint.id, "Smudged")
    assert fingerprint.is_confirmed is False
    assert fingerprint.confirm_notes == "Smudged"
    assert fingerprint in biometric_service.list_unconfirmed_fingerprints(db)


def test_upload_url_uses_kind_prefix():
    photo = biometric_service.generate_upload_url("photo")
    fingerprint = biometric_service.generate_upload_url("fingerprint")
    assert photo["storage_key"].startswith("photos/")
    assert fingerprint["storage_key"].startswith("fingerprints/")


# =============================================================================
# Storage keys
# =============================================================================

@pytest.mark.parametrize(
    "storage_key", ["../outside.jpg", "/etc/passwd", "photos/../../x", "photos//x", "a\\b"]
)
def test_unreleasable_storage_key_rejected_at_capture(db, inmate, storage_key):
    with pytest.raises(InvalidInputError):
        biometric_service.add_photo(db, _photo(inmate.id, storage_key=storage_key))
    with pytest.raises(InvalidInputError):
        biometric_service.add_fingerprint(db, _fingerprint(inmate.id, storage_key=storage_key))

    subject = Subject.inmate(inmate.id)
    assert biometric_service.list_photos(db, subject) == []
    assert biometric_service.list_fingerprints(db, subject) == []


def test_recapture_with_bad_key_leaves_slot_untouched(db, inmate, deleted_keys):
    original = biometric_service.add_fingerprint(
        db, _fingerprint(inmate.id, storage_key="fingerprints/A")
    )

    with pytest.raises(InvalidInputError):
        biometric_service.add_fingerprint(db, _fingerprint(inmate.id, storage_key="../B"))

    assert deleted_keys == []
    assert original.storage_key == "fingerprints/A"
