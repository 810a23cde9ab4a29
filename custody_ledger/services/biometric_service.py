"""
Biometric ledger: photos and fingerprints of inmates and officers.

Invariants:
- At most one photo per subject has is_primary = true. Existing primaries are
  cleared and flushed before a new primary is written, so the partial unique
  index never sees two at once.
- At most one fingerprint per (subject, finger) slot. Recapturing a slot
  updates the existing record and resets its confirmation.
- A record holding a storage key releases the stored file before it is
  replaced or deleted; a storage failure aborts the mutation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from custody_ledger.core.errors import NotFoundError
from custody_ledger.core.structured_logging import build_log_context
from custody_ledger.db.enums import REJECTED_NOTE, SubjectType
from custody_ledger.db.models import Fingerprint, Photo
from custody_ledger.schemas.biometrics import FingerprintCreate, PhotoCreate
from custody_ledger.services import registration_validators, storage_service

logger = logging.getLogger(__name__)

PHOTO_KEY_PREFIX = "photos"
FINGERPRINT_KEY_PREFIX = "fingerprints"


# =============================================================================
# Subject
# =============================================================================

@dataclass(frozen=True)
class Subject:
    """Owner of a biometric record: an inmate or an officer."""

    subject_type: str
    id: UUID

    @classmethod
    def inmate(cls, inmate_id: UUID) -> "Subject":
        return cls(SubjectType.INMATE.value, inmate_id)

    @classmethod
    def officer(cls, officer_id: UUID) -> "Subject":
        return cls(SubjectType.OFFICER.value, officer_id)

    @classmethod
    def from_ref(cls, ref) -> "Subject":
        return cls(ref.subject_type, ref.id)

    @classmethod
    def of(cls, record: Photo | Fingerprint) -> "Subject":
        if record.subject_type == SubjectType.INMATE.value:
            return cls.inmate(record.inmate_id)
        return cls.officer(record.officer_id)

    @property
    def is_inmate(self) -> bool:
        return self.subject_type == SubjectType.INMATE.value

    def owner_fields(self) -> dict:
        """Column values for the discriminator and owner reference."""
        return {
            "subject_type": self.subject_type,
            "inmate_id": self.id if self.is_inmate else None,
            "officer_id": None if self.is_inmate else self.id,
        }

    def owned_by(self, model):
        """WHERE clause selecting rows of `model` owned by this subject."""
        column = model.inmate_id if self.is_inmate else model.officer_id
        return column == self.id


def _validate_subject(db: Session, subject: Subject) -> None:
    registration_validators.validate_subject(db, subject.subject_type, subject.id)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _release_storage(record: Photo | Fingerprint) -> None:
    """Delete the record's stored file; raises DependencyFailureError on failure."""
    if record.storage_key:
        storage_service.delete_file(record.storage_key)


def generate_upload_url(kind: str) -> dict[str, str]:
    """Reserve a storage key for a photo or fingerprint upload."""
    prefix = PHOTO_KEY_PREFIX if kind == "photo" else FINGERPRINT_KEY_PREFIX
    return storage_service.generate_upload_url(prefix)


# =============================================================================
# Photos
# =============================================================================

def get_photo(db: Session, photo_id: UUID) -> Photo | None:
    return db.get(Photo, photo_id)


def _require_photo(db: Session, photo_id: UUID) -> Photo:
    photo = get_photo(db, photo_id)
    if not photo:
        raise NotFoundError(f"Photo {photo_id} not found")
    return photo


def list_photos(db: Session, subject: Subject) -> list[Photo]:
    return list(
        db.execute(
            select(Photo).where(subject.owned_by(Photo)).order_by(Photo.captured_at)
        ).scalars().all()
    )


def get_primary_photo(db: Session, subject: Subject) -> Photo | None:
    """The subject's primary photo, else its first photo, else None."""
    photos = list_photos(db, subject)
    for photo in photos:
        if photo.is_primary:
            return photo
    return photos[0] if photos else None


def list_unconfirmed_photos(db: Session) -> list[Photo]:
    return list(
        db.execute(
            select(Photo).where(Photo.is_confirmed.is_(False)).order_by(Photo.captured_at)
        ).scalars().all()
    )


def _clear_primary_photos(db: Session, subject: Subject, keep_id: UUID | None = None) -> None:
    primaries = db.execute(
        select(Photo).where(subject.owned_by(Photo), Photo.is_primary.is_(True))
    ).scalars().all()
    for photo in primaries:
        if photo.id != keep_id:
            photo.is_primary = False
    db.flush()


def add_photo(db: Session, data: PhotoCreate) -> Photo:
    """Store a new photo, demoting any existing primary when this one is primary."""
    subject = Subject.from_ref(data.subject)
    _validate_subject(db, subject)
    registration_validators.validate_photo_payload(
        data.provider, data.storage_key, data.external_url, data.base64_preview
    )

    if data.is_primary:
        _clear_primary_photos(db, subject)

    photo = Photo(
        **subject.owner_fields(),
        photo_type=data.photo_type,
        provider=data.provider,
        storage_key=data.storage_key,
        external_url=data.external_url,
        base64_preview=data.base64_preview,
        file_size=data.file_size,
        mime_type=data.mime_type,
        captured_at=data.captured_at or _now(),
        captured_by_id=data.captured_by_id,
        is_primary=data.is_primary,
        is_confirmed=bool(data.is_confirmed),
    )
    db.add(photo)
    db.flush()

    logger.info(
        "Photo added",
        extra=build_log_context(
            subject_type=subject.subject_type, subject_id=subject.id, record_id=photo.id
        ),
    )
    return photo


def set_primary_photo(db: Session, photo_id: UUID) -> Photo:
    photo = _require_photo(db, photo_id)
    subject = Subject.of(photo)
    _clear_primary_photos(db, subject, keep_id=photo.id)
    photo.is_primary = True
    db.flush()
    return photo


def confirm_photo(
    db: Session, photo_id: UUID, confirmed_by_id: UUID, confirm_notes: str | None = None
) -> Photo:
    photo = _require_photo(db, photo_id)
    registration_validators.require_officer(db, confirmed_by_id)
    photo.is_confirmed = True
    photo.confirmed_by_id = confirmed_by_id
    photo.confirmed_at = _now()
    photo.confirm_notes = confirm_notes
    db.flush()
    return photo


def reject_photo(db: Session, photo_id: UUID, confirm_notes: str | None = None) -> Photo:
    photo = _require_photo(db, photo_id)
    photo.is_confirmed = False
    photo.confirmed_at = _now()
    photo.confirm_notes = confirm_notes or REJECTED_NOTE
    db.flush()
    return photo


def delete_photo(db: Session, photo_id: UUID) -> None:
    """Release the stored file, then delete the record."""
    photo = _require_photo(db, photo_id)
    context = build_log_context(record_id=photo.id, storage_key=photo.storage_key)
    _release_storage(photo)
    db.delete(photo)
    db.flush()
    logger.info("Photo deleted", extra=context)


# =============================================================================
# Fingerprints
# =============================================================================

def get_fingerprint(db: Session, fingerprint_id: UUID) -> Fingerprint | None:
    return db.get(Fingerprint, fingerprint_id)


def _require_fingerprint(db: Session, fingerprint_id: UUID) -> Fingerprint:
    fingerprint = get_fingerprint(db, fingerprint_id)
    if not fingerprint:
        raise NotFoundError(f"Fingerprint {fingerprint_id} not found")
    return fingerprint


def list_fingerprints(db: Session, subject: Subject) -> list[Fingerprint]:
    return list(
        db.execute(
            select(Fingerprint)
            .where(subject.owned_by(Fingerprint))
            .order_by(Fingerprint.finger)
        ).scalars().all()
    )


def get_fingerprint_by_finger(db: Session, subject: Subject, finger: str) -> Fingerprint | None:
    return db.execute(
        select(Fingerprint).where(subject.owned_by(Fingerprint), Fingerprint.finger == finger)
    ).scalar_one_or_none()


def list_unconfirmed_fingerprints(db: Session) -> list[Fingerprint]:
    return list(
        db.execute(
            select(Fingerprint)
            .where(Fingerprint.is_confirmed.is_(False))
            .order_by(Fingerprint.captured_at)
        ).scalars().all()
    )


def add_fingerprint(db: Session, data: FingerprintCreate) -> Fingerprint:
    """
    Capture a finger, replacing any existing record for the same slot.

    On replace, supplied fields overwrite the stored ones and confirmation
    is reset. A different storage key releases the old file first.
    """
    subject = Subject.from_ref(data.subject)
    _validate_subject(db, subject)
    registration_validators.validate_fingerprint_payload(
        data.provider, data.storage_key, data.template_data, data.provider_ref
    )

    captured_at = data.captured_at or _now()
    existing = get_fingerprint_by_finger(db, subject, data.finger)

    if existing:
        context = build_log_context(
            subject_type=subject.subject_type,
            subject_id=subject.id,
            record_id=existing.id,
            storage_key=existing.storage_key,
        )
        if (
            existing.storage_key
            and data.storage_key
            and existing.storage_key != data.storage_key
        ):
            storage_service.delete_file(existing.storage_key)

        updates = data.model_dump(
            exclude_unset=True, exclude={"subject", "finger", "captured_at"}
        )
        for field, value in updates.items():
            setattr(existing, field, value)
        existing.captured_at = captured_at
        existing.is_confirmed = False
        existing.confirmed_by_id = None
        existing.confirmed_at = None
        existing.confirm_notes = None
        db.flush()

        logger.info("Fingerprint recaptured", extra=context)
        return existing

    fingerprint = Fingerprint(
        **subject.owner_fields(),
        finger=data.finger,
        provider=data.provider,
        storage_key=data.storage_key,
        template_data=data.template_data,
        provider_name=data.provider_name,
        provider_ref=data.provider_ref,
        quality=data.quality,
        captured_at=captured_at,
        captured_by_id=data.captured_by_id,
        is_confirmed=False,
    )
    db.add(fingerprint)
    db.flush()

    logger.info(
        "Fingerprint captured",
        extra=build_log_context(
            subject_type=subject.subject_type, subject_id=subject.id, record_id=fingerprint.id
        ),
    )
    return fingerprint


def confirm_fingerprint(
    db: Session, fingerprint_id: UUID, confirmed_by_id: UUID, confirm_notes: str | None = None
) -> Fingerprint:
    fingerprint = _require_fingerprint(db, fingerprint_id)
    registration_validators.require_officer(db, confirmed_by_id)
    fingerprint.is_confirmed = True
    fingerprint.confirmed_by_id = confirmed_by_id
    fingerprint.confirmed_at = _now()
    fingerprint.confirm_notes = confirm_notes
    db.flush()
    return fingerprint


def reject_fingerprint(
    db: Session, fingerprint_id: UUID, confirm_notes: str | None = None
) -> Fingerprint:
    fingerprint = _require_fingerprint(db, fingerprint_id)
    fingerprint.is_confirmed = False
    fingerprint.confirmed_at = _now()
    fingerprint.confirm_notes = confirm_notes or REJECTED_NOTE
    db.flush()
    return fingerprint


def delete_fingerprint(db: Session, fingerprint_id: UUID) -> None:
    """Release the stored file, then delete the record."""
    fingerprint = _require_fingerprint(db, fingerprint_id)
    context = build_log_context(record_id=fingerprint.id, storage_key=fingerprint.storage_key)
    _release_storage(fingerprint)
    db.delete(fingerprint)
    db.flush()
    logger.info("Fingerprint deleted", extra=context)


def delete_subject_biometrics(db: Session, subject: Subject) -> None:
    """
    Delete every photo and fingerprint of a subject, releasing stored files.

    Runs before the subject itself is deleted. A storage failure raises
    DependencyFailureError and the caller's unit of work is rolled back.
    Files already released by then are not restored.
    """
    for photo in list_photos(db, subject):
        delete_photo(db, photo.id)
    for fingerprint in list_fingerprints(db, subject):
        delete_fingerprint(db, fingerprint.id)
