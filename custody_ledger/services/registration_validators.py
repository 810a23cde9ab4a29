"""
Registration checks run before inserts.

Uniqueness checks are check-then-insert: two concurrent registrations can
both pass. The unique indexes on the tables back them up, and
`flush_or_conflict` reports a violation found at flush time as a conflict.
"""

from typing import Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from custody_ledger.core.errors import ConflictError, InvalidInputError, NotFoundError
from custody_ledger.db.enums import MovementType, SubjectType
from custody_ledger.db.models import Court, Inmate, Offense, Officer, Prison
from custody_ledger.services import storage_service

T = TypeVar("T")


# =============================================================================
# Uniqueness
# =============================================================================

def ensure_prison_number_available(db: Session, prison_number: str) -> None:
    exists = db.execute(
        select(Inmate.id).where(Inmate.prison_number == prison_number)
    ).first()
    if exists:
        raise ConflictError(f"Prison number {prison_number} already exists")


def ensure_badge_number_available(db: Session, badge_number: str) -> None:
    exists = db.execute(
        select(Officer.id).where(Officer.badge_number == badge_number)
    ).first()
    if exists:
        raise ConflictError(f"Badge number {badge_number} already exists")


def ensure_prison_code_available(db: Session, code: str, exclude_id: UUID | None = None) -> None:
    query = select(Prison.id).where(Prison.code == code)
    if exclude_id:
        query = query.where(Prison.id != exclude_id)
    if db.execute(query).first():
        raise ConflictError(f"Prison code {code} already exists")


def flush_or_conflict(db: Session, message: str) -> None:
    """Flush pending writes, reporting a unique-index violation as ConflictError."""
    try:
        db.flush()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(message) from exc


# =============================================================================
# References
# =============================================================================

def require(db: Session, model: Type[T], record_id: UUID | None, label: str) -> T:
    """Load a referenced record or raise NotFoundError."""
    record = db.get(model, record_id) if record_id else None
    if record is None:
        raise NotFoundError(f"{label} {record_id} not found")
    return record


def require_inmate(db: Session, inmate_id: UUID | None) -> Inmate:
    return require(db, Inmate, inmate_id, "Inmate")


def require_officer(db: Session, officer_id: UUID | None) -> Officer:
    return require(db, Officer, officer_id, "Officer")


def require_prison(db: Session, prison_id: UUID | None) -> Prison:
    return require(db, Prison, prison_id, "Prison")


def require_offense(db: Session, offense_id: UUID | None) -> Offense:
    return require(db, Offense, offense_id, "Offense")


def require_court(db: Session, court_id: UUID | None) -> Court:
    return require(db, Court, court_id, "Court")


def validate_inmate_registration(
    db: Session, prison_number: str, prison_id: UUID, offense_id: UUID
) -> None:
    ensure_prison_number_available(db, prison_number)
    require_prison(db, prison_id)
    require_offense(db, offense_id)


def validate_officer_registration(db: Session, badge_number: str, prison_id: UUID) -> None:
    ensure_badge_number_available(db, badge_number)
    require_prison(db, prison_id)


def validate_movement(
    db: Session,
    inmate_id: UUID,
    movement_type: str,
    to_prison_id: UUID | None,
) -> Inmate:
    """Check a movement payload; returns the inmate it applies to."""
    inmate = require_inmate(db, inmate_id)
    if movement_type == MovementType.TRANSFER.value:
        if not to_prison_id:
            raise InvalidInputError("Transfer requires a destination prison")
        require_prison(db, to_prison_id)
    elif to_prison_id:
        require_prison(db, to_prison_id)
    return inmate


def validate_court_appearance(db: Session, inmate_id: UUID, court_id: UUID) -> Inmate:
    inmate = require_inmate(db, inmate_id)
    require_court(db, court_id)
    return inmate


# =============================================================================
# Biometric payloads
# =============================================================================

def validate_subject(db: Session, subject_type: str, subject_id: UUID | None) -> None:
    """The subject id must be present and name an existing inmate/officer."""
    if not subject_id:
        raise InvalidInputError(f"{subject_type} id is required")
    if subject_type == SubjectType.INMATE.value:
        require_inmate(db, subject_id)
    elif subject_type == SubjectType.OFFICER.value:
        require_officer(db, subject_id)
    else:
        raise InvalidInputError(f"Unknown subject type: {subject_type}")


def validate_photo_payload(
    provider: str,
    storage_key: str | None,
    external_url: str | None,
    base64_preview: str | None,
) -> None:
    if storage_key:
        storage_service.validate_storage_key(storage_key)
    if provider == "internal" and not storage_key:
        raise InvalidInputError("storage_key is required for internal photos")
    if provider == "upload" and not (storage_key or base64_preview):
        raise InvalidInputError("storage_key or base64_preview is required for uploaded photos")
    if provider == "external_url" and not external_url:
        raise InvalidInputError("external_url is required for external_url photos")


def validate_fingerprint_payload(
    provider: str,
    storage_key: str | None,
    template_data: str | None,
    provider_ref: str | None,
) -> None:
    if storage_key:
        storage_service.validate_storage_key(storage_key)
    if provider == "internal" and not storage_key:
        raise InvalidInputError("storage_key is required for internal fingerprints")
    if provider == "external" and not (template_data or provider_ref):
        raise InvalidInputError(
            "template_data or provider_ref is required for external fingerprints"
        )
