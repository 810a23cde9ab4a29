"""Inmate registration, lookup and administrative status changes."""

import logging
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from custody_ledger.core import custody_rules
from custody_ledger.core.structured_logging import build_log_context
from custody_ledger.db.enums import DEFAULT_INMATE_STATUS
from custody_ledger.db.models import Inmate
from custody_ledger.schemas.inmate import InmateCreate, InmateRelease, InmateUpdate
from custody_ledger.services import biometric_service, registration_validators

logger = logging.getLogger(__name__)


def get_inmate(db: Session, inmate_id: UUID) -> Inmate | None:
    return db.get(Inmate, inmate_id)


def get_by_prison_number(db: Session, prison_number: str) -> Inmate | None:
    return db.execute(
        select(Inmate).where(Inmate.prison_number == prison_number)
    ).scalar_one_or_none()


def list_by_national_id(db: Session, national_id: str) -> list[Inmate]:
    """National ID is not unique: returns every matching record."""
    return list(
        db.execute(select(Inmate).where(Inmate.national_id == national_id)).scalars().all()
    )


def list_inmates(
    db: Session,
    prison_id: UUID | None = None,
    status: str | None = None,
    inmate_type: str | None = None,
    risk_level: str | None = None,
    q: str | None = None,
) -> list[Inmate]:
    """List inmates with optional filters; `q` matches names, prison and case number."""
    query = select(Inmate)
    if prison_id:
        query = query.where(Inmate.prison_id == prison_id)
    if status:
        query = query.where(Inmate.status == status)
    if inmate_type:
        query = query.where(Inmate.inmate_type == inmate_type)
    if risk_level:
        query = query.where(Inmate.risk_level == risk_level)
    if q:
        pattern = f"%{q.strip()}%"
        query = query.where(
            or_(
                Inmate.first_name.ilike(pattern),
                Inmate.last_name.ilike(pattern),
                Inmate.prison_number.ilike(pattern),
                Inmate.case_number.ilike(pattern),
            )
        )
    query = query.order_by(Inmate.last_name, Inmate.first_name)
    return list(db.execute(query).scalars().all())


def register_inmate(db: Session, data: InmateCreate) -> Inmate:
    """Admit an inmate. Prison number must be unused; prison and offense must exist."""
    registration_validators.validate_inmate_registration(
        db, data.prison_number, data.prison_id, data.offense_id
    )

    fields = data.model_dump()
    fields["status"] = data.status or DEFAULT_INMATE_STATUS.value
    inmate = Inmate(**fields)
    db.add(inmate)
    registration_validators.flush_or_conflict(
        db, f"Prison number {data.prison_number} already exists"
    )

    logger.info("Inmate registered", extra=build_log_context(inmate_id=inmate.id))
    return inmate


def update_inmate(db: Session, inmate_id: UUID, data: InmateUpdate) -> Inmate:
    """
    Patch mutable fields.

    Uses exclude_unset=True so only explicitly provided fields are updated.
    """
    inmate = registration_validators.require_inmate(db, inmate_id)
    updates = data.model_dump(exclude_unset=True)

    if updates.get("prison_id"):
        registration_validators.require_prison(db, updates["prison_id"])
    if updates.get("offense_id"):
        registration_validators.require_offense(db, updates["offense_id"])

    for field, value in updates.items():
        setattr(inmate, field, value)
    db.flush()
    return inmate


def update_status(db: Session, inmate_id: UUID, status: str) -> Inmate:
    """Direct administrative status edit; bypasses the custody rules."""
    inmate = registration_validators.require_inmate(db, inmate_id)
    previous = inmate.status
    inmate.status = status
    db.flush()
    logger.info(
        "Inmate status set %s -> %s",
        previous,
        status,
        extra=build_log_context(inmate_id=inmate.id),
    )
    return inmate


def release_inmate(db: Session, inmate_id: UUID, data: InmateRelease) -> Inmate:
    inmate = registration_validators.require_inmate(db, inmate_id)
    patch = custody_rules.derive_inmate_patch(
        inmate.status,
        custody_rules.ReleaseRecorded(
            release_date=data.release_date, reason=data.reason, notes=data.notes
        ),
    )
    custody_rules.apply_patch(inmate, patch)
    db.flush()
    logger.info(
        "Inmate released (%s)", data.reason, extra=build_log_context(inmate_id=inmate.id)
    )
    return inmate


def delete_inmate(db: Session, inmate_id: UUID) -> None:
    """
    Administrative delete.

    Photos and fingerprints go through the biometric ledger first so their
    stored files are released; the remaining dependent records cascade.
    """
    inmate = registration_validators.require_inmate(db, inmate_id)
    biometric_service.delete_subject_biometrics(db, biometric_service.Subject.inmate(inmate.id))
    db.delete(inmate)
    db.flush()
    logger.info("Inmate deleted", extra=build_log_context(inmate_id=inmate_id))
