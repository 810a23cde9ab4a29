"""Lookup records: prisons, courts, offenses and officers."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from custody_ledger.core.structured_logging import build_log_context
from custody_ledger.db.models import Court, Offense, Officer, Prison
from custody_ledger.schemas.facilities import (
    CourtCreate,
    CourtUpdate,
    OffenseCreate,
    OffenseUpdate,
    OfficerCreate,
    OfficerUpdate,
    PrisonCreate,
    PrisonUpdate,
)
from custody_ledger.services import biometric_service, registration_validators

logger = logging.getLogger(__name__)


def _apply_updates(record, data) -> None:
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(record, field, value)


# =============================================================================
# Prisons
# =============================================================================

def list_prisons(
    db: Session, active_only: bool = False, prison_type: str | None = None
) -> list[Prison]:
    query = select(Prison)
    if active_only:
        query = query.where(Prison.is_active.is_(True))
    if prison_type:
        query = query.where(Prison.type == prison_type)
    return list(db.execute(query.order_by(Prison.name)).scalars().all())


def get_prison(db: Session, prison_id: UUID) -> Prison | None:
    return db.get(Prison, prison_id)


def create_prison(db: Session, data: PrisonCreate) -> Prison:
    registration_validators.ensure_prison_code_available(db, data.code)
    prison = Prison(**data.model_dump())
    db.add(prison)
    registration_validators.flush_or_conflict(db, f"Prison code {data.code} already exists")
    logger.info("Prison created", extra=build_log_context(record_id=prison.id))
    return prison


def update_prison(db: Session, prison_id: UUID, data: PrisonUpdate) -> Prison:
    prison = registration_validators.require(db, Prison, prison_id, "Prison")
    if data.code is not None and data.code != prison.code:
        registration_validators.ensure_prison_code_available(db, data.code, exclude_id=prison.id)
    _apply_updates(prison, data)
    registration_validators.flush_or_conflict(db, f"Prison code {data.code} already exists")
    return prison


def delete_prison(db: Session, prison_id: UUID) -> None:
    """Conflict while inmates, officers, visits or attendance still reference it."""
    prison = registration_validators.require(db, Prison, prison_id, "Prison")
    db.delete(prison)
    registration_validators.flush_or_conflict(db, f"Prison {prison_id} is still referenced")


# =============================================================================
# Courts
# =============================================================================

def list_courts(db: Session, court_type: str | None = None) -> list[Court]:
    query = select(Court)
    if court_type:
        query = query.where(Court.type == court_type)
    return list(db.execute(query.order_by(Court.name)).scalars().all())


def get_court(db: Session, court_id: UUID) -> Court | None:
    return db.get(Court, court_id)


def create_court(db: Session, data: CourtCreate) -> Court:
    court = Court(**data.model_dump())
    db.add(court)
    db.flush()
    return court


def update_court(db: Session, court_id: UUID, data: CourtUpdate) -> Court:
    court = registration_validators.require(db, Court, court_id, "Court")
    _apply_updates(court, data)
    db.flush()
    return court


def delete_court(db: Session, court_id: UUID) -> None:
    court = registration_validators.require(db, Court, court_id, "Court")
    db.delete(court)
    registration_validators.flush_or_conflict(
        db, f"Court {court_id} still has court appearances"
    )


# =============================================================================
# Offenses
# =============================================================================

def list_offenses(db: Session, category: str | None = None) -> list[Offense]:
    query = select(Offense)
    if category:
        query = query.where(Offense.category == category)
    return list(db.execute(query.order_by(Offense.name)).scalars().all())


def get_offense(db: Session, offense_id: UUID) -> Offense | None:
    return db.get(Offense, offense_id)


def create_offense(db: Session, data: OffenseCreate) -> Offense:
    offense = Offense(**data.model_dump())
    db.add(offense)
    db.flush()
    return offense


def update_offense(db: Session, offense_id: UUID, data: OffenseUpdate) -> Offense:
    offense = registration_validators.require(db, Offense, offense_id, "Offense")
    _apply_updates(offense, data)
    db.flush()
    return offense


def delete_offense(db: Session, offense_id: UUID) -> None:
    offense = registration_validators.require(db, Offense, offense_id, "Offense")
    db.delete(offense)
    registration_validators.flush_or_conflict(
        db, f"Offense {offense_id} is still referenced by inmates or charges"
    )


# =============================================================================
# Officers
# =============================================================================

def list_officers(
    db: Session, prison_id: UUID | None = None, active_only: bool = False
) -> list[Officer]:
    query = select(Officer)
    if prison_id:
        query = query.where(Officer.prison_id == prison_id)
    if active_only:
        query = query.where(Officer.is_active.is_(True))
    return list(db.execute(query.order_by(Officer.name)).scalars().all())


def get_officer(db: Session, officer_id: UUID) -> Officer | None:
    return db.get(Officer, officer_id)


def get_officer_by_badge(db: Session, badge_number: str) -> Officer | None:
    return db.execute(
        select(Officer).where(Officer.badge_number == badge_number)
    ).scalar_one_or_none()


def create_officer(db: Session, data: OfficerCreate) -> Officer:
    registration_validators.validate_officer_registration(db, data.badge_number, data.prison_id)
    officer = Officer(**data.model_dump())
    db.add(officer)
    registration_validators.flush_or_conflict(
        db, f"Badge number {data.badge_number} already exists"
    )
    logger.info("Officer created", extra=build_log_context(record_id=officer.id))
    return officer


def update_officer(db: Session, officer_id: UUID, data: OfficerUpdate) -> Officer:
    officer = registration_validators.require(db, Officer, officer_id, "Officer")
    if data.prison_id:
        registration_validators.require_prison(db, data.prison_id)
    _apply_updates(officer, data)
    db.flush()
    return officer


def delete_officer(db: Session, officer_id: UUID) -> None:
    """Release the officer's biometrics, then delete; attendance cascades."""
    officer = registration_validators.require(db, Officer, officer_id, "Officer")
    biometric_service.delete_subject_biometrics(
        db, biometric_service.Subject.officer(officer.id)
    )
    db.delete(officer)
    db.flush()
    logger.info("Officer deleted", extra=build_log_context(record_id=officer_id))
