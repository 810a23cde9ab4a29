"""Court appearances: scheduling and outcomes."""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from custody_ledger.core import custody_rules
from custody_ledger.core.structured_logging import build_log_context
from custody_ledger.db.models import CourtAppearance
from custody_ledger.schemas.custody import (
    CourtAppearanceCreate,
    CourtAppearanceUpdate,
    CourtOutcomeRecord,
)
from custody_ledger.services import registration_validators

logger = logging.getLogger(__name__)


def get_appearance(db: Session, appearance_id: UUID) -> CourtAppearance | None:
    return db.get(CourtAppearance, appearance_id)


def require_appearance(db: Session, appearance_id: UUID) -> CourtAppearance:
    return registration_validators.require(
        db, CourtAppearance, appearance_id, "Court appearance"
    )


def list_appearances(db: Session, inmate_id: UUID | None = None) -> list[CourtAppearance]:
    query = select(CourtAppearance)
    if inmate_id:
        query = query.where(CourtAppearance.inmate_id == inmate_id)
    return list(
        db.execute(query.order_by(CourtAppearance.scheduled_date.desc())).scalars().all()
    )


def list_upcoming(db: Session, from_date: date) -> list[CourtAppearance]:
    """Appearances scheduled on or after `from_date`, soonest first."""
    return list(
        db.execute(
            select(CourtAppearance)
            .where(CourtAppearance.scheduled_date >= from_date)
            .order_by(CourtAppearance.scheduled_date)
        ).scalars().all()
    )


def schedule_appearance(db: Session, data: CourtAppearanceCreate) -> CourtAppearance:
    """Schedule a hearing; the inmate's next court date moves to it."""
    inmate = registration_validators.validate_court_appearance(db, data.inmate_id, data.court_id)
    if data.officer_id:
        registration_validators.require_officer(db, data.officer_id)

    appearance = CourtAppearance(**data.model_dump())
    db.add(appearance)

    patch = custody_rules.derive_inmate_patch(
        inmate.status, custody_rules.AppearanceScheduled(scheduled_date=data.scheduled_date)
    )
    custody_rules.apply_patch(inmate, patch)
    db.flush()
    return appearance


def record_outcome(
    db: Session, appearance_id: UUID, data: CourtOutcomeRecord
) -> CourtAppearance:
    """Record the hearing outcome and derive the inmate's status from it."""
    appearance = require_appearance(db, appearance_id)
    inmate = registration_validators.require_inmate(db, appearance.inmate_id)

    appearance.outcome = data.outcome
    appearance.next_date = data.next_date
    if data.departure_time:
        appearance.departure_time = data.departure_time
    if data.return_time:
        appearance.return_time = data.return_time
    if data.notes:
        appearance.notes = data.notes

    previous_status = inmate.status
    patch = custody_rules.derive_inmate_patch(
        inmate.status,
        custody_rules.CourtOutcomeRecorded(outcome=data.outcome, next_date=data.next_date),
    )
    custody_rules.apply_patch(inmate, patch)
    db.flush()

    logger.info(
        "Court outcome %s recorded; inmate status %s -> %s",
        data.outcome,
        previous_status,
        inmate.status,
        extra=build_log_context(inmate_id=inmate.id, record_id=appearance.id),
    )
    return appearance


def update_appearance(
    db: Session, appearance_id: UUID, data: CourtAppearanceUpdate
) -> CourtAppearance:
    appearance = require_appearance(db, appearance_id)
    updates = data.model_dump(exclude_unset=True)
    if updates.get("court_id"):
        registration_validators.require_court(db, updates["court_id"])
    if updates.get("officer_id"):
        registration_validators.require_officer(db, updates["officer_id"])
    for field, value in updates.items():
        setattr(appearance, field, value)
    db.flush()
    return appearance


def delete_appearance(db: Session, appearance_id: UUID) -> None:
    appearance = require_appearance(db, appearance_id)
    db.delete(appearance)
    db.flush()
