"""Visitor bookings: schedule, check in/out, deny, cancel."""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from custody_ledger.db.enums import DEFAULT_VISIT_STATUS, VisitStatus
from custody_ledger.db.models import Visit
from custody_ledger.schemas.records import (
    VisitCheckIn,
    VisitCheckOut,
    VisitCreate,
    VisitDeny,
    VisitUpdate,
)
from custody_ledger.services import registration_validators


def get_visit(db: Session, visit_id: UUID) -> Visit | None:
    return db.get(Visit, visit_id)


def require_visit(db: Session, visit_id: UUID) -> Visit:
    return registration_validators.require(db, Visit, visit_id, "Visit")


def list_visits(
    db: Session,
    inmate_id: UUID | None = None,
    status: str | None = None,
    prison_id: UUID | None = None,
) -> list[Visit]:
    query = select(Visit)
    if inmate_id:
        query = query.where(Visit.inmate_id == inmate_id)
    if status:
        query = query.where(Visit.status == status)
    if prison_id:
        query = query.where(Visit.prison_id == prison_id)
    return list(db.execute(query.order_by(Visit.created_at.desc())).scalars().all())


def list_visitors_inside(db: Session, prison_id: UUID | None = None) -> list[Visit]:
    """Visits currently checked in."""
    return list_visits(db, status=VisitStatus.CHECKED_IN.value, prison_id=prison_id)


def schedule_visit(db: Session, data: VisitCreate) -> Visit:
    registration_validators.require_inmate(db, data.inmate_id)
    registration_validators.require_prison(db, data.prison_id)
    visit = Visit(**data.model_dump(), status=DEFAULT_VISIT_STATUS.value)
    db.add(visit)
    db.flush()
    return visit


def check_in(db: Session, visit_id: UUID, data: VisitCheckIn) -> Visit:
    visit = require_visit(db, visit_id)
    if data.approved_by_id:
        registration_validators.require_officer(db, data.approved_by_id)
        visit.approved_by_id = data.approved_by_id
    if data.items_declaration:
        visit.items_declaration = data.items_declaration
    visit.check_in_time = data.check_in_time or datetime.now(timezone.utc)
    visit.status = VisitStatus.CHECKED_IN.value
    db.flush()
    return visit


def check_out(db: Session, visit_id: UUID, data: VisitCheckOut) -> Visit:
    visit = require_visit(db, visit_id)
    visit.check_out_time = data.check_out_time or datetime.now(timezone.utc)
    visit.status = VisitStatus.COMPLETED.value
    if data.flagged is not None:
        visit.flagged = data.flagged
        visit.flag_reason = data.flag_reason
    db.flush()
    return visit


def deny_visit(db: Session, visit_id: UUID, data: VisitDeny) -> Visit:
    visit = require_visit(db, visit_id)
    visit.status = VisitStatus.DENIED.value
    visit.denial_reason = data.denial_reason
    db.flush()
    return visit


def cancel_visit(db: Session, visit_id: UUID) -> Visit:
    visit = require_visit(db, visit_id)
    visit.status = VisitStatus.CANCELLED.value
    db.flush()
    return visit


def update_visit(db: Session, visit_id: UUID, data: VisitUpdate) -> Visit:
    visit = require_visit(db, visit_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(visit, field, value)
    db.flush()
    return visit


def delete_visit(db: Session, visit_id: UUID) -> None:
    visit = require_visit(db, visit_id)
    db.delete(visit)
    db.flush()
