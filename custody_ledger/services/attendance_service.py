"""Officer attendance. One record per (officer, date, shift) slot."""

from datetime import date, datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from custody_ledger.db.enums import AttendanceStatus
from custody_ledger.db.models import OfficerAttendance
from custody_ledger.schemas.records import (
    AttendanceRecord,
    AttendanceUpdate,
    ClockIn,
    ClockOut,
    MarkAbsent,
)
from custody_ledger.services import registration_validators


def _find_slot(
    db: Session, officer_id: UUID, on_date: date, shift: str
) -> OfficerAttendance | None:
    return db.execute(
        select(OfficerAttendance).where(
            OfficerAttendance.officer_id == officer_id,
            OfficerAttendance.date == on_date,
            OfficerAttendance.shift == shift,
        )
    ).scalar_one_or_none()


def _validate_refs(db: Session, officer_id: UUID, prison_id: UUID, recorded_by_id: UUID | None):
    registration_validators.require_officer(db, officer_id)
    registration_validators.require_prison(db, prison_id)
    if recorded_by_id:
        registration_validators.require_officer(db, recorded_by_id)


def require_attendance(db: Session, attendance_id: UUID) -> OfficerAttendance:
    return registration_validators.require(
        db, OfficerAttendance, attendance_id, "Attendance record"
    )


def list_attendance(
    db: Session,
    officer_id: UUID | None = None,
    on_date: date | None = None,
    prison_id: UUID | None = None,
) -> list[OfficerAttendance]:
    query = select(OfficerAttendance)
    if officer_id:
        query = query.where(OfficerAttendance.officer_id == officer_id)
    if on_date:
        query = query.where(OfficerAttendance.date == on_date)
    if prison_id:
        query = query.where(OfficerAttendance.prison_id == prison_id)
    query = query.order_by(OfficerAttendance.date.desc(), OfficerAttendance.shift)
    return list(db.execute(query).scalars().all())


def get_officer_attendance_for_date(
    db: Session, officer_id: UUID, on_date: date
) -> list[OfficerAttendance]:
    return list_attendance(db, officer_id=officer_id, on_date=on_date)


def record_attendance(db: Session, data: AttendanceRecord) -> OfficerAttendance:
    """Insert or overwrite the record for the slot."""
    _validate_refs(db, data.officer_id, data.prison_id, data.recorded_by_id)
    existing = _find_slot(db, data.officer_id, data.date, data.shift)
    if existing:
        for field, value in data.model_dump().items():
            setattr(existing, field, value)
        db.flush()
        return existing

    attendance = OfficerAttendance(**data.model_dump())
    db.add(attendance)
    db.flush()
    return attendance


def clock_in(db: Session, data: ClockIn) -> OfficerAttendance:
    _validate_refs(db, data.officer_id, data.prison_id, data.recorded_by_id)
    check_in_time = data.check_in_time or datetime.now(timezone.utc)
    existing = _find_slot(db, data.officer_id, data.date, data.shift)
    if existing:
        existing.check_in_time = check_in_time
        existing.status = AttendanceStatus.PRESENT.value
        db.flush()
        return existing

    attendance = OfficerAttendance(
        officer_id=data.officer_id,
        prison_id=data.prison_id,
        date=data.date,
        shift=data.shift,
        status=AttendanceStatus.PRESENT.value,
        check_in_time=check_in_time,
        recorded_by_id=data.recorded_by_id,
    )
    db.add(attendance)
    db.flush()
    return attendance


def clock_out(db: Session, attendance_id: UUID, data: ClockOut) -> OfficerAttendance:
    attendance = require_attendance(db, attendance_id)
    attendance.check_out_time = data.check_out_time or datetime.now(timezone.utc)
    if data.hours_worked is not None:
        attendance.hours_worked = data.hours_worked
    if data.notes:
        attendance.notes = data.notes
    db.flush()
    return attendance


def mark_absent(db: Session, data: MarkAbsent) -> OfficerAttendance:
    """Upsert the slot with a non-working status (absent by default)."""
    _validate_refs(db, data.officer_id, data.prison_id, data.recorded_by_id)
    existing = _find_slot(db, data.officer_id, data.date, data.shift)
    if existing:
        existing.status = data.status
        existing.notes = data.notes
        db.flush()
        return existing

    attendance = OfficerAttendance(**data.model_dump())
    db.add(attendance)
    db.flush()
    return attendance


def update_attendance(
    db: Session, attendance_id: UUID, data: AttendanceUpdate
) -> OfficerAttendance:
    attendance = require_attendance(db, attendance_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(attendance, field, value)
    db.flush()
    return attendance


def delete_attendance(db: Session, attendance_id: UUID) -> None:
    attendance = require_attendance(db, attendance_id)
    db.delete(attendance)
    db.flush()


def get_summary(
    db: Session, officer_id: UUID, date_from: date, date_to: date
) -> dict[str, int]:
    """Count an officer's records per status between two dates (inclusive)."""
    records = db.execute(
        select(OfficerAttendance.status).where(
            OfficerAttendance.officer_id == officer_id,
            OfficerAttendance.date >= date_from,
            OfficerAttendance.date <= date_to,
        )
    ).scalars().all()

    summary = {status.value: 0 for status in AttendanceStatus}
    for status in records:
        summary[status] = summary.get(status, 0) + 1
    summary["total"] = len(records)
    return summary
