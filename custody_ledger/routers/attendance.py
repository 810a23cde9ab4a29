"""Officer attendance endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from custody_ledger.core.deps import get_db
from custody_ledger.schemas.records import (
    AttendanceRead,
    AttendanceRecord,
    AttendanceSummary,
    AttendanceUpdate,
    ClockIn,
    ClockOut,
    MarkAbsent,
)
from custody_ledger.services import attendance_service, registration_validators

router = APIRouter()


@router.get("", response_model=list[AttendanceRead])
def list_attendance(
    officer_id: UUID | None = None,
    on_date: date | None = None,
    prison_id: UUID | None = None,
    db: Session = Depends(get_db),
):
    return attendance_service.list_attendance(
        db, officer_id=officer_id, on_date=on_date, prison_id=prison_id
    )


@router.get("/summary", response_model=AttendanceSummary)
def get_summary(
    officer_id: UUID,
    date_from: date,
    date_to: date,
    db: Session = Depends(get_db),
):
    """Per-status counts for an officer between two dates (inclusive)."""
    if date_from > date_to:
        raise HTTPException(status_code=400, detail="date_from must not be after date_to")
    registration_validators.require_officer(db, officer_id)
    return attendance_service.get_summary(db, officer_id, date_from, date_to)


@router.post("", response_model=AttendanceRead, status_code=status.HTTP_201_CREATED)
def record_attendance(data: AttendanceRecord, db: Session = Depends(get_db)):
    """Record an (officer, date, shift) slot, overwriting any existing record."""
    attendance = attendance_service.record_attendance(db, data)
    db.commit()
    return attendance


@router.post("/clock-in", response_model=AttendanceRead)
def clock_in(data: ClockIn, db: Session = Depends(get_db)):
    attendance = attendance_service.clock_in(db, data)
    db.commit()
    return attendance


@router.post("/{attendance_id}/clock-out", response_model=AttendanceRead)
def clock_out(attendance_id: UUID, data: ClockOut, db: Session = Depends(get_db)):
    attendance = attendance_service.clock_out(db, attendance_id, data)
    db.commit()
    return attendance


@router.post("/mark-absent", response_model=AttendanceRead)
def mark_absent(data: MarkAbsent, db: Session = Depends(get_db)):
    attendance = attendance_service.mark_absent(db, data)
    db.commit()
    return attendance


@router.patch("/{attendance_id}", response_model=AttendanceRead)
def update_attendance(
    attendance_id: UUID, data: AttendanceUpdate, db: Session = Depends(get_db)
):
    attendance = attendance_service.update_attendance(db, attendance_id, data)
    db.commit()
    return attendance


@router.delete("/{attendance_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_attendance(attendance_id: UUID, db: Session = Depends(get_db)):
    attendance_service.delete_attendance(db, attendance_id)
    db.commit()
