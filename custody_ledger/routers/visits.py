"""Visitor endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from custody_ledger.core.deps import get_db
from custody_ledger.db.enums import VisitStatus
from custody_ledger.schemas.records import (
    VisitCheckIn,
    VisitCheckOut,
    VisitCreate,
    VisitDeny,
    VisitRead,
    VisitUpdate,
)
from custody_ledger.services import visit_service

router = APIRouter()


@router.get("", response_model=list[VisitRead])
def list_visits(
    inmate_id: UUID | None = None,
    status: VisitStatus | None = None,
    prison_id: UUID | None = None,
    db: Session = Depends(get_db),
):
    return visit_service.list_visits(
        db,
        inmate_id=inmate_id,
        status=status.value if status else None,
        prison_id=prison_id,
    )


@router.get("/inside", response_model=list[VisitRead])
def list_visitors_inside(prison_id: UUID | None = None, db: Session = Depends(get_db)):
    """Visitors currently checked in."""
    return visit_service.list_visitors_inside(db, prison_id=prison_id)


@router.get("/{visit_id}", response_model=VisitRead)
def get_visit(visit_id: UUID, db: Session = Depends(get_db)):
    visit = visit_service.get_visit(db, visit_id)
    if not visit:
        raise HTTPException(status_code=404, detail="Visit not found")
    return visit


@router.post("", response_model=VisitRead, status_code=status.HTTP_201_CREATED)
def schedule_visit(data: VisitCreate, db: Session = Depends(get_db)):
    visit = visit_service.schedule_visit(db, data)
    db.commit()
    return visit


@router.post("/{visit_id}/check-in", response_model=VisitRead)
def check_in(visit_id: UUID, data: VisitCheckIn, db: Session = Depends(get_db)):
    visit = visit_service.check_in(db, visit_id, data)
    db.commit()
    return visit


@router.post("/{visit_id}/check-out", response_model=VisitRead)
def check_out(visit_id: UUID, data: VisitCheckOut, db: Session = Depends(get_db)):
    visit = visit_service.check_out(db, visit_id, data)
    db.commit()
    return visit


@router.post("/{visit_id}/deny", response_model=VisitRead)
def deny_visit(visit_id: UUID, data: VisitDeny, db: Session = Depends(get_db)):
    visit = visit_service.deny_visit(db, visit_id, data)
    db.commit()
    return visit


@router.post("/{visit_id}/cancel", response_model=VisitRead)
def cancel_visit(visit_id: UUID, db: Session = Depends(get_db)):
    visit = visit_service.cancel_visit(db, visit_id)
    db.commit()
    return visit


@router.patch("/{visit_id}", response_model=VisitRead)
def update_visit(visit_id: UUID, data: VisitUpdate, db: Session = Depends(get_db)):
    visit = visit_service.update_visit(db, visit_id, data)
    db.commit()
    return visit


@router.delete("/{visit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_visit(visit_id: UUID, db: Session = Depends(get_db)):
    visit_service.delete_visit(db, visit_id)
    db.commit()
