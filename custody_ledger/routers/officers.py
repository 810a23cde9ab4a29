"""Officer endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from custody_ledger.core.deps import get_db
from custody_ledger.schemas.facilities import OfficerCreate, OfficerRead, OfficerUpdate
from custody_ledger.schemas.relations import OfficerDetail
from custody_ledger.services import facility_service, relations_service

router = APIRouter()


@router.get("", response_model=list[OfficerRead])
def list_officers(
    prison_id: UUID | None = None,
    active_only: bool = False,
    db: Session = Depends(get_db),
):
    return facility_service.list_officers(db, prison_id=prison_id, active_only=active_only)


@router.get("/by-badge/{badge_number}", response_model=OfficerRead)
def get_officer_by_badge(badge_number: str, db: Session = Depends(get_db)):
    officer = facility_service.get_officer_by_badge(db, badge_number)
    if not officer:
        raise HTTPException(status_code=404, detail="Officer not found")
    return officer


@router.get("/{officer_id}", response_model=OfficerRead)
def get_officer(officer_id: UUID, db: Session = Depends(get_db)):
    officer = facility_service.get_officer(db, officer_id)
    if not officer:
        raise HTTPException(status_code=404, detail="Officer not found")
    return officer


@router.get("/{officer_id}/detail", response_model=OfficerDetail)
def get_officer_detail(officer_id: UUID, db: Session = Depends(get_db)):
    """Officer with photos, fingerprints and attendance."""
    return relations_service.get_officer_detail(db, officer_id)


@router.post("", response_model=OfficerRead, status_code=status.HTTP_201_CREATED)
def create_officer(data: OfficerCreate, db: Session = Depends(get_db)):
    officer = facility_service.create_officer(db, data)
    db.commit()
    return officer


@router.patch("/{officer_id}", response_model=OfficerRead)
def update_officer(officer_id: UUID, data: OfficerUpdate, db: Session = Depends(get_db)):
    officer = facility_service.update_officer(db, officer_id, data)
    db.commit()
    return officer


@router.delete("/{officer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_officer(officer_id: UUID, db: Session = Depends(get_db)):
    facility_service.delete_officer(db, officer_id)
    db.commit()
