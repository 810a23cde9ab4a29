"""Court appearance endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from custody_ledger.core.deps import get_db
from custody_ledger.schemas.custody import (
    CourtAppearanceCreate,
    CourtAppearanceRead,
    CourtAppearanceUpdate,
    CourtOutcomeRecord,
)
from custody_ledger.services import court_service

router = APIRouter()


@router.get("", response_model=list[CourtAppearanceRead])
def list_appearances(inmate_id: UUID | None = None, db: Session = Depends(get_db)):
    return court_service.list_appearances(db, inmate_id=inmate_id)


@router.get("/upcoming", response_model=list[CourtAppearanceRead])
def list_upcoming(from_date: date | None = None, db: Session = Depends(get_db)):
    """Appearances on or after `from_date` (default today)."""
    return court_service.list_upcoming(db, from_date or date.today())


@router.get("/{appearance_id}", response_model=CourtAppearanceRead)
def get_appearance(appearance_id: UUID, db: Session = Depends(get_db)):
    appearance = court_service.get_appearance(db, appearance_id)
    if not appearance:
        raise HTTPException(status_code=404, detail="Court appearance not found")
    return appearance


@router.post("", response_model=CourtAppearanceRead, status_code=status.HTTP_201_CREATED)
def schedule_appearance(data: CourtAppearanceCreate, db: Session = Depends(get_db)):
    appearance = court_service.schedule_appearance(db, data)
    db.commit()
    return appearance


@router.post("/{appearance_id}/outcome", response_model=CourtAppearanceRead)
def record_outcome(
    appearance_id: UUID, data: CourtOutcomeRecord, db: Session = Depends(get_db)
):
    appearance = court_service.record_outcome(db, appearance_id, data)
    db.commit()
    return appearance


@router.patch("/{appearance_id}", response_model=CourtAppearanceRead)
def update_appearance(
    appearance_id: UUID, data: CourtAppearanceUpdate, db: Session = Depends(get_db)
):
    appearance = court_service.update_appearance(db, appearance_id, data)
    db.commit()
    return appearance


@router.delete("/{appearance_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_appearance(appearance_id: UUID, db: Session = Depends(get_db)):
    court_service.delete_appearance(db, appearance_id)
    db.commit()
