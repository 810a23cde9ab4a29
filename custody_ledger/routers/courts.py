"""Court and offense lookup endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from custody_ledger.core.deps import get_db
from custody_ledger.db.enums import CourtType, OffenseCategory
from custody_ledger.schemas.facilities import (
    CourtCreate,
    CourtRead,
    CourtUpdate,
    OffenseCreate,
    OffenseRead,
    OffenseUpdate,
)
from custody_ledger.services import facility_service

router = APIRouter()


# =============================================================================
# Courts
# =============================================================================

@router.get("/courts", response_model=list[CourtRead])
def list_courts(type: CourtType | None = None, db: Session = Depends(get_db)):
    return facility_service.list_courts(db, court_type=type.value if type else None)


@router.get("/courts/{court_id}", response_model=CourtRead)
def get_court(court_id: UUID, db: Session = Depends(get_db)):
    court = facility_service.get_court(db, court_id)
    if not court:
        raise HTTPException(status_code=404, detail="Court not found")
    return court


@router.post("/courts", response_model=CourtRead, status_code=status.HTTP_201_CREATED)
def create_court(data: CourtCreate, db: Session = Depends(get_db)):
    court = facility_service.create_court(db, data)
    db.commit()
    return court


@router.patch("/courts/{court_id}", response_model=CourtRead)
def update_court(court_id: UUID, data: CourtUpdate, db: Session = Depends(get_db)):
    court = facility_service.update_court(db, court_id, data)
    db.commit()
    return court


@router.delete("/courts/{court_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_court(court_id: UUID, db: Session = Depends(get_db)):
    facility_service.delete_court(db, court_id)
    db.commit()


# =============================================================================
# Offenses
# =============================================================================

@router.get("/offenses", response_model=list[OffenseRead])
def list_offenses(category: OffenseCategory | None = None, db: Session = Depends(get_db)):
    return facility_service.list_offenses(db, category=category.value if category else None)


@router.get("/offenses/{offense_id}", response_model=OffenseRead)
def get_offense(offense_id: UUID, db: Session = Depends(get_db)):
    offense = facility_service.get_offense(db, offense_id)
    if not offense:
        raise HTTPException(status_code=404, detail="Offense not found")
    return offense


@router.post("/offenses", response_model=OffenseRead, status_code=status.HTTP_201_CREATED)
def create_offense(data: OffenseCreate, db: Session = Depends(get_db)):
    offense = facility_service.create_offense(db, data)
    db.commit()
    return offense


@router.patch("/offenses/{offense_id}", response_model=OffenseRead)
def update_offense(offense_id: UUID, data: OffenseUpdate, db: Session = Depends(get_db)):
    offense = facility_service.update_offense(db, offense_id, data)
    db.commit()
    return offense


@router.delete("/offenses/{offense_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_offense(offense_id: UUID, db: Session = Depends(get_db)):
    facility_service.delete_offense(db, offense_id)
    db.commit()
