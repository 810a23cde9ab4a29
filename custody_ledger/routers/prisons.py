"""Prison (facility) endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from custody_ledger.core.deps import get_db
from custody_ledger.db.enums import PrisonType
from custody_ledger.schemas.facilities import PrisonCreate, PrisonRead, PrisonUpdate
from custody_ledger.schemas.relations import OfficerSummary
from custody_ledger.services import facility_service, relations_service

router = APIRouter()


@router.get("", response_model=list[PrisonRead])
def list_prisons(
    active_only: bool = False,
    type: PrisonType | None = None,
    db: Session = Depends(get_db),
):
    """List prisons, optionally only active ones or one type."""
    return facility_service.list_prisons(
        db, active_only=active_only, prison_type=type.value if type else None
    )


@router.get("/{prison_id}", response_model=PrisonRead)
def get_prison(prison_id: UUID, db: Session = Depends(get_db)):
    prison = facility_service.get_prison(db, prison_id)
    if not prison:
        raise HTTPException(status_code=404, detail="Prison not found")
    return prison


@router.get("/{prison_id}/officers", response_model=list[OfficerSummary])
def list_prison_officers(prison_id: UUID, db: Session = Depends(get_db)):
    """Officers of a prison with biometric counts and today's attendance."""
    return relations_service.list_officer_summaries(db, prison_id)


@router.post("", response_model=PrisonRead, status_code=status.HTTP_201_CREATED)
def create_prison(data: PrisonCreate, db: Session = Depends(get_db)):
    prison = facility_service.create_prison(db, data)
    db.commit()
    return prison


@router.patch("/{prison_id}", response_model=PrisonRead)
def update_prison(prison_id: UUID, data: PrisonUpdate, db: Session = Depends(get_db)):
    prison = facility_service.update_prison(db, prison_id, data)
    db.commit()
    return prison


@router.delete("/{prison_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_prison(prison_id: UUID, db: Session = Depends(get_db)):
    facility_service.delete_prison(db, prison_id)
    db.commit()
