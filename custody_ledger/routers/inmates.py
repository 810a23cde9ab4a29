"""Inmate endpoints: registration, lookup, status and release."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from custody_ledger.core.deps import get_db
from custody_ledger.db.enums import InmateStatus, InmateType, RiskLevel
from custody_ledger.schemas.inmate import (
    InmateCreate,
    InmateRead,
    InmateRelease,
    InmateStatusUpdate,
    InmateUpdate,
)
from custody_ledger.schemas.relations import InmateDetail
from custody_ledger.services import inmate_service, relations_service

router = APIRouter()


@router.get("", response_model=list[InmateRead])
def list_inmates(
    prison_id: UUID | None = None,
    status: InmateStatus | None = None,
    inmate_type: InmateType | None = None,
    risk_level: RiskLevel | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """List/search inmates."""
    return inmate_service.list_inmates(
        db,
        prison_id=prison_id,
        status=status.value if status else None,
        inmate_type=inmate_type.value if inmate_type else None,
        risk_level=risk_level.value if risk_level else None,
        q=q,
    )


@router.get("/lookup", response_model=InmateRead)
def lookup_by_prison_number(prison_number: str, db: Session = Depends(get_db)):
    """Find an inmate by prison number (query param; numbers contain slashes)."""
    inmate = inmate_service.get_by_prison_number(db, prison_number)
    if not inmate:
        raise HTTPException(status_code=404, detail="Inmate not found")
    return inmate


@router.get("/by-national-id/{national_id}", response_model=list[InmateRead])
def list_by_national_id(national_id: str, db: Session = Depends(get_db)):
    return inmate_service.list_by_national_id(db, national_id)


@router.get("/{inmate_id}", response_model=InmateRead)
def get_inmate(inmate_id: UUID, db: Session = Depends(get_db)):
    inmate = inmate_service.get_inmate(db, inmate_id)
    if not inmate:
        raise HTTPException(status_code=404, detail="Inmate not found")
    return inmate


@router.get("/{inmate_id}/detail", response_model=InmateDetail)
def get_inmate_detail(inmate_id: UUID, db: Session = Depends(get_db)):
    """Inmate with prison, offense, charges, activity and biometrics."""
    return relations_service.get_inmate_detail(db, inmate_id)


@router.post("", response_model=InmateRead, status_code=status.HTTP_201_CREATED)
def register_inmate(data: InmateCreate, db: Session = Depends(get_db)):
    inmate = inmate_service.register_inmate(db, data)
    db.commit()
    return inmate


@router.patch("/{inmate_id}", response_model=InmateRead)
def update_inmate(inmate_id: UUID, data: InmateUpdate, db: Session = Depends(get_db)):
    inmate = inmate_service.update_inmate(db, inmate_id, data)
    db.commit()
    return inmate


@router.post("/{inmate_id}/status", response_model=InmateRead)
def update_status(inmate_id: UUID, data: InmateStatusUpdate, db: Session = Depends(get_db)):
    """Set status directly (e.g. after a return, or escaped/deceased)."""
    inmate = inmate_service.update_status(db, inmate_id, data.status)
    db.commit()
    return inmate


@router.post("/{inmate_id}/release", response_model=InmateRead)
def release_inmate(inmate_id: UUID, data: InmateRelease, db: Session = Depends(get_db)):
    inmate = inmate_service.release_inmate(db, inmate_id, data)
    db.commit()
    return inmate


@router.delete("/{inmate_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inmate(inmate_id: UUID, db: Session = Depends(get_db)):
    inmate_service.delete_inmate(db, inmate_id)
    db.commit()
