"""Movement endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from custody_ledger.core.deps import get_db
from custody_ledger.db.enums import MovementType
from custody_ledger.schemas.custody import (
    MovementCreate,
    MovementRead,
    MovementReturn,
    MovementUpdate,
)
from custody_ledger.services import movement_service

router = APIRouter()


@router.get("", response_model=list[MovementRead])
def list_movements(
    inmate_id: UUID | None = None,
    movement_type: MovementType | None = None,
    db: Session = Depends(get_db),
):
    return movement_service.list_movements(
        db,
        inmate_id=inmate_id,
        movement_type=movement_type.value if movement_type else None,
    )


@router.get("/open", response_model=list[MovementRead])
def list_open_movements(db: Session = Depends(get_db)):
    """Movements without a return date."""
    return movement_service.list_open_movements(db)


@router.get("/{movement_id}", response_model=MovementRead)
def get_movement(movement_id: UUID, db: Session = Depends(get_db)):
    movement = movement_service.get_movement(db, movement_id)
    if not movement:
        raise HTTPException(status_code=404, detail="Movement not found")
    return movement


@router.post("", response_model=MovementRead, status_code=status.HTTP_201_CREATED)
def record_movement(data: MovementCreate, db: Session = Depends(get_db)):
    """Record a movement; the inmate's status and prison follow from its type."""
    movement = movement_service.record_movement(db, data)
    db.commit()
    return movement


@router.post("/{movement_id}/return", response_model=MovementRead)
def record_return(movement_id: UUID, data: MovementReturn, db: Session = Depends(get_db)):
    movement = movement_service.record_return(db, movement_id, data)
    db.commit()
    return movement


@router.patch("/{movement_id}", response_model=MovementRead)
def update_movement(movement_id: UUID, data: MovementUpdate, db: Session = Depends(get_db)):
    movement = movement_service.update_movement(db, movement_id, data)
    db.commit()
    return movement


@router.delete("/{movement_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movement(movement_id: UUID, db: Session = Depends(get_db)):
    movement_service.delete_movement(db, movement_id)
    db.commit()
