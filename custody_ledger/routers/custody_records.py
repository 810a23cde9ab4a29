"""Charges, items in custody and medical records."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from custody_ledger.core.deps import get_db
from custody_ledger.db.enums import MedicalRecordType
from custody_ledger.schemas.inmate import ChargeCreate, ChargeRead, ChargeStatusUpdate
from custody_ledger.schemas.records import (
    ItemCreate,
    ItemRead,
    ItemReturn,
    ItemUpdate,
    MedicalRecordCreate,
    MedicalRecordRead,
    MedicalRecordUpdate,
)
from custody_ledger.services import custody_records_service

router = APIRouter()


# =============================================================================
# Charges
# =============================================================================

@router.get("/charges", response_model=list[ChargeRead])
def list_charges(inmate_id: UUID, db: Session = Depends(get_db)):
    """Charges of an inmate, primary charge first."""
    return custody_records_service.list_charges(db, inmate_id)


@router.post("/charges", response_model=ChargeRead, status_code=status.HTTP_201_CREATED)
def create_charge(data: ChargeCreate, db: Session = Depends(get_db)):
    charge = custody_records_service.create_charge(db, data)
    db.commit()
    return charge


@router.post("/charges/{charge_id}/status", response_model=ChargeRead)
def update_charge_status(
    charge_id: UUID, data: ChargeStatusUpdate, db: Session = Depends(get_db)
):
    charge = custody_records_service.update_charge_status(db, charge_id, data)
    db.commit()
    return charge


@router.delete("/charges/{charge_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_charge(charge_id: UUID, db: Session = Depends(get_db)):
    custody_records_service.delete_charge(db, charge_id)
    db.commit()


# =============================================================================
# Items in custody
# =============================================================================

@router.get("/items", response_model=list[ItemRead])
def list_items(inmate_id: UUID | None = None, db: Session = Depends(get_db)):
    return custody_records_service.list_items(db, inmate_id=inmate_id)


@router.get("/items/unreturned", response_model=list[ItemRead])
def list_unreturned_items(inmate_id: UUID | None = None, db: Session = Depends(get_db)):
    return custody_records_service.list_unreturned_items(db, inmate_id=inmate_id)


@router.post("/items", response_model=ItemRead, status_code=status.HTTP_201_CREATED)
def create_item(data: ItemCreate, db: Session = Depends(get_db)):
    item = custody_records_service.create_item(db, data)
    db.commit()
    return item


@router.post("/items/{item_id}/return", response_model=ItemRead)
def return_item(item_id: UUID, data: ItemReturn, db: Session = Depends(get_db)):
    item = custody_records_service.return_item(db, item_id, data)
    db.commit()
    return item


@router.patch("/items/{item_id}", response_model=ItemRead)
def update_item(item_id: UUID, data: ItemUpdate, db: Session = Depends(get_db)):
    item = custody_records_service.update_item(db, item_id, data)
    db.commit()
    return item


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(item_id: UUID, db: Session = Depends(get_db)):
    custody_records_service.delete_item(db, item_id)
    db.commit()


# =============================================================================
# Medical records
# =============================================================================

@router.get("/medical-records", response_model=list[MedicalRecordRead])
def list_medical_records(
    inmate_id: UUID | None = None,
    record_type: MedicalRecordType | None = None,
    db: Session = Depends(get_db),
):
    return custody_records_service.list_medical_records(
        db,
        inmate_id=inmate_id,
        record_type=record_type.value if record_type else None,
    )


@router.post(
    "/medical-records", response_model=MedicalRecordRead, status_code=status.HTTP_201_CREATED
)
def create_medical_record(data: MedicalRecordCreate, db: Session = Depends(get_db)):
    record = custody_records_service.create_medical_record(db, data)
    db.commit()
    return record


@router.patch("/medical-records/{record_id}", response_model=MedicalRecordRead)
def update_medical_record(
    record_id: UUID, data: MedicalRecordUpdate, db: Session = Depends(get_db)
):
    record = custody_records_service.update_medical_record(db, record_id, data)
    db.commit()
    return record


@router.delete("/medical-records/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_medical_record(record_id: UUID, db: Session = Depends(get_db)):
    custody_records_service.delete_medical_record(db, record_id)
    db.commit()
