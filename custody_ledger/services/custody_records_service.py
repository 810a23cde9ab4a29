"""Per-inmate side records: charges, items in custody, medical records."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from custody_ledger.db.models import InmateCharge, ItemInCustody, MedicalRecord
from custody_ledger.schemas.inmate import ChargeCreate, ChargeStatusUpdate
from custody_ledger.schemas.records import (
    ItemCreate,
    ItemReturn,
    ItemUpdate,
    MedicalRecordCreate,
    MedicalRecordUpdate,
)
from custody_ledger.services import registration_validators


# =============================================================================
# Charges
# =============================================================================

def list_charges(db: Session, inmate_id: UUID) -> list[InmateCharge]:
    return list(
        db.execute(
            select(InmateCharge)
            .where(InmateCharge.inmate_id == inmate_id)
            .order_by(InmateCharge.is_primary.desc(), InmateCharge.created_at)
        ).scalars().all()
    )


def create_charge(db: Session, data: ChargeCreate) -> InmateCharge:
    registration_validators.require_inmate(db, data.inmate_id)
    registration_validators.require_offense(db, data.offense_id)
    charge = InmateCharge(**data.model_dump())
    db.add(charge)
    db.flush()
    return charge


def update_charge_status(db: Session, charge_id: UUID, data: ChargeStatusUpdate) -> InmateCharge:
    charge = registration_validators.require(db, InmateCharge, charge_id, "Charge")
    charge.status = data.status
    if data.notes:
        charge.notes = data.notes
    db.flush()
    return charge


def delete_charge(db: Session, charge_id: UUID) -> None:
    charge = registration_validators.require(db, InmateCharge, charge_id, "Charge")
    db.delete(charge)
    db.flush()


# =============================================================================
# Items in custody
# =============================================================================

def list_items(db: Session, inmate_id: UUID | None = None) -> list[ItemInCustody]:
    query = select(ItemInCustody)
    if inmate_id:
        query = query.where(ItemInCustody.inmate_id == inmate_id)
    return list(db.execute(query.order_by(ItemInCustody.created_at)).scalars().all())


def list_unreturned_items(db: Session, inmate_id: UUID | None = None) -> list[ItemInCustody]:
    query = select(ItemInCustody).where(ItemInCustody.returned_at.is_(None))
    if inmate_id:
        query = query.where(ItemInCustody.inmate_id == inmate_id)
    return list(db.execute(query.order_by(ItemInCustody.created_at)).scalars().all())


def create_item(db: Session, data: ItemCreate) -> ItemInCustody:
    registration_validators.require_inmate(db, data.inmate_id)
    item = ItemInCustody(**data.model_dump())
    db.add(item)
    db.flush()
    return item


def return_item(db: Session, item_id: UUID, data: ItemReturn) -> ItemInCustody:
    item = registration_validators.require(db, ItemInCustody, item_id, "Item")
    item.returned_at = data.returned_at
    item.returned_to_name = data.returned_to_name
    db.flush()
    return item


def update_item(db: Session, item_id: UUID, data: ItemUpdate) -> ItemInCustody:
    item = registration_validators.require(db, ItemInCustody, item_id, "Item")
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(item, field, value)
    db.flush()
    return item


def delete_item(db: Session, item_id: UUID) -> None:
    item = registration_validators.require(db, ItemInCustody, item_id, "Item")
    db.delete(item)
    db.flush()


# =============================================================================
# Medical records
# =============================================================================

def list_medical_records(
    db: Session, inmate_id: UUID | None = None, record_type: str | None = None
) -> list[MedicalRecord]:
    query = select(MedicalRecord)
    if inmate_id:
        query = query.where(MedicalRecord.inmate_id == inmate_id)
    if record_type:
        query = query.where(MedicalRecord.record_type == record_type)
    return list(db.execute(query.order_by(MedicalRecord.record_date.desc())).scalars().all())


def create_medical_record(db: Session, data: MedicalRecordCreate) -> MedicalRecord:
    registration_validators.require_inmate(db, data.inmate_id)
    record = MedicalRecord(**data.model_dump())
    db.add(record)
    db.flush()
    return record


def update_medical_record(
    db: Session, record_id: UUID, data: MedicalRecordUpdate
) -> MedicalRecord:
    record = registration_validators.require(db, MedicalRecord, record_id, "Medical record")
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(record, field, value)
    db.flush()
    return record


def delete_medical_record(db: Session, record_id: UUID) -> None:
    record = registration_validators.require(db, MedicalRecord, record_id, "Medical record")
    db.delete(record)
    db.flush()
