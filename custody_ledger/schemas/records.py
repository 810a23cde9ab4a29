"""Pydantic schemas for visits, custody records and officer attendance."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from custody_ledger.db.enums import (
    AttendanceShift,
    AttendanceStatus,
    ItemCondition,
    MedicalRecordType,
    VisitorIdType,
    VisitStatus,
)


# =============================================================================
# Visits
# =============================================================================

class VisitCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    inmate_id: UUID
    prison_id: UUID
    full_name: str = Field(..., min_length=1, max_length=255)
    id_number: str = Field(..., min_length=1, max_length=100)
    id_type: VisitorIdType | None = None
    relationship: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=50)
    address: str | None = None
    email: str | None = None
    reason: str | None = None
    scheduled_date: date | None = None
    items_declaration: str | None = None
    notes: str | None = None


class VisitCheckIn(BaseModel):
    check_in_time: datetime | None = None
    approved_by_id: UUID | None = None
    items_declaration: str | None = None


class VisitCheckOut(BaseModel):
    check_out_time: datetime | None = None
    flagged: bool | None = None
    flag_reason: str | None = None


class VisitDeny(BaseModel):
    denial_reason: str = Field(..., min_length=1)


class VisitUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    full_name: str | None = Field(None, min_length=1, max_length=255)
    id_number: str | None = Field(None, min_length=1, max_length=100)
    id_type: VisitorIdType | None = None
    relationship: str | None = Field(None, min_length=1, max_length=100)
    phone: str | None = Field(None, min_length=1, max_length=50)
    address: str | None = None
    email: str | None = None
    reason: str | None = None
    scheduled_date: date | None = None
    notes: str | None = None


class VisitRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    inmate_id: UUID
    prison_id: UUID
    full_name: str
    id_number: str
    id_type: VisitorIdType | None
    relationship: str
    phone: str
    address: str | None
    email: str | None
    reason: str | None
    scheduled_date: date | None
    check_in_time: datetime | None
    check_out_time: datetime | None
    status: VisitStatus
    denial_reason: str | None
    items_declaration: str | None
    flagged: bool
    flag_reason: str | None
    approved_by_id: UUID | None
    notes: str | None
    created_at: datetime


# =============================================================================
# Items in custody
# =============================================================================

class ItemCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    inmate_id: UUID
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    value: Decimal | None = Field(None, ge=0)
    condition: ItemCondition | None = None
    storage_location: str | None = None


class ItemReturn(BaseModel):
    returned_at: date
    returned_to_name: str = Field(..., min_length=1, max_length=255)


class ItemUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    value: Decimal | None = Field(None, ge=0)
    condition: ItemCondition | None = None
    storage_location: str | None = None


class ItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    inmate_id: UUID
    name: str
    description: str | None
    value: Decimal | None
    condition: ItemCondition | None
    storage_location: str | None
    returned_at: date | None
    returned_to_name: str | None
    created_at: datetime


# =============================================================================
# Medical records
# =============================================================================

class MedicalRecordCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    inmate_id: UUID
    record_type: MedicalRecordType
    diagnosis: str | None = None
    treatment: str | None = None
    attended_by: str | None = None
    referred_to_hospital: str | None = None
    record_date: date
    notes: str | None = None


class MedicalRecordUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    record_type: MedicalRecordType | None = None
    diagnosis: str | None = None
    treatment: str | None = None
    attended_by: str | None = None
    referred_to_hospital: str | None = None
    record_date: date | None = None
    notes: str | None = None


class MedicalRecordRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    inmate_id: UUID
    record_type: MedicalRecordType
    diagnosis: str | None
    treatment: str | None
    attended_by: str | None
    referred_to_hospital: str | None
    record_date: date
    notes: str | None
    created_at: datetime


# =============================================================================
# Officer attendance
# =============================================================================

class AttendanceRecord(BaseModel):
    """Full record for an (officer, date, shift) slot; re-recording overwrites it."""

    model_config = ConfigDict(use_enum_values=True)

    officer_id: UUID
    prison_id: UUID
    date: date
    shift: AttendanceShift
    status: AttendanceStatus
    check_in_time: datetime | None = None
    check_out_time: datetime | None = None
    hours_worked: Decimal | None = Field(None, ge=0, le=24)
    notes: str | None = None
    recorded_by_id: UUID | None = None


class ClockIn(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    officer_id: UUID
    prison_id: UUID
    date: date
    shift: AttendanceShift
    check_in_time: datetime | None = None
    recorded_by_id: UUID | None = None


class ClockOut(BaseModel):
    check_out_time: datetime | None = None
    hours_worked: Decimal | None = Field(None, ge=0, le=24)
    notes: str | None = None


class MarkAbsent(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    officer_id: UUID
    prison_id: UUID
    date: date
    shift: AttendanceShift
    status: AttendanceStatus = AttendanceStatus.ABSENT.value
    notes: str | None = None
    recorded_by_id: UUID | None = None


class AttendanceUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: AttendanceStatus | None = None
    shift: AttendanceShift | None = None
    check_in_time: datetime | None = None
    check_out_time: datetime | None = None
    hours_worked: Decimal | None = Field(None, ge=0, le=24)
    notes: str | None = None


class AttendanceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    officer_id: UUID
    prison_id: UUID
    date: date
    shift: AttendanceShift
    status: AttendanceStatus
    check_in_time: datetime | None
    check_out_time: datetime | None
    hours_worked: Decimal | None
    notes: str | None
    recorded_by_id: UUID | None
    created_at: datetime


class AttendanceSummary(BaseModel):
    """Count of records per status over a date range."""

    present: int = 0
    absent: int = 0
    late: int = 0
    on_leave: int = 0
    sick_leave: int = 0
    off_duty: int = 0
    total: int = 0
