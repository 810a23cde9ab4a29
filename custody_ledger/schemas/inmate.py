"""Pydantic schemas for inmates and their charges."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from custody_ledger.db.enums import (
    DEFAULT_CHARGE_STATUS,
    ChargeStatus,
    Gender,
    InmateStatus,
    InmateType,
    ReleaseReason,
    RiskLevel,
)


# =============================================================================
# Inmates
# =============================================================================

class InmateCreate(BaseModel):
    """Admission record. Status starts at remand unless supplied."""

    model_config = ConfigDict(use_enum_values=True)

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    other_names: str | None = None
    prison_number: str = Field(..., min_length=1, max_length=50)
    national_id: str | None = None
    dob: date
    gender: Gender
    nationality: str | None = None
    tribe: str | None = None
    religion: str | None = None
    education_level: str | None = None
    marital_status: str | None = None
    occupation: str | None = None

    next_of_kin_name: str | None = None
    next_of_kin_phone: str | None = None
    next_of_kin_relationship: str | None = None

    inmate_type: InmateType
    status: InmateStatus | None = None
    risk_level: RiskLevel | None = None
    prison_id: UUID
    cell_block: str | None = None
    cell_number: str | None = None

    case_number: str = Field(..., min_length=1, max_length=100)
    offense_id: UUID
    arresting_station: str | None = None
    admission_date: date
    remand_expiry: date | None = None
    next_court_date: date | None = None

    conviction_date: date | None = None
    sentence_start: date | None = None
    sentence_end: date | None = None
    sentence_duration: str | None = None
    is_life_sentence: bool | None = None
    fine_amount: Decimal | None = Field(None, ge=0)
    fine_paid: bool | None = None

    notes: str | None = None


class InmateUpdate(BaseModel):
    """
    Partial update of mutable fields.

    `prison_number` is immutable and `status` changes only through
    recorded events or the status endpoint.
    """

    model_config = ConfigDict(use_enum_values=True)

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    other_names: str | None = None
    national_id: str | None = None
    dob: date | None = None
    gender: Gender | None = None
    nationality: str | None = None
    tribe: str | None = None
    religion: str | None = None
    education_level: str | None = None
    marital_status: str | None = None
    occupation: str | None = None

    next_of_kin_name: str | None = None
    next_of_kin_phone: str | None = None
    next_of_kin_relationship: str | None = None

    inmate_type: InmateType | None = None
    risk_level: RiskLevel | None = None
    prison_id: UUID | None = None
    cell_block: str | None = None
    cell_number: str | None = None

    case_number: str | None = Field(None, min_length=1, max_length=100)
    offense_id: UUID | None = None
    arresting_station: str | None = None
    admission_date: date | None = None
    remand_expiry: date | None = None
    next_court_date: date | None = None

    conviction_date: date | None = None
    sentence_start: date | None = None
    sentence_end: date | None = None
    sentence_duration: str | None = None
    is_life_sentence: bool | None = None
    fine_amount: Decimal | None = Field(None, ge=0)
    fine_paid: bool | None = None

    notes: str | None = None


class InmateStatusUpdate(BaseModel):
    """Direct administrative status edit (the only way into escaped/deceased)."""

    model_config = ConfigDict(use_enum_values=True)

    status: InmateStatus


class InmateRelease(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    release_date: date
    reason: ReleaseReason
    notes: str | None = None


class InmateRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str
    other_names: str | None
    prison_number: str
    national_id: str | None
    dob: date
    gender: Gender
    nationality: str | None
    tribe: str | None
    religion: str | None
    education_level: str | None
    marital_status: str | None
    occupation: str | None

    next_of_kin_name: str | None
    next_of_kin_phone: str | None
    next_of_kin_relationship: str | None

    inmate_type: InmateType
    status: InmateStatus
    risk_level: RiskLevel | None
    prison_id: UUID
    cell_block: str | None
    cell_number: str | None

    case_number: str
    offense_id: UUID
    arresting_station: str | None
    admission_date: date
    remand_expiry: date | None
    next_court_date: date | None

    conviction_date: date | None
    sentence_start: date | None
    sentence_end: date | None
    sentence_duration: str | None
    is_life_sentence: bool | None
    fine_amount: Decimal | None
    fine_paid: bool | None

    actual_release_date: date | None
    release_reason: ReleaseReason | None
    notes: str | None

    created_at: datetime
    updated_at: datetime


# =============================================================================
# Charges
# =============================================================================

class ChargeCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    inmate_id: UUID
    offense_id: UUID
    is_primary: bool = False
    status: ChargeStatus = DEFAULT_CHARGE_STATUS.value
    notes: str | None = None


class ChargeStatusUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: ChargeStatus
    notes: str | None = None


class ChargeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    inmate_id: UUID
    offense_id: UUID
    is_primary: bool
    status: ChargeStatus
    notes: str | None
    created_at: datetime
