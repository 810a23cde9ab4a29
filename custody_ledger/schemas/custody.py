"""Pydantic schemas for movements and court appearances."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from custody_ledger.db.enums import CourtOutcome, MovementType


# =============================================================================
# Movements
# =============================================================================

class MovementCreate(BaseModel):
    """`to_prison_id` is required when `movement_type` is transfer."""

    model_config = ConfigDict(use_enum_values=True)

    inmate_id: UUID
    movement_type: MovementType
    from_prison_id: UUID | None = None
    to_prison_id: UUID | None = None
    destination: str | None = Field(None, max_length=255)
    officer_id: UUID | None = None
    departure_date: date
    return_date: date | None = None
    reason: str = Field(..., min_length=1)
    notes: str | None = None


class MovementReturn(BaseModel):
    return_date: date
    notes: str | None = None


class MovementUpdate(BaseModel):
    """Non-derived fields only; type and destination prison are fixed once recorded."""

    destination: str | None = Field(None, max_length=255)
    officer_id: UUID | None = None
    departure_date: date | None = None
    return_date: date | None = None
    reason: str | None = Field(None, min_length=1)
    notes: str | None = None


class MovementRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    inmate_id: UUID
    movement_type: MovementType
    from_prison_id: UUID | None
    to_prison_id: UUID | None
    destination: str | None
    officer_id: UUID | None
    departure_date: date
    return_date: date | None
    reason: str
    notes: str | None
    created_at: datetime


# =============================================================================
# Court appearances
# =============================================================================

class CourtAppearanceCreate(BaseModel):
    inmate_id: UUID
    court_id: UUID
    officer_id: UUID | None = None
    scheduled_date: date
    notes: str | None = None


class CourtOutcomeRecord(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    outcome: CourtOutcome
    next_date: date | None = None
    departure_time: datetime | None = None
    return_time: datetime | None = None
    notes: str | None = None


class CourtAppearanceUpdate(BaseModel):
    court_id: UUID | None = None
    officer_id: UUID | None = None
    scheduled_date: date | None = None
    departure_time: datetime | None = None
    return_time: datetime | None = None
    notes: str | None = None


class CourtAppearanceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    inmate_id: UUID
    court_id: UUID
    officer_id: UUID | None
    scheduled_date: date
    departure_time: datetime | None
    return_time: datetime | None
    outcome: CourtOutcome | None
    next_date: date | None
    notes: str | None
    created_at: datetime
