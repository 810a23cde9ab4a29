"""Pydantic schemas for prisons, courts, offenses and officers."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from custody_ledger.db.enums import CourtType, OffenseCategory, PrisonType


# =============================================================================
# Prisons
# =============================================================================

class PrisonCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=1, max_length=255)
    code: str = Field(..., min_length=1, max_length=50)
    type: PrisonType
    region: str | None = None
    district: str | None = None
    address: str | None = None
    capacity: int | None = Field(None, ge=0)
    contact_phone: str | None = None
    is_active: bool = True


class PrisonUpdate(BaseModel):
    """Partial update; only explicitly provided fields change."""

    model_config = ConfigDict(use_enum_values=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    code: str | None = Field(None, min_length=1, max_length=50)
    type: PrisonType | None = None
    region: str | None = None
    district: str | None = None
    address: str | None = None
    capacity: int | None = Field(None, ge=0)
    contact_phone: str | None = None
    is_active: bool | None = None


class PrisonRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    code: str
    type: PrisonType
    region: str | None
    district: str | None
    address: str | None
    capacity: int | None
    contact_phone: str | None
    is_active: bool
    created_at: datetime


# =============================================================================
# Courts
# =============================================================================

class CourtCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=1, max_length=255)
    type: CourtType | None = None
    district: str | None = None
    address: str | None = None


class CourtUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    type: CourtType | None = None
    district: str | None = None
    address: str | None = None


class CourtRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    type: CourtType | None
    district: str | None
    address: str | None
    created_at: datetime


# =============================================================================
# Offenses
# =============================================================================

class OffenseCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=1, max_length=255)
    act: str | None = None
    section: str | None = None
    chapter: str | None = None
    category: OffenseCategory | None = None
    amended_by: str | None = None
    description: str | None = None
    max_sentence_years: int | None = Field(None, ge=0)


class OffenseUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    act: str | None = None
    section: str | None = None
    chapter: str | None = None
    category: OffenseCategory | None = None
    amended_by: str | None = None
    description: str | None = None
    max_sentence_years: int | None = Field(None, ge=0)


class OffenseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    act: str | None
    section: str | None
    chapter: str | None
    category: OffenseCategory | None
    amended_by: str | None
    description: str | None
    max_sentence_years: int | None
    created_at: datetime


# =============================================================================
# Officers
# =============================================================================

class OfficerCreate(BaseModel):
    prison_id: UUID
    name: str = Field(..., min_length=1, max_length=255)
    badge_number: str = Field(..., min_length=1, max_length=50)
    rank: str | None = None
    phone: str | None = None
    is_active: bool = True


class OfficerUpdate(BaseModel):
    """Badge number is the business key and cannot be changed."""

    prison_id: UUID | None = None
    name: str | None = Field(None, min_length=1, max_length=255)
    rank: str | None = None
    phone: str | None = None
    is_active: bool | None = None


class OfficerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    prison_id: UUID
    name: str
    badge_number: str
    rank: str | None
    phone: str | None
    is_active: bool
    created_at: datetime
