"""Pydantic schemas for photos and fingerprints."""

from datetime import datetime
from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from custody_ledger.db.enums import Finger, FingerprintProvider, PhotoProvider, PhotoType


# =============================================================================
# Subject (tagged union)
# =============================================================================

class InmateSubjectRef(BaseModel):
    subject_type: Literal["inmate"] = "inmate"
    id: UUID


class OfficerSubjectRef(BaseModel):
    subject_type: Literal["officer"] = "officer"
    id: UUID


SubjectRef = Annotated[
    Union[InmateSubjectRef, OfficerSubjectRef],
    Field(discriminator="subject_type"),
]


# =============================================================================
# Photos
# =============================================================================

class PhotoCreate(BaseModel):
    """
    Payload required per provider:
    - internal: storage_key
    - upload: storage_key or base64_preview
    - external_url: external_url
    """

    model_config = ConfigDict(use_enum_values=True)

    subject: SubjectRef
    photo_type: PhotoType
    provider: PhotoProvider
    storage_key: str | None = Field(None, max_length=512)
    external_url: str | None = None
    base64_preview: str | None = None
    file_size: int | None = Field(None, ge=0)
    mime_type: str | None = Field(None, max_length=100)
    captured_at: datetime | None = None
    captured_by_id: UUID | None = None
    is_primary: bool = False
    is_confirmed: bool | None = None


class PhotoRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    subject_type: str
    inmate_id: UUID | None
    officer_id: UUID | None
    photo_type: PhotoType
    provider: PhotoProvider
    storage_key: str | None
    external_url: str | None
    base64_preview: str | None
    file_size: int | None
    mime_type: str | None
    captured_at: datetime
    captured_by_id: UUID | None
    is_primary: bool
    is_confirmed: bool
    confirmed_by_id: UUID | None
    confirmed_at: datetime | None
    confirm_notes: str | None
    created_at: datetime


# =============================================================================
# Fingerprints
# =============================================================================

class FingerprintCreate(BaseModel):
    """
    Capture for one finger slot; recapturing a slot replaces the previous record.

    Payload required per provider:
    - internal: storage_key
    - external: template_data or provider_ref
    """

    model_config = ConfigDict(use_enum_values=True)

    subject: SubjectRef
    finger: Finger
    provider: FingerprintProvider
    storage_key: str | None = Field(None, max_length=512)
    template_data: str | None = None
    provider_name: str | None = Field(None, max_length=100)
    provider_ref: str | None = Field(None, max_length=255)
    quality: int | None = Field(None, ge=0, le=100)
    captured_at: datetime | None = None
    captured_by_id: UUID | None = None


class FingerprintRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    subject_type: str
    inmate_id: UUID | None
    officer_id: UUID | None
    finger: Finger
    provider: FingerprintProvider
    storage_key: str | None
    template_data: str | None
    provider_name: str | None
    provider_ref: str | None
    quality: int | None
    captured_at: datetime
    captured_by_id: UUID | None
    is_confirmed: bool
    confirmed_by_id: UUID | None
    confirmed_at: datetime | None
    confirm_notes: str | None
    created_at: datetime


# =============================================================================
# Review workflow
# =============================================================================

class ConfirmRequest(BaseModel):
    confirmed_by_id: UUID
    confirm_notes: str | None = None


class RejectRequest(BaseModel):
    confirm_notes: str | None = None


class UploadUrlResponse(BaseModel):
    upload_url: str
    storage_key: str
