"""SQLAlchemy ORM models."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Uuid,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from custody_ledger.db.base import Base


# Exactly one owner reference, matching the discriminator.
SUBJECT_CHECK = (
    "(subject_type = 'inmate' AND inmate_id IS NOT NULL AND officer_id IS NULL)"
    " OR (subject_type = 'officer' AND officer_id IS NOT NULL AND inmate_id IS NULL)"
)


class Photo(Base):
    """
    Photograph of an inmate or officer.

    Payload depends on provider:
    - internal: storage_key
    - upload: storage_key or base64_preview
    - external_url: external_url

    At most one photo per subject has is_primary = true (enforced by the
    biometric service; the partial unique indexes are a backstop).
    """

    __tablename__ = "photos"
    __table_args__ = (
        CheckConstraint(SUBJECT_CHECK, name="ck_photos_subject"),
        Index("idx_photos_inmate", "inmate_id"),
        Index("idx_photos_officer", "officer_id"),
        Index("idx_photos_subject_confirmed", "subject_type", "is_confirmed"),
        Index(
            "uq_photos_primary_inmate",
            "inmate_id",
            unique=True,
            postgresql_where=text("is_primary"),
            sqlite_where=text("is_primary = 1"),
        ),
        Index(
            "uq_photos_primary_officer",
            "officer_id",
            unique=True,
            postgresql_where=text("is_primary"),
            sqlite_where=text("is_primary = 1"),
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Subject
    subject_type: Mapped[str] = mapped_column(String(10), nullable=False)  # SubjectType
    inmate_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("inmates.id", ondelete="CASCADE"), nullable=True
    )
    officer_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("officers.id", ondelete="CASCADE"), nullable=True
    )

    photo_type: Mapped[str] = mapped_column(String(20), nullable=False)  # PhotoType
    provider: Mapped[str] = mapped_column(String(20), nullable=False)  # PhotoProvider

    storage_key: Mapped[str | None] = mapped_column(String(512), nullable=True)
    external_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    base64_preview: Mapped[str | None] = mapped_column(Text, nullable=True)  # small preview only

    # Metadata
    file_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mime_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    captured_at: Mapped[datetime] = mapped_column(nullable=False)
    captured_by_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("officers.id", ondelete="SET NULL"), nullable=True
    )
    is_primary: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Confirmation workflow
    is_confirmed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    confirmed_by_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("officers.id", ondelete="SET NULL"), nullable=True
    )
    confirmed_at: Mapped[datetime | None] = mapped_column(nullable=True)
    confirm_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)


class Fingerprint(Base):
    """
    One finger of an inmate or officer.

    A (subject, finger) pair is a slot: recapturing a finger updates the
    existing row instead of adding another.
    """

    __tablename__ = "fingerprints"
    __table_args__ = (
        CheckConstraint(SUBJECT_CHECK, name="ck_fingerprints_subject"),
        CheckConstraint(
            "quality IS NULL OR (quality >= 0 AND quality <= 100)",
            name="ck_fingerprints_quality",
        ),
        Index("idx_fingerprints_inmate", "inmate_id"),
        Index("idx_fingerprints_officer", "officer_id"),
        Index("idx_fingerprints_subject", "subject_type"),
        Index("uq_fingerprints_inmate_finger", "inmate_id", "finger", unique=True),
        Index("uq_fingerprints_officer_finger", "officer_id", "finger", unique=True),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Subject
    subject_type: Mapped[str] = mapped_column(String(10), nullable=False)  # SubjectType
    inmate_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("inmates.id", ondelete="CASCADE"), nullable=True
    )
    officer_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("officers.id", ondelete="CASCADE"), nullable=True
    )

    finger: Mapped[str] = mapped_column(String(20), nullable=False)  # Finger
    provider: Mapped[str] = mapped_column(String(20), nullable=False)  # FingerprintProvider

    storage_key: Mapped[str | None] = mapped_column(String(512), nullable=True)
    template_data: Mapped[str | None] = mapped_column(Text, nullable=True)  # base64 minutiae / WSQ

    # Provider metadata
    provider_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    provider_ref: Mapped[str | None] = mapped_column(String(255), nullable=True)
    quality: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 0-100
    captured_at: Mapped[datetime] = mapped_column(nullable=False)
    captured_by_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("officers.id", ondelete="SET NULL"), nullable=True
    )

    # Confirmation workflow
    is_confirmed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    confirmed_by_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("officers.id", ondelete="SET NULL"), nullable=True
    )
    confirmed_at: Mapped[datetime | None] = mapped_column(nullable=True)
    confirm_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)
