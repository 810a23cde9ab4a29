"""SQLAlchemy ORM models."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Boolean, Date, ForeignKey, Index, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from custody_ledger.db.base import Base


class Visit(Base):
    """
    Visitor booking for an inmate.

    scheduled → checked_in → completed, or scheduled → denied / cancelled.
    """

    __tablename__ = "visits"
    __table_args__ = (
        Index("idx_visits_inmate", "inmate_id"),
        Index("idx_visits_status", "status"),
        Index("idx_visits_prison", "prison_id"),
        Index("idx_visits_check_out", "check_out_time"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    inmate_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("inmates.id", ondelete="CASCADE"), nullable=False
    )
    prison_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("prisons.id", ondelete="RESTRICT"), nullable=False
    )

    # Visitor
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    id_number: Mapped[str] = mapped_column(String(100), nullable=False)
    id_type: Mapped[str | None] = mapped_column(String(20), nullable=True)  # VisitorIdType
    relationship: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)

    scheduled_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    check_in_time: Mapped[datetime | None] = mapped_column(nullable=True)
    check_out_time: Mapped[datetime | None] = mapped_column(nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)  # VisitStatus
    denial_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    items_declaration: Mapped[str | None] = mapped_column(Text, nullable=True)
    flagged: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    flag_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    approved_by_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("officers.id", ondelete="SET NULL"), nullable=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)


class ItemInCustody(Base):
    """Personal property held for an inmate until returned."""

    __tablename__ = "items_in_custody"
    __table_args__ = (Index("idx_items_in_custody_inmate", "inmate_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    inmate_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("inmates.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    value: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    condition: Mapped[str | None] = mapped_column(String(10), nullable=True)  # ItemCondition
    storage_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    returned_at: Mapped[date | None] = mapped_column(Date, nullable=True)
    returned_to_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)


class MedicalRecord(Base):
    __tablename__ = "medical_records"
    __table_args__ = (
        Index("idx_medical_records_inmate", "inmate_id"),
        Index("idx_medical_records_type", "record_type"),
        Index("idx_medical_records_date", "record_date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    inmate_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("inmates.id", ondelete="CASCADE"), nullable=False
    )
    record_type: Mapped[str] = mapped_column(String(30), nullable=False)  # MedicalRecordType
    diagnosis: Mapped[str | None] = mapped_column(Text, nullable=True)
    treatment: Mapped[str | None] = mapped_column(Text, nullable=True)
    attended_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    referred_to_hospital: Mapped[str | None] = mapped_column(String(255), nullable=True)
    record_date: Mapped[date] = mapped_column(Date, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)
