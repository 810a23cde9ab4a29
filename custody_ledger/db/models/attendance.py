"""SQLAlchemy ORM models."""

from __future__ import annotations

import datetime as dt
import uuid
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Index, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from custody_ledger.db.base import Base


class OfficerAttendance(Base):
    """One row per (officer, date, shift); re-recording updates in place."""

    __tablename__ = "officer_attendance"
    __table_args__ = (
        Index("idx_officer_attendance_officer", "officer_id"),
        Index("idx_officer_attendance_date", "date"),
        Index("idx_officer_attendance_prison", "prison_id"),
        Index(
            "uq_officer_attendance_slot", "officer_id", "date", "shift", unique=True
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    officer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("officers.id", ondelete="CASCADE"), nullable=False
    )
    prison_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("prisons.id", ondelete="RESTRICT"), nullable=False
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    shift: Mapped[str] = mapped_column(String(20), nullable=False)  # AttendanceShift
    status: Mapped[str] = mapped_column(String(20), nullable=False)  # AttendanceStatus
    check_in_time: Mapped[dt.datetime | None] = mapped_column(nullable=True)
    check_out_time: Mapped[dt.datetime | None] = mapped_column(nullable=True)
    hours_worked: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    recorded_by_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("officers.id", ondelete="SET NULL"), nullable=True
    )

    created_at: Mapped[dt.datetime] = mapped_column(server_default=func.now(), nullable=False)
