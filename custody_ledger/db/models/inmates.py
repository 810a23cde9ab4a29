"""SQLAlchemy ORM models."""

from __future__ import annotations

from typing import TYPE_CHECKING

import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Boolean, Date, ForeignKey, Index, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from custody_ledger.db.base import Base


if TYPE_CHECKING:
    from custody_ledger.db.models import Offense, Prison


class Inmate(Base):
    """
    Identity and custody record.

    `prison_number` is the immutable business key (unique at registration).
    `status` and `prison_id` are driven by the custody rules as movements,
    court outcomes and releases are recorded; `escaped` / `deceased` only
    by direct status edit.
    """

    __tablename__ = "inmates"
    __table_args__ = (
        Index("idx_inmates_prison_number", "prison_number", unique=True),
        Index("idx_inmates_prison", "prison_id"),
        Index("idx_inmates_status", "status"),
        Index("idx_inmates_type", "inmate_type"),
        Index("idx_inmates_national_id", "national_id"),
        Index("idx_inmates_case_number", "case_number"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Identity
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    other_names: Mapped[str | None] = mapped_column(String(255), nullable=True)
    prison_number: Mapped[str] = mapped_column(String(50), nullable=False)
    national_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    dob: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)
    nationality: Mapped[str | None] = mapped_column(String(100), nullable=True)
    tribe: Mapped[str | None] = mapped_column(String(100), nullable=True)
    religion: Mapped[str | None] = mapped_column(String(100), nullable=True)
    education_level: Mapped[str | None] = mapped_column(String(100), nullable=True)
    marital_status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    occupation: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Next of kin
    next_of_kin_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    next_of_kin_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    next_of_kin_relationship: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Custody
    inmate_type: Mapped[str] = mapped_column(String(20), nullable=False)  # InmateType
    status: Mapped[str] = mapped_column(String(20), nullable=False)  # InmateStatus
    risk_level: Mapped[str | None] = mapped_column(String(20), nullable=True)  # RiskLevel
    prison_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("prisons.id", ondelete="RESTRICT"), nullable=False
    )
    cell_block: Mapped[str | None] = mapped_column(String(50), nullable=True)
    cell_number: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Case
    case_number: Mapped[str] = mapped_column(String(100), nullable=False)
    offense_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("offenses.id", ondelete="RESTRICT"), nullable=False
    )
    arresting_station: Mapped[str | None] = mapped_column(String(255), nullable=True)
    admission_date: Mapped[date] = mapped_column(Date, nullable=False)
    remand_expiry: Mapped[date | None] = mapped_column(Date, nullable=True)
    next_court_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Sentencing
    conviction_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    sentence_start: Mapped[date | None] = mapped_column(Date, nullable=True)
    sentence_end: Mapped[date | None] = mapped_column(Date, nullable=True)
    sentence_duration: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_life_sentence: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    fine_amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    fine_paid: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # Release
    actual_release_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    release_reason: Mapped[str | None] = mapped_column(String(20), nullable=True)  # ReleaseReason

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        server_default=func.now(), onupdate=func.now(), nullable=False
    )

    prison: Mapped["Prison"] = relationship()
    offense: Mapped["Offense"] = relationship()


class InmateCharge(Base):
    """An offense an inmate is charged with (beyond the admission offense)."""

    __tablename__ = "inmate_charges"
    __table_args__ = (
        Index("idx_inmate_charges_inmate", "inmate_id"),
        Index("idx_inmate_charges_offense", "offense_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    inmate_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("inmates.id", ondelete="CASCADE"), nullable=False
    )
    offense_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("offenses.id", ondelete="RESTRICT"), nullable=False
    )
    is_primary: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)  # ChargeStatus
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)

    offense: Mapped["Offense"] = relationship()
