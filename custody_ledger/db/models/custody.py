"""SQLAlchemy ORM models."""

from __future__ import annotations

import uuid
from datetime import date, datetime

from sqlalchemy import Date, ForeignKey, Index, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from custody_ledger.db.base import Base


class Movement(Base):
    """
    An inmate leaving (and later returning to) the facility.

    `to_prison_id` is required for transfers; other movement types use the
    free-text `destination`. A movement with no `return_date` is open.
    """

    __tablename__ = "movements"
    __table_args__ = (
        Index("idx_movements_inmate", "inmate_id"),
        Index("idx_movements_type", "movement_type"),
        Index("idx_movements_from_prison", "from_prison_id"),
        Index("idx_movements_to_prison", "to_prison_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    inmate_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("inmates.id", ondelete="CASCADE"), nullable=False
    )
    from_prison_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("prisons.id", ondelete="SET NULL"), nullable=True
    )
    to_prison_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("prisons.id", ondelete="SET NULL"), nullable=True
    )
    officer_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("officers.id", ondelete="SET NULL"), nullable=True
    )
    movement_type: Mapped[str] = mapped_column(String(20), nullable=False)  # MovementType
    destination: Mapped[str | None] = mapped_column(String(255), nullable=True)
    departure_date: Mapped[date] = mapped_column(Date, nullable=False)
    return_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)


class CourtAppearance(Base):
    """A scheduled hearing; `outcome` is recorded once the inmate is back."""

    __tablename__ = "court_appearances"
    __table_args__ = (
        Index("idx_court_appearances_inmate", "inmate_id"),
        Index("idx_court_appearances_court", "court_id"),
        Index("idx_court_appearances_scheduled", "scheduled_date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    inmate_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("inmates.id", ondelete="CASCADE"), nullable=False
    )
    court_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("courts.id", ondelete="RESTRICT"), nullable=False
    )
    officer_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("officers.id", ondelete="SET NULL"), nullable=True
    )
    scheduled_date: Mapped[date] = mapped_column(Date, nullable=False)
    departure_time: Mapped[datetime | None] = mapped_column(nullable=True)
    return_time: Mapped[datetime | None] = mapped_column(nullable=True)
    outcome: Mapped[str | None] = mapped_column(String(20), nullable=True)  # CourtOutcome
    next_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)
