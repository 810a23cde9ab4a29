"""Inmate movements and the custody status changes they drive."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from custody_ledger.core import custody_rules
from custody_ledger.core.structured_logging import build_log_context
from custody_ledger.db.models import Movement
from custody_ledger.schemas.custody import MovementCreate, MovementReturn, MovementUpdate
from custody_ledger.services import registration_validators

logger = logging.getLogger(__name__)


def get_movement(db: Session, movement_id: UUID) -> Movement | None:
    return db.get(Movement, movement_id)


def require_movement(db: Session, movement_id: UUID) -> Movement:
    return registration_validators.require(db, Movement, movement_id, "Movement")


def list_movements(
    db: Session,
    inmate_id: UUID | None = None,
    movement_type: str | None = None,
) -> list[Movement]:
    query = select(Movement)
    if inmate_id:
        query = query.where(Movement.inmate_id == inmate_id)
    if movement_type:
        query = query.where(Movement.movement_type == movement_type)
    query = query.order_by(Movement.departure_date.desc(), Movement.created_at.desc())
    return list(db.execute(query).scalars().all())


def list_open_movements(db: Session) -> list[Movement]:
    """Movements with no return date."""
    return list(
        db.execute(
            select(Movement)
            .where(Movement.return_date.is_(None))
            .order_by(Movement.departure_date)
        ).scalars().all()
    )


def record_movement(db: Session, data: MovementCreate) -> Movement:
    """
    Record a movement and apply its status effect to the inmate.

    Both writes are flushed together; the caller commits them as one unit.
    """
    inmate = registration_validators.validate_movement(
        db, data.inmate_id, data.movement_type, data.to_prison_id
    )
    if data.officer_id:
        registration_validators.require_officer(db, data.officer_id)

    fields = data.model_dump()
    fields["from_prison_id"] = data.from_prison_id or inmate.prison_id
    movement = Movement(**fields)
    db.add(movement)

    previous_status = inmate.status
    patch = custody_rules.derive_inmate_patch(
        inmate.status,
        custody_rules.MovementRecorded(
            movement_type=data.movement_type, to_prison_id=data.to_prison_id
        ),
    )
    custody_rules.apply_patch(inmate, patch)
    db.flush()

    if "status" in patch:
        logger.info(
            "Inmate status %s -> %s after %s movement",
            previous_status,
            patch["status"],
            data.movement_type,
            extra=build_log_context(inmate_id=inmate.id, record_id=movement.id),
        )
    return movement


def record_return(db: Session, movement_id: UUID, data: MovementReturn) -> Movement:
    """
    Close an open movement.

    The inmate's status is left as is; the caller sets it explicitly.
    """
    movement = require_movement(db, movement_id)
    movement.return_date = data.return_date
    if data.notes:
        movement.notes = data.notes

    inmate = registration_validators.require_inmate(db, movement.inmate_id)
    patch = custody_rules.derive_inmate_patch(
        inmate.status, custody_rules.MovementReturned(return_date=data.return_date)
    )
    custody_rules.apply_patch(inmate, patch)
    db.flush()
    return movement


def update_movement(db: Session, movement_id: UUID, data: MovementUpdate) -> Movement:
    movement = require_movement(db, movement_id)
    updates = data.model_dump(exclude_unset=True)
    if updates.get("officer_id"):
        registration_validators.require_officer(db, updates["officer_id"])
    for field, value in updates.items():
        setattr(movement, field, value)
    db.flush()
    return movement


def delete_movement(db: Session, movement_id: UUID) -> None:
    """Delete the record only; status effects already applied are kept."""
    movement = require_movement(db, movement_id)
    db.delete(movement)
    db.flush()
