"""
Custody status derivation.

Each recorded event maps to a patch (attribute name → new value) for the
inmate record. The caller applies it in the same unit of work as the
event's own record.

Rules:
- escaped / deceased are entered only by a direct status edit and no event
  moves an inmate out of them (linked dates are still kept current).
- An unmapped movement type yields no status change rather than an error.
- Returning from a movement never reverts status; the caller sets it
  explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Union
from uuid import UUID

from custody_ledger.db.enums import CourtOutcome, InmateStatus, MovementType, ReleaseReason


MOVEMENT_STATUS_MAP: dict[str, str] = {
    MovementType.TRANSFER.value: InmateStatus.TRANSFERRED.value,
    MovementType.HOSPITAL.value: InmateStatus.REMAND.value,  # still in the system
    MovementType.COURT.value: InmateStatus.AT_COURT.value,
    MovementType.WORK_PARTY.value: InmateStatus.REMAND.value,
    MovementType.RELEASE.value: InmateStatus.RELEASED.value,
}

COURT_OUTCOME_STATUS_MAP: dict[str, str] = {
    CourtOutcome.CONVICTED.value: InmateStatus.CONVICT.value,
    CourtOutcome.ACQUITTED.value: InmateStatus.RELEASED.value,
    CourtOutcome.ADJOURNED.value: InmateStatus.REMAND.value,
    CourtOutcome.BAIL_GRANTED.value: InmateStatus.REMAND.value,
    CourtOutcome.REMANDED.value: InmateStatus.REMAND.value,
}

TERMINAL_STATUSES = frozenset(InmateStatus.administrative_only())


# =============================================================================
# Events
# =============================================================================

@dataclass(frozen=True)
class MovementRecorded:
    movement_type: str
    to_prison_id: UUID | None = None


@dataclass(frozen=True)
class MovementReturned:
    return_date: date


@dataclass(frozen=True)
class CourtOutcomeRecorded:
    outcome: str
    next_date: date | None = None


@dataclass(frozen=True)
class AppearanceScheduled:
    scheduled_date: date


@dataclass(frozen=True)
class ReleaseRecorded:
    release_date: date
    reason: str
    notes: str | None = None


CustodyEvent = Union[
    MovementRecorded,
    MovementReturned,
    CourtOutcomeRecorded,
    AppearanceScheduled,
    ReleaseRecorded,
]


# =============================================================================
# Derivation
# =============================================================================

def _with_status(patch: dict[str, Any], current_status: str, new_status: str | None) -> dict[str, Any]:
    if new_status is None or current_status in TERMINAL_STATUSES:
        return patch
    patch["status"] = new_status
    return patch


def derive_inmate_patch(current_status: str, event: CustodyEvent) -> dict[str, Any]:
    """
    Compute the inmate patch for an event.

    Returns an empty dict when the event has no effect on the inmate.
    """
    if isinstance(event, MovementRecorded):
        patch: dict[str, Any] = {}
        new_status = MOVEMENT_STATUS_MAP.get(event.movement_type)
        if new_status is None:
            return patch
        if (
            event.movement_type == MovementType.TRANSFER.value
            and event.to_prison_id
            and current_status not in TERMINAL_STATUSES
        ):
            patch["prison_id"] = event.to_prison_id
        return _with_status(patch, current_status, new_status)

    if isinstance(event, MovementReturned):
        return {}

    if isinstance(event, CourtOutcomeRecorded):
        patch = {}
        if event.next_date:
            patch["next_court_date"] = event.next_date
        return _with_status(patch, current_status, COURT_OUTCOME_STATUS_MAP.get(event.outcome))

    if isinstance(event, AppearanceScheduled):
        return {"next_court_date": event.scheduled_date}

    if isinstance(event, ReleaseRecorded):
        if event.reason not in ReleaseReason._value2member_map_:
            raise ValueError(f"Unknown release reason: {event.reason}")
        patch = {
            "actual_release_date": event.release_date,
            "release_reason": event.reason,
        }
        if event.notes:
            patch["notes"] = event.notes
        return _with_status(patch, current_status, InmateStatus.RELEASED.value)

    return {}


def apply_patch(record: Any, patch: dict[str, Any]) -> None:
    """Assign each patched attribute on an ORM record."""
    for field, value in patch.items():
        setattr(record, field, value)
