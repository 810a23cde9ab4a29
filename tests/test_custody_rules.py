"""Tests for custody status derivation."""

import uuid
from datetime import date
from types import SimpleNamespace

import pytest

from custody_ledger.core.custody_rules import (
    AppearanceScheduled,
    CourtOutcomeRecorded,
    MovementRecorded,
    MovementReturned,
    ReleaseRecorded,
    apply_patch,
    derive_inmate_patch,
)


@pytest.mark.parametrize(
    "movement_type,expected",
    [
        ("court", "at_court"),
        ("hospital", "remand"),
        ("work_party", "remand"),
        ("release", "released"),
    ],
)
def test_movement_sets_status(movement_type, expected):
    patch = derive_inmate_patch("remand", MovementRecorded(movement_type=movement_type))
    assert patch == {"status": expected}


def test_transfer_moves_inmate_to_destination():
    to_prison = uuid.uuid4()
    patch = derive_inmate_patch(
        "convict", MovementRecorded(movement_type="transfer", to_prison_id=to_prison)
    )
    assert patch == {"status": "transferred", "prison_id": to_prison}


def test_unmapped_movement_type_is_a_no_op():
    assert derive_inmate_patch("remand", MovementRecorded(movement_type="escort")) == {}


def test_return_never_reverts_status():
    patch = derive_inmate_patch("at_court", MovementReturned(return_date=date(2024, 5, 2)))
    assert patch == {}


@pytest.mark.parametrize(
    "outcome,expected",
    [
        ("convicted", "convict"),
        ("acquitted", "released"),
        ("adjourned", "remand"),
        ("bail_granted", "remand"),
        ("remanded", "remand"),
    ],
)
def test_court_outcome_sets_status(outcome, expected):
    patch = derive_inmate_patch("at_court", CourtOutcomeRecorded(outcome=outcome))
    assert patch["status"] == expected
    assert "next_court_date" not in patch


def test_court_outcome_carries_next_date():
    patch = derive_inmate_patch(
        "at_court", CourtOutcomeRecorded(outcome="adjourned", next_date=date(2024, 6, 1))
    )
    assert patch == {"status": "remand", "next_court_date": date(2024, 6, 1)}


def test_scheduling_updates_next_court_date_only():
    patch = derive_inmate_patch("remand", AppearanceScheduled(scheduled_date=date(2024, 7, 9)))
    assert patch == {"next_court_date": date(2024, 7, 9)}


def test_release_sets_all_release_fields():
    patch = derive_inmate_patch(
        "convict",
        ReleaseRecorded(release_date=date(2025, 1, 1), reason="served", notes="Sentence complete"),
    )
    assert patch == {
        "status": "released",
        "actual_release_date": date(2025, 1, 1),
        "release_reason": "served",
        "notes": "Sentence complete",
    }


def test_release_without_notes_leaves_notes_alone():
    patch = derive_inmate_patch(
        "remand", ReleaseRecorded(release_date=date(2025, 1, 1), reason="bail")
    )
    assert "notes" not in patch


def test_release_rejects_unknown_reason():
    with pytest.raises(ValueError):
        derive_inmate_patch(
            "remand", ReleaseRecorded(release_date=date(2025, 1, 1), reason="escaped")
        )


@pytest.mark.parametrize("terminal", ["escaped", "deceased"])
def test_terminal_status_is_never_left_by_events(terminal):
    assert "status" not in derive_inmate_patch(terminal, MovementRecorded(movement_type="court"))
    assert "status" not in derive_inmate_patch(
        terminal, CourtOutcomeRecorded(outcome="acquitted")
    )

    transfer = derive_inmate_patch(
        terminal, MovementRecorded(movement_type="transfer", to_prison_id=uuid.uuid4())
    )
    assert transfer == {}

    release = derive_inmate_patch(
        terminal, ReleaseRecorded(release_date=date(2025, 1, 1), reason="pardon")
    )
    assert "status" not in release
    assert release["actual_release_date"] == date(2025, 1, 1)


def test_apply_patch_sets_attributes():
    record = SimpleNamespace(status="remand", next_court_date=None)
    apply_patch(record, {"status": "at_court", "next_court_date": date(2024, 1, 2)})
    assert record.status == "at_court"
    assert record.next_court_date == date(2024, 1, 2)
