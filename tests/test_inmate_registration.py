"""Tests for inmate/officer/prison registration and lookups."""

import uuid
from datetime import date

import pytest

from custody_ledger.core.errors import ConflictError, InvalidInputError, NotFoundError
from custody_ledger.schemas.facilities import OfficerCreate, PrisonCreate, PrisonUpdate
from custody_ledger.schemas.inmate import InmateCreate, InmateRelease, InmateUpdate
from custody_ledger.services import facility_service, inmate_service, registration_validators


def test_register_defaults_to_remand(db, inmate):
    assert inmate.status == "remand"
    assert inmate.prison_number == "LUZ/2024/001"


def test_register_with_explicit_status(db, inmate_payload):
    inmate = inmate_service.register_inmate(
        db, InmateCreate(**inmate_payload(status="convict"))
    )
    assert inmate.status == "convict"


def test_duplicate_prison_number_conflicts(db, inmate, inmate_payload):
    with pytest.raises(ConflictError):
        inmate_service.register_inmate(
            db,
            InmateCreate(**inmate_payload(prison_number="LUZ/2024/001", first_name="Peter")),
        )
    db.rollback()

    stored = inmate_service.get_by_prison_number(db, "LUZ/2024/001")
    assert stored.id == inmate.id
    assert stored.first_name == "John"


def test_register_requires_existing_prison_and_offense(db, inmate_payload):
    with pytest.raises(NotFoundError):
        inmate_service.register_inmate(
            db, InmateCreate(**inmate_payload(prison_id=uuid.uuid4()))
        )
    with pytest.raises(NotFoundError):
        inmate_service.register_inmate(
            db, InmateCreate(**inmate_payload(offense_id=uuid.uuid4()))
        )


def test_national_id_is_not_unique(db, inmate, inmate_payload):
    inmate_service.register_inmate(
        db, InmateCreate(**inmate_payload(first_name="Again"))
    )
    matches = inmate_service.list_by_national_id(db, "CM900101ABCD")
    assert len(matches) == 2


def test_list_inmates_filters(db, inmate, prison, inmate_payload):
    inmate_service.register_inmate(
        db,
        InmateCreate(**inmate_payload(first_name="Sarah", last_name="Achieng", status="convict")),
    )

    assert [i.first_name for i in inmate_service.list_inmates(db, status="convict")] == ["Sarah"]
    assert [i.id for i in inmate_service.list_inmates(db, q="mukasa")] == [inmate.id]
    assert len(inmate_service.list_inmates(db, prison_id=prison.id)) == 2
    assert inmate_service.list_inmates(db, prison_id=uuid.uuid4()) == []


def test_update_inmate_patches_only_supplied_fields(db, inmate):
    inmate_service.update_inmate(db, inmate.id, InmateUpdate(cell_block="A", risk_level="high"))
    assert inmate.cell_block == "A"
    assert inmate.risk_level == "high"
    assert inmate.first_name == "John"
    assert inmate.prison_number == "LUZ/2024/001"


def test_update_status_allows_terminal_statuses(db, inmate):
    inmate_service.update_status(db, inmate.id, "escaped")
    assert inmate.status == "escaped"


def test_release_inmate(db, inmate):
    inmate_service.release_inmate(
        db,
        inmate.id,
        InmateRelease(release_date=date(2025, 2, 1), reason="bail", notes="Surety: brother"),
    )
    assert inmate.status == "released"
    assert inmate.actual_release_date == date(2025, 2, 1)
    assert inmate.release_reason == "bail"
    assert inmate.notes == "Surety: brother"


def test_duplicate_badge_number_conflicts(db, officer, prison):
    with pytest.raises(ConflictError):
        facility_service.create_officer(
            db, OfficerCreate(prison_id=prison.id, name="Other", badge_number="B-100")
        )


def test_duplicate_prison_code_conflicts(db, prison, other_prison):
    with pytest.raises(ConflictError):
        facility_service.create_prison(db, PrisonCreate(name="Copy", code="LUZ", type="main"))
    with pytest.raises(ConflictError):
        facility_service.update_prison(db, other_prison.id, PrisonUpdate(code="LUZ"))


def test_update_prison_keeps_own_code(db, prison):
    updated = facility_service.update_prison(
        db, prison.id, PrisonUpdate(code="LUZ", capacity=1700)
    )
    assert updated.capacity == 1700


def test_transfer_requires_destination(db, inmate):
    with pytest.raises(InvalidInputError):
        registration_validators.validate_movement(db, inmate.id, "transfer", None)


def test_movement_destination_must_exist(db, inmate):
    with pytest.raises(NotFoundError):
        registration_validators.validate_movement(db, inmate.id, "transfer", uuid.uuid4())
    with pytest.raises(NotFoundError):
        registration_validators.validate_movement(db, inmate.id, "hospital", uuid.uuid4())


def test_court_appearance_requires_court(db, inmate):
    with pytest.raises(NotFoundError):
        registration_validators.validate_court_appearance(db, inmate.id, uuid.uuid4())


@pytest.mark.parametrize("subject_type", ["inmate", "officer"])
def test_subject_must_exist(db, subject_type):
    with pytest.raises(NotFoundError):
        registration_validators.validate_subject(db, subject_type, uuid.uuid4())


def test_unknown_subject_type(db):
    with pytest.raises(InvalidInputError):
        registration_validators.validate_subject(db, "visitor", uuid.uuid4())
