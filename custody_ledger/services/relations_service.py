"""Detail views: a record together with everything attached to it."""

from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from custody_ledger.db.models import (
    CourtAppearance,
    ItemInCustody,
    MedicalRecord,
    Movement,
    OfficerAttendance,
    Visit,
)
from custody_ledger.schemas.biometrics import FingerprintRead, PhotoRead
from custody_ledger.schemas.custody import CourtAppearanceRead, MovementRead
from custody_ledger.schemas.facilities import OffenseRead, OfficerRead, PrisonRead
from custody_ledger.schemas.inmate import InmateRead
from custody_ledger.schemas.records import (
    AttendanceRead,
    ItemRead,
    MedicalRecordRead,
    VisitRead,
)
from custody_ledger.schemas.relations import (
    ChargeWithOffense,
    InmateDetail,
    OfficerDetail,
    OfficerSummary,
)
from custody_ledger.services import (
    biometric_service,
    custody_records_service,
    facility_service,
    registration_validators,
)

RECENT_ATTENDANCE_LIMIT = 30


def _all(db: Session, model, *criteria, order_by=None) -> list:
    query = select(model).where(*criteria)
    if order_by is not None:
        query = query.order_by(order_by)
    return list(db.execute(query).scalars().all())


def _read_all(schema, records) -> list:
    return [schema.model_validate(record) for record in records]


def get_inmate_detail(db: Session, inmate_id: UUID) -> InmateDetail:
    inmate = registration_validators.require_inmate(db, inmate_id)
    subject = biometric_service.Subject.inmate(inmate.id)

    photos = biometric_service.list_photos(db, subject)
    fingerprints = biometric_service.list_fingerprints(db, subject)
    primary_photo = biometric_service.get_primary_photo(db, subject)
    charges = custody_records_service.list_charges(db, inmate.id)

    return InmateDetail(
        **InmateRead.model_validate(inmate).model_dump(),
        prison=PrisonRead.model_validate(inmate.prison) if inmate.prison else None,
        offense=OffenseRead.model_validate(inmate.offense) if inmate.offense else None,
        charges=_read_all(ChargeWithOffense, charges),
        visits=_read_all(
            VisitRead,
            _all(db, Visit, Visit.inmate_id == inmate.id, order_by=Visit.created_at.desc()),
        ),
        court_appearances=_read_all(
            CourtAppearanceRead,
            _all(
                db,
                CourtAppearance,
                CourtAppearance.inmate_id == inmate.id,
                order_by=CourtAppearance.scheduled_date.desc(),
            ),
        ),
        movements=_read_all(
            MovementRead,
            _all(
                db,
                Movement,
                Movement.inmate_id == inmate.id,
                order_by=Movement.departure_date.desc(),
            ),
        ),
        items_in_custody=_read_all(
            ItemRead,
            _all(db, ItemInCustody, ItemInCustody.inmate_id == inmate.id),
        ),
        medical_records=_read_all(
            MedicalRecordRead,
            _all(
                db,
                MedicalRecord,
                MedicalRecord.inmate_id == inmate.id,
                order_by=MedicalRecord.record_date.desc(),
            ),
        ),
        photos=_read_all(PhotoRead, photos),
        confirmed_photos=_read_all(PhotoRead, [p for p in photos if p.is_confirmed]),
        primary_photo=PhotoRead.model_validate(primary_photo) if primary_photo else None,
        fingerprints=_read_all(FingerprintRead, fingerprints),
        confirmed_fingerprints=_read_all(
            FingerprintRead, [f for f in fingerprints if f.is_confirmed]
        ),
        captured_fingers=[f.finger for f in fingerprints],
    )


def get_officer_detail(db: Session, officer_id: UUID, today: date | None = None) -> OfficerDetail:
    officer = registration_validators.require_officer(db, officer_id)
    subject = biometric_service.Subject.officer(officer.id)
    today = today or date.today()

    photos = biometric_service.list_photos(db, subject)
    fingerprints = biometric_service.list_fingerprints(db, subject)
    primary_photo = biometric_service.get_primary_photo(db, subject)
    today_attendance = _all(
        db,
        OfficerAttendance,
        OfficerAttendance.officer_id == officer.id,
        OfficerAttendance.date == today,
    )
    recent_attendance = list(
        db.execute(
            select(OfficerAttendance)
            .where(OfficerAttendance.officer_id == officer.id)
            .order_by(OfficerAttendance.date.desc())
            .limit(RECENT_ATTENDANCE_LIMIT)
        ).scalars().all()
    )

    return OfficerDetail(
        **OfficerRead.model_validate(officer).model_dump(),
        prison=PrisonRead.model_validate(officer.prison) if officer.prison else None,
        photos=_read_all(PhotoRead, photos),
        confirmed_photos=_read_all(PhotoRead, [p for p in photos if p.is_confirmed]),
        primary_photo=PhotoRead.model_validate(primary_photo) if primary_photo else None,
        photo_count=len(photos),
        fingerprints=_read_all(FingerprintRead, fingerprints),
        confirmed_fingerprints=_read_all(
            FingerprintRead, [f for f in fingerprints if f.is_confirmed]
        ),
        captured_fingers=[f.finger for f in fingerprints],
        fingerprint_count=len(fingerprints),
        today_attendance=_read_all(AttendanceRead, today_attendance),
        recent_attendance=_read_all(AttendanceRead, recent_attendance),
    )


def list_officer_summaries(
    db: Session, prison_id: UUID, today: date | None = None
) -> list[OfficerSummary]:
    """Officers of a prison with photo/fingerprint counts and today's attendance."""
    registration_validators.require_prison(db, prison_id)
    today = today or date.today()
    summaries = []
    for officer in facility_service.list_officers(db, prison_id=prison_id):
        subject = biometric_service.Subject.officer(officer.id)
        photos = biometric_service.list_photos(db, subject)
        primary_photo = biometric_service.get_primary_photo(db, subject)
        attendance = _all(
            db,
            OfficerAttendance,
            OfficerAttendance.officer_id == officer.id,
            OfficerAttendance.date == today,
        )
        summaries.append(
            OfficerSummary(
                **OfficerRead.model_validate(officer).model_dump(),
                photo_count=len(photos),
                fingerprint_count=len(biometric_service.list_fingerprints(db, subject)),
                primary_photo=PhotoRead.model_validate(primary_photo) if primary_photo else None,
                today_attendance=AttendanceRead.model_validate(attendance[0]) if attendance else None,
            )
        )
    return summaries
