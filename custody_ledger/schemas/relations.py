"""Detail views joining a record with its related records."""

from pydantic import BaseModel

from custody_ledger.db.enums import Finger
from custody_ledger.schemas.biometrics import FingerprintRead, PhotoRead
from custody_ledger.schemas.custody import CourtAppearanceRead, MovementRead
from custody_ledger.schemas.facilities import OffenseRead, OfficerRead, PrisonRead
from custody_ledger.schemas.inmate import ChargeRead, InmateRead
from custody_ledger.schemas.records import (
    AttendanceRead,
    ItemRead,
    MedicalRecordRead,
    VisitRead,
)


class ChargeWithOffense(ChargeRead):
    offense: OffenseRead | None = None


class InmateDetail(InmateRead):
    prison: PrisonRead | None = None
    offense: OffenseRead | None = None
    charges: list[ChargeWithOffense] = []
    visits: list[VisitRead] = []
    court_appearances: list[CourtAppearanceRead] = []
    movements: list[MovementRead] = []
    items_in_custody: list[ItemRead] = []
    medical_records: list[MedicalRecordRead] = []
    photos: list[PhotoRead] = []
    confirmed_photos: list[PhotoRead] = []
    primary_photo: PhotoRead | None = None
    fingerprints: list[FingerprintRead] = []
    confirmed_fingerprints: list[FingerprintRead] = []
    captured_fingers: list[Finger] = []


class OfficerDetail(OfficerRead):
    prison: PrisonRead | None = None
    photos: list[PhotoRead] = []
    confirmed_photos: list[PhotoRead] = []
    primary_photo: PhotoRead | None = None
    photo_count: int = 0
    fingerprints: list[FingerprintRead] = []
    confirmed_fingerprints: list[FingerprintRead] = []
    captured_fingers: list[Finger] = []
    fingerprint_count: int = 0
    today_attendance: list[AttendanceRead] = []
    recent_attendance: list[AttendanceRead] = []


class OfficerSummary(OfficerRead):
    """Shallow biometric counts for roster lists."""

    photo_count: int = 0
    fingerprint_count: int = 0
    primary_photo: PhotoRead | None = None
    today_attendance: AttendanceRead | None = None
