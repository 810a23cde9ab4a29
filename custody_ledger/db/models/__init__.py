"""SQLAlchemy ORM models."""

from custody_ledger.db.models.attendance import OfficerAttendance
from custody_ledger.db.models.biometrics import Fingerprint, Photo
from custody_ledger.db.models.custody import CourtAppearance, Movement
from custody_ledger.db.models.facilities import Court, Offense, Officer, Prison
from custody_ledger.db.models.inmates import Inmate, InmateCharge
from custody_ledger.db.models.records import ItemInCustody, MedicalRecord, Visit

__all__ = [
    "Court",
    "CourtAppearance",
    "Fingerprint",
    "Inmate",
    "InmateCharge",
    "ItemInCustody",
    "MedicalRecord",
    "Movement",
    "Offense",
    "Officer",
    "OfficerAttendance",
    "Photo",
    "Prison",
    "Visit",
]
