"""Enum definitions for application constants."""

from custody_ledger.db.enums.biometrics import (
    Finger,
    FingerprintProvider,
    PhotoProvider,
    PhotoType,
    SubjectType,
)
from custody_ledger.db.enums.custody import (
    ChargeStatus,
    CourtOutcome,
    Gender,
    InmateStatus,
    InmateType,
    MovementType,
    ReleaseReason,
    RiskLevel,
)
from custody_ledger.db.enums.defaults import (
    DEFAULT_CHARGE_STATUS,
    DEFAULT_INMATE_STATUS,
    DEFAULT_VISIT_STATUS,
    REJECTED_NOTE,
)
from custody_ledger.db.enums.facilities import CourtType, OffenseCategory, PrisonType
from custody_ledger.db.enums.records import (
    AttendanceShift,
    AttendanceStatus,
    ItemCondition,
    MedicalRecordType,
    VisitorIdType,
    VisitStatus,
)

__all__ = [
    "AttendanceShift",
    "AttendanceStatus",
    "ChargeStatus",
    "CourtOutcome",
    "CourtType",
    "DEFAULT_CHARGE_STATUS",
    "DEFAULT_INMATE_STATUS",
    "DEFAULT_VISIT_STATUS",
    "Finger",
    "FingerprintProvider",
    "Gender",
    "InmateStatus",
    "InmateType",
    "ItemCondition",
    "MedicalRecordType",
    "MovementType",
    "OffenseCategory",
    "PhotoProvider",
    "PhotoType",
    "PrisonType",
    "REJECTED_NOTE",
    "ReleaseReason",
    "RiskLevel",
    "SubjectType",
    "VisitStatus",
    "VisitorIdType",
]
