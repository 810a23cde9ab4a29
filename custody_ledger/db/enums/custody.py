"""Custody-related enums (inmates, movements, court activity)."""

from enum import Enum


class InmateStatus(str, Enum):
    """
    Custody status of an inmate.

    Derived by event:
        remand ⇄ at_court / transferred → released
        convict (court outcome "convicted")

    Administrative only (never entered or left by an event):
        escaped, deceased
    """

    REMAND = "remand"
    CONVICT = "convict"
    AT_COURT = "at_court"
    RELEASED = "released"
    TRANSFERRED = "transferred"
    ESCAPED = "escaped"
    DECEASED = "deceased"

    @classmethod
    def administrative_only(cls) -> list[str]:
        """Statuses reachable only through a direct status edit."""
        return [cls.ESCAPED.value, cls.DECEASED.value]


class InmateType(str, Enum):
    """Inmate classification at admission."""

    REMAND = "remand"
    CONVICT = "convict"
    CIVIL = "civil"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    MAXIMUM = "maximum"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class MovementType(str, Enum):
    """Reason an inmate leaves custody of the facility."""

    TRANSFER = "transfer"
    HOSPITAL = "hospital"
    COURT = "court"
    WORK_PARTY = "work_party"
    RELEASE = "release"


class CourtOutcome(str, Enum):
    ADJOURNED = "adjourned"
    CONVICTED = "convicted"
    ACQUITTED = "acquitted"
    BAIL_GRANTED = "bail_granted"
    REMANDED = "remanded"


class ReleaseReason(str, Enum):
    SERVED = "served"
    BAIL = "bail"
    ACQUITTED = "acquitted"
    PARDON = "pardon"
    FINE_PAID = "fine_paid"


class ChargeStatus(str, Enum):
    PENDING = "pending"
    CONVICTED = "convicted"
    ACQUITTED = "acquitted"
    WITHDRAWN = "withdrawn"
