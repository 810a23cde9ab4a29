"""Enums for visits, property, medical and attendance records."""

from enum import Enum


class VisitStatus(str, Enum):
    SCHEDULED = "scheduled"
    CHECKED_IN = "checked_in"
    COMPLETED = "completed"
    DENIED = "denied"
    CANCELLED = "cancelled"


class VisitorIdType(str, Enum):
    NATIONAL_ID = "national_id"
    PASSPORT = "passport"
    DRIVING_PERMIT = "driving_permit"


class ItemCondition(str, Enum):
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class MedicalRecordType(str, Enum):
    ADMISSION_CHECKUP = "admission_checkup"
    ILLNESS = "illness"
    INJURY = "injury"
    REFERRAL = "referral"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    ON_LEAVE = "on_leave"
    SICK_LEAVE = "sick_leave"
    OFF_DUTY = "off_duty"


class AttendanceShift(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"
    FULL_DAY = "full_day"
