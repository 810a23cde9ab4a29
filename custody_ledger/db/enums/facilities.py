"""Lookup table enums (prisons, courts, offenses)."""

from enum import Enum


class PrisonType(str, Enum):
    MAIN = "main"
    REMAND = "remand"
    OPEN = "open"
    FARM = "farm"
    BRANCH = "branch"


class CourtType(str, Enum):
    MAGISTRATE = "magistrate"
    HIGH = "high"
    CHIEF_MAGISTRATE = "chief_magistrate"
    INDUSTRIAL_COURT = "industrial_court"


class OffenseCategory(str, Enum):
    FELONY = "felony"
    MISDEMEANOR = "misdemeanor"
    CAPITAL = "capital"
    TRAFFIC = "traffic"
