"""Centralized defaults for enums."""

from custody_ledger.db.enums.custody import ChargeStatus, InmateStatus
from custody_ledger.db.enums.records import VisitStatus


DEFAULT_INMATE_STATUS: InmateStatus = InmateStatus.REMAND
DEFAULT_CHARGE_STATUS: ChargeStatus = ChargeStatus.PENDING
DEFAULT_VISIT_STATUS: VisitStatus = VisitStatus.SCHEDULED
REJECTED_NOTE = "Rejected"
