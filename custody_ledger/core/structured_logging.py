"""Structured logging helpers (ids only, no personal data)."""

from typing import Any
from uuid import UUID


def build_log_context(
    *,
    inmate_id: UUID | str | None = None,
    subject_type: str | None = None,
    subject_id: UUID | str | None = None,
    record_id: UUID | str | None = None,
    storage_key: str | None = None,
) -> dict[str, Any]:
    """Return a log context dict safe to ship to log aggregation."""
    context: dict[str, Any] = {}
    if inmate_id:
        context["inmate_id"] = str(inmate_id)
    if subject_type:
        context["subject_type"] = subject_type
    if subject_id:
        context["subject_id"] = str(subject_id)
    if record_id:
        context["record_id"] = str(record_id)
    if storage_key:
        context["storage_key"] = storage_key
    return context
