"""Ledger error taxonomy shared by services and the HTTP layer."""


class LedgerError(Exception):
    """Base exception for ledger service errors."""

    status_code = 500


class InvalidInputError(LedgerError):
    """A field required by the declared provider or subject type is missing."""

    status_code = 400


class NotFoundError(LedgerError):
    """Referenced record does not exist."""

    status_code = 404


class ConflictError(LedgerError):
    """Business key (prison number, badge number, prison code) already taken."""

    status_code = 409


class DependencyFailureError(LedgerError):
    """Blob storage failed during a cleanup that the mutation depends on."""

    status_code = 502
