"""Error kinds surfaced by ledger submission and the store collaborators."""

from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_BATCH = "EmptyBatch"
    VALIDATION_FAILED = "ValidationFailed"
    REFERENCE_NOT_FOUND = "ReferenceNotFound"  # sub-kind of ValidationFailed
    PERSISTENCE_FAILED = "PersistenceFailed"


class JournalError(Exception):
    kind: ErrorKind | None = None


class EmptyBatchError(JournalError):
    """Raised before any row is attempted when a batch has no rows."""

    kind = ErrorKind.EMPTY_BATCH

    def __init__(self, message: str = "Batch must contain at least one entry"):
        super().__init__(message)


class LedgerWriteError(JournalError):
    """A store-level write failed (integrity conflict, I/O error, ...)."""

    kind = ErrorKind.PERSISTENCE_FAILED


class LedgerReadError(JournalError):
    """A store-level read failed (connection lost, I/O error, ...)."""

    kind = ErrorKind.PERSISTENCE_FAILED


class RecordNotFoundError(JournalError):
    """No row matches the given key."""


class DuplicateRecordError(JournalError):
    """A row with the given key already exists."""


class RecordInUseError(JournalError):
    """The row is still referenced by trade entries."""
