"""
Errors raised by the movie store.

RecordNotFoundError and EditConflictError are the two conditions callers
branch on. Every other failure is an opaque StoreError.
"""


class StoreError(Exception):
    """Data-layer failure (connectivity, constraint violation, ...)."""


class RecordNotFoundError(StoreError):
    """No record exists with the requested id."""

    def __init__(self, message: str = "record not found"):
        super().__init__(message)


class EditConflictError(StoreError):
    """The record changed (or was deleted) since the caller read it."""

    def __init__(self, message: str = "edit conflict"):
        super().__init__(message)


class QueryTimeoutError(StoreError):
    """A statement ran past the store's per-operation timeout."""
