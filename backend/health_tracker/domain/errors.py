"""
Error types for the health tracker.

DomainError and its ValidationError subtype mean the caller sent bad input
(HTTP 400). StorageError means the datastore failed (HTTP 500) and is kept
outside the DomainError hierarchy so the two can be told apart.
"""


class DomainError(Exception):
    """A business rule was violated."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Input failed validation: out-of-range value, bad date or unknown unit."""


class StorageError(Exception):
    """The storage backend failed to read or write health entries."""
