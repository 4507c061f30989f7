"""
Application-layer exceptions.

These exceptions are raised by the workout store and the storage adapters.
Validation and not-found errors are reported to the caller; persistence
errors raised during a save are caught and logged by the store.
"""

from typing import List, Optional


class FitnessStoreError(Exception):
    """Base class for all store errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FitnessStoreError):
    """Raised when a required string is blank or a numeric field is invalid."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(FitnessStoreError):
    """Raised when a referenced workout or exercise does not exist."""

    def __init__(
        self,
        message: str,
        *,
        entity: Optional[str] = None,
        entity_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id


class PersistenceError(FitnessStoreError):
    """Error reading, writing, encoding or decoding the persisted document.

    Raised by blob stores on I/O failure. The store catches it during
    saves so the in-memory change survives for the rest of the session.
    """

    pass
