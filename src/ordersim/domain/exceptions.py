"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI layer
can catch them uniformly and display user-friendly messages.  None of them is
fatal to the process: storage and backend errors are recovered where they
occur, validation errors are reported to the submitter.
"""

from __future__ import annotations

from enum import Enum


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationReason(Enum):
    AMOUNT_OUT_OF_RANGE = "AmountOutOfRange"
    NO_ITEMS = "NoItems"


class ValidationError(DomainException):
    """Submitted order data was rejected before any state changed."""

    def __init__(self, message: str, reason: ValidationReason | None = None) -> None:
        super().__init__(message)
        self.reason = reason


class InvalidTransitionError(DomainException):
    """An order status change does not follow a legal lifecycle edge."""


class PersistenceUnavailable(DomainException):
    """The snapshot storage could not be read or written."""


class BackendUnreachable(DomainException):
    """The backend notification failed, timed out or was refused."""
