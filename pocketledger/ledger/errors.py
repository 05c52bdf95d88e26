"""Mini README: Error taxonomy shared by the ledger store and aggregator.

Structure:
    * ValidationReason / StorageReason - enums naming each failure kind.
    * LedgerError - common base so callers can catch every ledger failure.
    * ValidationError - caller input was rejected before any mutation.
    * StorageError - the persistence medium failed or held unreadable data.

Messages are plain English for logs; user-facing wording is left to the
presentation layer, which should branch on ``reason`` rather than text.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import Transaction


class ValidationReason(str, Enum):
    """Kinds of rejected input."""

    INVALID_AMOUNT = "invalid_amount"
    INVALID_DATE = "invalid_date"
    UNKNOWN_PERIOD_MODE = "unknown_period_mode"
    INVALID_TYPE = "invalid_type"
    INVALID_CATEGORY = "invalid_category"
    INVALID_PERIOD = "invalid_period"


class StorageReason(str, Enum):
    """Kinds of persistence failure."""

    CORRUPT_DATA = "corrupt_data"
    WRITE_FAILURE = "write_failure"


class LedgerError(Exception):
    """Base class for every error raised by the ledger core."""


class ValidationError(LedgerError, ValueError):
    """Raised when caller-supplied input is malformed."""

    def __init__(self, reason: ValidationReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason


class StorageError(LedgerError):
    """Raised when persisted state cannot be read or written.

    ``transaction`` is set when an append reached memory but its write
    failed, so callers can still show the record they just created.
    """

    def __init__(
        self,
        reason: StorageReason,
        message: str,
        *,
        transaction: Optional["Transaction"] = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.transaction = transaction
