"""Mini README: Value types for the ledger core.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - frozen dataclass holding one recorded entry.
    * PeriodMode / PeriodSelector - reporting period queried by the aggregator.
    * parse_amount / parse_date / parse_category - input coercion helpers
      raising ``ValidationError`` with the matching reason.

Amounts are ``Decimal`` throughout and always positive; whether an entry adds
to or subtracts from the balance is decided by its type when aggregating.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Optional

from .errors import ValidationError, ValidationReason


class TransactionType(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: object) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            normalised = str(value).strip().lower()
            return cls(normalised)
        except ValueError as error:
            raise ValidationError(
                ValidationReason.INVALID_TYPE, f"Unsupported transaction type: {value!r}"
            ) from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a single ledger entry; never mutated after creation."""

    transaction_id: int
    transaction_type: TransactionType
    category: str
    amount: Decimal
    description: str
    occurred_on: date
    created_at: datetime

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction using the persisted field names."""

        return {
            "id": self.transaction_id,
            "type": self.transaction_type.value,
            "category": self.category,
            "amount": self.amount,
            "description": self.description,
            "date": self.occurred_on.isoformat(),
            "timestamp": self.created_at.isoformat(),
        }


class PeriodMode(str, Enum):
    """Reporting granularity."""

    MONTH = "month"
    YEAR = "year"

    @classmethod
    def from_str(cls, value: object) -> "PeriodMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as error:
            raise ValidationError(
                ValidationReason.UNKNOWN_PERIOD_MODE, f"Unknown period mode: {value!r}"
            ) from error


@dataclass(frozen=True, slots=True)
class PeriodSelector:
    """Month or year the caller wants to report on.

    ``month`` runs 1-12 and is only consulted when ``mode`` is ``MONTH``.
    """

    mode: PeriodMode
    year: int
    month: Optional[int] = None

    def __post_init__(self) -> None:
        # Unrecognised modes are kept as-is and rejected when filtering.
        if not isinstance(self.mode, PeriodMode) and str(self.mode).lower() in {"month", "year"}:
            object.__setattr__(self, "mode", PeriodMode(str(self.mode).lower()))
        if self.mode is PeriodMode.MONTH and (self.month is None or not 1 <= self.month <= 12):
            raise ValidationError(
                ValidationReason.INVALID_PERIOD,
                f"Month selectors need a month between 1 and 12, got {self.month!r}",
            )

    @classmethod
    def for_month(cls, year: int, month: int) -> "PeriodSelector":
        return cls(PeriodMode.MONTH, year, month)

    @classmethod
    def for_year(cls, year: int) -> "PeriodSelector":
        return cls(PeriodMode.YEAR, year)

    @classmethod
    def current(cls, today: date, mode: PeriodMode = PeriodMode.MONTH) -> "PeriodSelector":
        """Selector covering ``today`` at the requested granularity."""

        if PeriodMode.from_str(mode) is PeriodMode.YEAR:
            return cls.for_year(today.year)
        return cls.for_month(today.year, today.month)

    @classmethod
    def build(
        cls, mode: object, year: int, month: Optional[int] = None
    ) -> "PeriodSelector":
        """Create a selector from loosely typed query values."""

        resolved = PeriodMode.from_str(mode)
        if resolved is PeriodMode.YEAR:
            return cls.for_year(year)
        return cls(resolved, year, month)


def parse_amount(value: object) -> Decimal:
    """Return ``value`` as a finite, strictly positive ``Decimal``.

    Unparseable input and non-positive numbers are reported the same way.
    """

    if isinstance(value, bool) or value is None:
        raise ValidationError(ValidationReason.INVALID_AMOUNT, f"Invalid amount: {value!r}")
    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, float):
            amount = Decimal(repr(value))
        else:
            amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as error:
        raise ValidationError(
            ValidationReason.INVALID_AMOUNT, f"Invalid amount: {value!r}"
        ) from error
    if not amount.is_finite() or amount <= 0:
        raise ValidationError(ValidationReason.INVALID_AMOUNT, f"Invalid amount: {value!r}")
    return amount


def parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects into a calendar date."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise ValidationError(
                ValidationReason.INVALID_DATE, f"Invalid date: {value!r}"
            ) from error
    raise ValidationError(ValidationReason.INVALID_DATE, f"Invalid date: {value!r}")


def parse_category(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(ValidationReason.INVALID_CATEGORY, "Category must be a non-empty string")
    return value.strip()
