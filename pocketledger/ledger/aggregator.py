"""Mini README: Period filtering and summary figures for the ledger.

Structure:
    * filter_transactions - keep entries dated inside a month or a year.
    * summarize - total income, total expense and balance as ``Decimal``.
    * total_by_type - sum and count for one transaction type.
    * PeriodAggregator - the same queries bound to a ``LedgerStore`` handle.
    * year_options - years offered by period pickers around today.

The module-level functions are pure; they never touch storage and never
reorder their input.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from ..logging_utils import get_logger
from .models import PeriodMode, PeriodSelector, Transaction, TransactionType
from .store import LedgerStore

LOGGER = get_logger(__name__)

ZERO = Decimal("0")


@dataclass(frozen=True, slots=True)
class PeriodSummary:
    """Headline figures for a filtered set of transactions."""

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    transaction_count: int = 0

    def as_dict(self) -> Dict[str, object]:
        return {
            "total_income": self.total_income,
            "total_expense": self.total_expense,
            "balance": self.balance,
            "count": self.transaction_count,
        }


@dataclass(frozen=True, slots=True)
class TypeTotal:
    """Sum and number of transactions of a single type."""

    sum: Decimal
    count: int


@dataclass(frozen=True, slots=True)
class PeriodReport:
    """Filtered transactions together with their summary."""

    selector: PeriodSelector
    transactions: List[Transaction]
    summary: PeriodSummary


def filter_transactions(
    transactions: Iterable[Transaction], selector: PeriodSelector
) -> List[Transaction]:
    """Return the transactions dated inside ``selector``, preserving order."""

    mode = PeriodMode.from_str(selector.mode)
    if mode is PeriodMode.MONTH:
        return [
            transaction
            for transaction in transactions
            if transaction.occurred_on.year == selector.year
            and transaction.occurred_on.month == selector.month
        ]
    return [
        transaction for transaction in transactions if transaction.occurred_on.year == selector.year
    ]


def total_by_type(
    transactions: Iterable[Transaction], transaction_type: TransactionType | str
) -> TypeTotal:
    """Sum the amounts of one transaction type."""

    wanted = TransactionType.from_str(transaction_type)
    matching = [t.amount for t in transactions if t.transaction_type is wanted]
    return TypeTotal(sum=sum(matching, ZERO), count=len(matching))


def summarize(transactions: Sequence[Transaction]) -> PeriodSummary:
    """Compute income, expense and balance with exact decimal arithmetic."""

    total_income = ZERO
    total_expense = ZERO
    for transaction in transactions:
        if transaction.transaction_type is TransactionType.INCOME:
            total_income += transaction.amount
        else:
            total_expense += transaction.amount
    return PeriodSummary(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
        transaction_count=len(transactions),
    )


def year_options(today: date, span: int = 5) -> List[int]:
    """Years from ``span`` before to ``span`` after ``today``'s year."""

    return list(range(today.year - span, today.year + span + 1))


class PeriodAggregator:
    """Run period queries against the collection owned by a store."""

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def transactions(self, selector: PeriodSelector) -> List[Transaction]:
        return filter_transactions(self._store.all(), selector)

    def summary(self, selector: PeriodSelector) -> PeriodSummary:
        return summarize(self.transactions(selector))

    def total_by_type(
        self, selector: PeriodSelector, transaction_type: TransactionType | str
    ) -> TypeTotal:
        return total_by_type(self.transactions(selector), transaction_type)

    def report(self, selector: PeriodSelector) -> PeriodReport:
        """Filter once and summarise the result for display."""

        filtered = self.transactions(selector)
        summary = summarize(filtered)
        LOGGER.debug(
            "Report for %s %s/%s -> %s transactions, balance %s",
            selector.mode,
            selector.year,
            selector.month,
            summary.transaction_count,
            summary.balance,
        )
        return PeriodReport(selector=selector, transactions=filtered, summary=summary)
