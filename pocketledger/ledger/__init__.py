"""Mini README: Transaction ledger and period reporting for Pocket Ledger.

The ``store`` module owns the persisted collection of income and expense
entries, ``aggregator`` filters it by month or year and derives totals, and
``storage`` provides the media the collection is written to. Errors raised
by any of them derive from ``LedgerError``.
"""

from .aggregator import (
    PeriodAggregator,
    PeriodReport,
    PeriodSummary,
    TypeTotal,
    filter_transactions,
    summarize,
    total_by_type,
    year_options,
)
from .errors import LedgerError, StorageError, StorageReason, ValidationError, ValidationReason
from .models import PeriodMode, PeriodSelector, Transaction, TransactionType
from .storage import STORAGE_BACKENDS, JsonFileStorage, MemoryStorage, StorageMedium
from .store import LedgerStore, build_store

__all__ = [
    "JsonFileStorage",
    "LedgerError",
    "LedgerStore",
    "MemoryStorage",
    "PeriodAggregator",
    "PeriodMode",
    "PeriodReport",
    "PeriodSelector",
    "PeriodSummary",
    "STORAGE_BACKENDS",
    "StorageError",
    "StorageMedium",
    "StorageReason",
    "Transaction",
    "TransactionType",
    "TypeTotal",
    "ValidationError",
    "ValidationReason",
    "build_store",
    "filter_transactions",
    "summarize",
    "total_by_type",
    "year_options",
]
