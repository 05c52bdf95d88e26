"""Mini README: Shared fixtures for the ledger test-suite.

Structure:
    * fixed_clock - deterministic clock pinned to 2024-03-15 09:30 UTC.
    * memory_store - empty ``LedgerStore`` over ``MemoryStorage``.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from pocketledger.ledger import LedgerStore, MemoryStorage

FIXED_NOW = datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def memory_store(fixed_clock) -> LedgerStore:
    return LedgerStore(MemoryStorage(), clock=fixed_clock)
