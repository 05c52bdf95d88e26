"""Mini README: Tests for the storage media and backend registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from pocketledger.ledger import (
    STORAGE_BACKENDS,
    JsonFileStorage,
    LedgerStore,
    MemoryStorage,
    StorageError,
    StorageReason,
)


def test_file_storage_replaces_blob(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path / "nested")

    assert storage.get("ledger") is None
    storage.set("ledger", "[1]")
    storage.set("ledger", "[2]")

    assert storage.get("ledger") == "[2]"
    assert sorted(p.name for p in (tmp_path / "nested").iterdir()) == ["ledger.json"]


def test_file_storage_write_failure_is_reported(tmp_path: Path) -> None:
    blocker = tmp_path / "blocked"
    blocker.write_text("not a directory")
    storage = JsonFileStorage(blocker)

    with pytest.raises(StorageError) as excinfo:
        storage.set("ledger", "[]")

    assert excinfo.value.reason is StorageReason.WRITE_FAILURE


def test_store_survives_restart_on_disk(tmp_path: Path, fixed_clock) -> None:
    first = LedgerStore(JsonFileStorage(tmp_path), clock=fixed_clock)
    created = first.append("expense", "Credit Card", "42.75", "groceries", "2024-03-01")

    second = LedgerStore(JsonFileStorage(tmp_path), clock=fixed_clock)

    assert second.load() == [created]


def test_registry_builds_known_backends(tmp_path: Path) -> None:
    assert list(STORAGE_BACKENDS.available_backends()) == ["file", "memory"]
    assert isinstance(STORAGE_BACKENDS.create("memory"), MemoryStorage)
    assert isinstance(STORAGE_BACKENDS.create("FILE", directory=tmp_path), JsonFileStorage)

    with pytest.raises(KeyError):
        STORAGE_BACKENDS.create("cloud")
