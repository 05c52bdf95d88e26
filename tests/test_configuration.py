"""Mini README: Tests for environment driven settings and store wiring."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError as SettingsError

from pocketledger.configuration import PocketLedgerSettings
from pocketledger.ledger import JsonFileStorage, MemoryStorage, build_store


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("POCKETLEDGER_STORAGE_BACKEND", "memory")
    monkeypatch.setenv("POCKETLEDGER_DATA_DIRECTORY", str(tmp_path))
    monkeypatch.setenv("POCKETLEDGER_YEAR_SPAN", "3")

    settings = PocketLedgerSettings()

    assert settings.storage_backend == "memory"
    assert settings.data_directory == tmp_path.resolve()
    assert settings.year_span == 3
    assert settings.storage_key == "personalFinanceTransactions"


def test_settings_reject_out_of_range_port() -> None:
    with pytest.raises(SettingsError):
        PocketLedgerSettings(interface_port=70000)


def test_build_store_uses_configured_backend(tmp_path: Path) -> None:
    file_store = build_store(PocketLedgerSettings(data_directory=tmp_path, storage_key="books"))
    memory_store = build_store(PocketLedgerSettings(storage_backend="memory"))

    assert isinstance(file_store._storage, JsonFileStorage)
    assert file_store.key == "books"
    assert isinstance(memory_store._storage, MemoryStorage)
