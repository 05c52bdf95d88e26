"""Mini README: Tests for the FastAPI JSON interface.

Uses ``TestClient`` against an application bound to an in-memory store so
requests exercise the real ledger without touching disk.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from pocketledger.interface import create_application
from pocketledger.ledger import LedgerStore


@pytest.fixture
def client(memory_store: LedgerStore) -> TestClient:
    return TestClient(create_application(store=memory_store))


def _seed(client: TestClient) -> None:
    for body in (
        {"type": "income", "category": "Salary", "amount": 5000, "date": "2024-01-10"},
        {"type": "expense", "category": "Credit Card", "amount": "1200", "date": "2024-01-15"},
        {"type": "expense", "category": "Shopee", "amount": 300, "date": "2024-02-01"},
    ):
        assert client.post("/transactions", json=body).status_code == 201


def test_record_and_list_by_month(client: TestClient) -> None:
    _seed(client)

    response = client.get("/transactions", params={"mode": "month", "year": 2024, "month": 1})

    assert response.status_code == 200
    categories = [item["category"] for item in response.json()["transactions"]]
    assert categories == ["Credit Card", "Salary"]


def test_summary_and_totals(client: TestClient) -> None:
    _seed(client)

    month = client.get("/summary", params={"mode": "month", "year": 2024, "month": 1}).json()
    year = client.get("/summary", params={"mode": "year", "year": 2024}).json()
    expenses = client.get("/totals/expense", params={"mode": "year", "year": 2024}).json()

    assert (month["total_income"], month["total_expense"], month["balance"]) == ("5000", "1200", "3800")
    assert (year["balance"], year["count"]) == ("3500", 3)
    assert expenses == {"sum": "1500", "count": 2}
    assert year["warnings"] == []


def test_invalid_amount_returns_reason(client: TestClient) -> None:
    response = client.post("/transactions", json={"type": "expense", "category": "Food", "amount": -50})

    assert response.status_code == 422
    assert response.json()["detail"]["reason"] == "invalid_amount"
    assert client.get("/summary", params={"mode": "year", "year": 2024}).json()["count"] == 0


def test_unknown_mode_and_type_are_rejected(client: TestClient) -> None:
    assert client.get("/summary", params={"mode": "week", "year": 2024}).status_code == 422
    assert client.get("/totals/transfer").status_code == 422


def test_clear_requires_confirmation(client: TestClient) -> None:
    _seed(client)

    assert client.delete("/transactions").status_code == 400
    assert client.delete("/transactions", params={"confirm": "true"}).json() == {"cleared": True}
    assert client.get("/transactions", params={"mode": "year", "year": 2024}).json() == {"transactions": []}


def test_periods_offer_years_around_today(client: TestClient) -> None:
    payload = client.get("/periods").json()

    assert payload["current"] == {"year": 2024, "month": 3}
    assert 2024 in payload["years"]
    assert payload["modes"] == ["month", "year"]


def test_default_period_is_current_month(client: TestClient) -> None:
    client.post("/transactions", json={"type": "income", "category": "Bonus", "amount": 10})

    assert client.get("/summary").json()["total_income"] == "10"


def test_corrupt_storage_surfaces_warning(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    from pocketledger.configuration import get_settings

    (tmp_path / "personalFinanceTransactions.json").write_text("{broken", encoding="utf-8")
    monkeypatch.setenv("POCKETLEDGER_DATA_DIRECTORY", str(tmp_path))
    monkeypatch.setenv("POCKETLEDGER_STORAGE_BACKEND", "file")
    get_settings.cache_clear()
    try:
        app_client = TestClient(create_application())
        payload = app_client.get("/summary").json()
    finally:
        get_settings.cache_clear()

    assert payload["count"] == 0
    assert "corrupt_data" in payload["warnings"][0]
