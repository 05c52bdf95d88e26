"""Mini README: FastAPI JSON surface for Pocket Ledger.

Structure:
    * create_application - application factory wiring routes to a ledger store.
    * TransactionPayload - request body for recording a transaction.

The routes only translate HTTP to ledger calls and back. Rendering, wording
and confirmation dialogs belong to whichever client consumes this API, so
amounts are returned as decimal strings and errors carry a machine readable
``reason``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional, Union

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..configuration import get_settings
from ..ledger import (
    LedgerStore,
    PeriodAggregator,
    PeriodSelector,
    StorageError,
    Transaction,
    ValidationError,
    build_store,
    year_options,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class TransactionPayload(BaseModel):
    """Fields a client submits when recording a transaction."""

    type: str
    category: str
    amount: Union[int, float, str]
    description: Optional[str] = ""
    date: Optional[str] = None


def _transaction_json(transaction: Transaction) -> Dict[str, object]:
    record = transaction.as_dict()
    record["amount"] = str(transaction.amount)
    return record


def _decimal_json(value: Decimal) -> str:
    return str(value)


def _validation_failure(error: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=422, detail={"reason": error.reason.value, "message": str(error)}
    )


def create_application(store: Optional[LedgerStore] = None) -> FastAPI:
    """Create the FastAPI application bound to ``store``.

    Without an explicit store one is built from settings and loaded from its
    storage medium. Corrupt stored data is reported through ``warnings`` on
    the summary endpoint rather than preventing startup.
    """

    settings = get_settings()
    app = FastAPI(title="Pocket Ledger", version="0.1.0")
    warnings: List[str] = []

    if store is None:
        store = build_store(settings)
        try:
            store.load()
        except StorageError as error:
            LOGGER.warning("Starting with an empty ledger: %s", error)
            warnings.append(
                "Stored transactions could not be read and were discarded: "
                f"{error.reason.value}"
            )
    aggregator = PeriodAggregator(store)

    def selected_period(
        mode: str = Query("month"),
        year: Optional[int] = Query(None),
        month: Optional[int] = Query(None, ge=1, le=12),
    ) -> PeriodSelector:
        today = store.today()
        try:
            return PeriodSelector.build(
                mode,
                year if year is not None else today.year,
                month if month is not None else today.month,
            )
        except ValidationError as error:
            raise _validation_failure(error) from error

    @app.get("/transactions")
    async def list_transactions(
        selector: PeriodSelector = Depends(selected_period),
    ) -> JSONResponse:
        """Return the transactions inside the selected period, newest first."""

        transactions = aggregator.transactions(selector)
        LOGGER.debug("Returning %s transactions", len(transactions))
        return JSONResponse(
            {"transactions": [_transaction_json(transaction) for transaction in transactions]}
        )

    @app.post("/transactions", status_code=201)
    async def record_transaction(payload: TransactionPayload) -> JSONResponse:
        """Validate and persist a new transaction."""

        try:
            transaction = store.append(
                payload.type,
                payload.category,
                payload.amount,
                payload.description,
                payload.date,
            )
        except ValidationError as error:
            raise _validation_failure(error) from error
        except StorageError as error:
            LOGGER.error("Transaction kept in memory but not persisted: %s", error)
            raise HTTPException(
                status_code=503,
                detail={
                    "reason": error.reason.value,
                    "message": str(error),
                    "transaction": _transaction_json(error.transaction)
                    if error.transaction
                    else None,
                },
            ) from error
        return JSONResponse(_transaction_json(transaction), status_code=201)

    @app.delete("/transactions")
    async def clear_transactions(confirm: bool = Query(False)) -> JSONResponse:
        """Erase the whole ledger once the client confirms."""

        if not confirm:
            raise HTTPException(status_code=400, detail="Pass confirm=true to erase the ledger.")
        try:
            store.clear()
        except StorageError as error:
            raise HTTPException(
                status_code=503, detail={"reason": error.reason.value, "message": str(error)}
            ) from error
        return JSONResponse({"cleared": True})

    @app.get("/summary")
    async def period_summary(
        selector: PeriodSelector = Depends(selected_period),
    ) -> JSONResponse:
        """Totals and balance for the selected period."""

        payload = {
            key: _decimal_json(value) if isinstance(value, Decimal) else value
            for key, value in aggregator.summary(selector).as_dict().items()
        }
        payload["warnings"] = list(warnings)
        return JSONResponse(payload)

    @app.get("/totals/{transaction_type}")
    async def type_total(
        transaction_type: str,
        selector: PeriodSelector = Depends(selected_period),
    ) -> JSONResponse:
        """Sum and count of income or expense entries in the period."""

        try:
            total = aggregator.total_by_type(selector, transaction_type)
        except ValidationError as error:
            raise _validation_failure(error) from error
        return JSONResponse({"sum": _decimal_json(total.sum), "count": total.count})

    @app.get("/periods")
    async def periods() -> JSONResponse:
        """Selectable years plus the default month selection."""

        today = store.today()
        return JSONResponse(
            {
                "years": year_options(today, settings.year_span),
                "current": {"year": today.year, "month": today.month},
                "modes": ["month", "year"],
            }
        )

    return app
