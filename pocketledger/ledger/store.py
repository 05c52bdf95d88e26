"""Mini README: Ledger store owning the persisted transaction collection.

Structure:
    * LedgerStore - append, read, clear and load the collection.
    * build_store - wire a store from ``PocketLedgerSettings``.
    * serialise_transactions / deserialise_transactions - JSON blob codec.

Every mutation rewrites the whole collection through the storage medium.
Newest entries sit at the head of the collection. Records are validated
before anything changes, so a rejected append leaves memory and disk alone.
"""

from __future__ import annotations

import json
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Annotated, Callable, Iterator, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, TypeAdapter
from pydantic import ValidationError as SchemaError

from ..configuration import PocketLedgerSettings
from ..logging_utils import get_logger
from .errors import StorageError, StorageReason
from .models import Transaction, TransactionType, parse_amount, parse_category, parse_date
from .storage import STORAGE_BACKENDS, StorageMedium

LOGGER = get_logger(__name__)

DEFAULT_STORAGE_KEY = "personalFinanceTransactions"

Clock = Callable[[], datetime]
IdGenerator = Callable[[], int]


def system_clock() -> datetime:
    """Current local time, timezone aware."""

    return datetime.now().astimezone()


class _PersistedTransaction(BaseModel):
    """Schema of one element in the persisted JSON array."""

    model_config = ConfigDict(extra="ignore")

    id: int
    type: TransactionType
    category: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    amount: Decimal = Field(gt=0, allow_inf_nan=False)
    description: str = ""
    occurred_on: date = Field(alias="date")
    timestamp: Optional[datetime] = None

    def to_transaction(self) -> Transaction:
        created_at = self.timestamp or datetime.combine(self.occurred_on, time(), tzinfo=timezone.utc)
        return Transaction(
            transaction_id=self.id,
            transaction_type=self.type,
            category=self.category,
            amount=self.amount,
            description=self.description,
            occurred_on=self.occurred_on,
            created_at=created_at,
        )


_PERSISTED_LIST = TypeAdapter(List[_PersistedTransaction])

# CPython refuses to parse longer integer literals by default.
_MAX_INT_DIGITS = 4300


def _encode_record(transaction: Transaction) -> str:
    """Encode one record with its amount written as an exact JSON number.

    ``json`` only emits floats for non-integers, so the amount is spliced in
    as the Decimal text. A finite positive Decimal always prints as a valid
    JSON number, exponent form included.
    """

    record = transaction.as_dict()
    amount = str(record.pop("amount"))
    if amount.isdigit() and len(amount) > _MAX_INT_DIGITS:
        # Huge integer literals are refused by json.loads; exponent form is not.
        amount = format(transaction.amount, "E")
    body = json.dumps(record, ensure_ascii=False)
    return f"{body[:-1]}, \"amount\": {amount}}}"


def serialise_transactions(transactions: Sequence[Transaction]) -> str:
    """Encode transactions as the persisted JSON array."""

    return "[" + ", ".join(_encode_record(transaction) for transaction in transactions) + "]"


def deserialise_transactions(blob: str) -> List[Transaction]:
    """Decode a persisted JSON array, raising ``StorageError`` when malformed."""

    # Oversized integer literals raise ValueError and deep nesting RecursionError.
    try:
        # Decimal parsing keeps amounts like 0.1 exact.
        raw = json.loads(blob, parse_float=Decimal)
        records = _PERSISTED_LIST.validate_python(raw)
    except (ValueError, RecursionError, SchemaError) as error:
        raise StorageError(StorageReason.CORRUPT_DATA, f"Persisted ledger is malformed: {error}") from error
    return [record.to_transaction() for record in records]


class LedgerStore:
    """Own the transaction collection and keep it in sync with storage."""

    def __init__(
        self,
        storage: StorageMedium,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Optional[Clock] = None,
        id_generator: Optional[IdGenerator] = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._clock = clock or system_clock
        self._id_generator = id_generator or self._timestamp_id
        self._transactions: List[Transaction] = []
        self._last_id = 0
        LOGGER.debug("Ledger store initialised with key '%s'", key)

    @property
    def key(self) -> str:
        return self._key

    def today(self) -> date:
        """Current date according to the store's clock."""

        return self._clock().date()

    def _timestamp_id(self) -> int:
        return int(self._clock().timestamp() * 1000)

    def _next_id(self) -> int:
        """Return a fresh identifier strictly greater than any seen so far."""

        candidate = self._id_generator()
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def _persist(self) -> None:
        self._storage.set(self._key, serialise_transactions(self._transactions))

    def load(self) -> List[Transaction]:
        """Rebuild the collection from storage.

        A missing blob yields an empty ledger. A malformed blob also leaves the
        ledger empty, but ``StorageError`` is raised so the caller can warn the
        user that the stored data was discarded.
        """

        try:
            blob = self._storage.get(self._key)
            transactions = deserialise_transactions(blob) if blob is not None else []
        except StorageError:
            self._transactions = []
            LOGGER.warning("Stored ledger under '%s' is unreadable; starting empty", self._key)
            raise
        self._transactions = transactions
        self._last_id = max((t.transaction_id for t in transactions), default=0)
        LOGGER.debug("Loaded %s transactions from '%s'", len(transactions), self._key)
        return list(self._transactions)

    def append(
        self,
        transaction_type: TransactionType | str,
        category: str,
        amount: object,
        description: Optional[str] = "",
        occurred_on: object = None,
    ) -> Transaction:
        """Validate, record and persist a new transaction."""

        resolved_type = TransactionType.from_str(transaction_type)
        resolved_category = parse_category(category)
        resolved_amount = parse_amount(amount)
        resolved_date = self.today() if occurred_on is None else parse_date(occurred_on)

        transaction = Transaction(
            transaction_id=self._next_id(),
            transaction_type=resolved_type,
            category=resolved_category,
            amount=resolved_amount,
            description=description or "",
            occurred_on=resolved_date,
            created_at=self._clock(),
        )
        self._transactions.insert(0, transaction)
        LOGGER.info(
            "Recorded %s %s in '%s' on %s",
            transaction.transaction_type.value,
            transaction.amount,
            transaction.category,
            transaction.occurred_on.isoformat(),
        )
        try:
            self._persist()
        except StorageError as error:
            raise StorageError(error.reason, str(error), transaction=transaction) from error
        return transaction

    def all(self) -> List[Transaction]:
        """Return the collection, most recently appended first."""

        return list(self._transactions)

    def clear(self) -> None:
        """Drop every transaction and persist the empty ledger.

        Confirmation is the caller's responsibility.
        """

        removed = len(self._transactions)
        self._transactions = []
        LOGGER.info("Cleared %s transactions from '%s'", removed, self._key)
        self._persist()

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._transactions))


def build_store(settings: PocketLedgerSettings) -> LedgerStore:
    """Create a store backed by the medium named in ``settings``."""

    storage = STORAGE_BACKENDS.create(
        settings.storage_backend, directory=settings.data_directory
    )
    return LedgerStore(storage, key=settings.storage_key)
