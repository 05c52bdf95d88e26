"""Mini README: Centralised configuration for Pocket Ledger.

Structure:
    * PocketLedgerSettings - pydantic-settings model read from the environment.
    * get_settings - cached accessor so validation happens once per process.

Usage:
    Variables are prefixed with ``POCKETLEDGER_`` (for example
    ``POCKETLEDGER_STORAGE_BACKEND=memory``) and may also live in a ``.env``
    file next to the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PocketLedgerSettings(BaseSettings):
    """Runtime configuration for the ledger and its JSON interface."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETLEDGER_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        validate_default=True,
        description="Directory holding the persisted ledger when the file backend is used.",
    )
    storage_backend: Literal["file", "memory"] = Field(
        "file",
        description="Persistence medium for the ledger blob.",
    )
    storage_key: str = Field(
        "personalFinanceTransactions",
        min_length=1,
        description="Well-known key the serialised transaction list is stored under.",
    )
    year_span: int = Field(
        5,
        ge=0,
        description="Number of years either side of the current year offered by period pickers.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the JSON service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the JSON service listens on.",
        ge=1,
        le=65535,
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand user directories; creation is left to the file backend."""

        return Path(value).expanduser().resolve()


@lru_cache()
def get_settings() -> PocketLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PocketLedgerSettings()
