"""Mini README: Persistence media holding the serialised ledger.

Structure:
    * StorageMedium - abstract string-keyed blob store (get/set).
    * MemoryStorage - dict-backed medium for tests and throwaway sessions.
    * JsonFileStorage - one ``<key>.json`` file per key, replaced atomically.
    * StorageBackendRegistry / STORAGE_BACKENDS - name to medium lookup used
      when wiring a store from settings.

Media only move strings around. Turning the blob into transactions, and
deciding what counts as corrupt, is the store's job.
"""

from __future__ import annotations

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, Optional, Type

from ..logging_utils import get_logger
from .errors import StorageError, StorageReason

LOGGER = get_logger(__name__)


class StorageMedium(ABC):
    """Base interface for a local key/value persistence medium."""

    backend_name: str = "generic"

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the blob stored under ``key`` or ``None`` when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Replace the blob stored under ``key``.

        Implementations raise ``StorageError`` with ``WRITE_FAILURE`` when the
        value could not be made durable.
        """


class MemoryStorage(StorageMedium):
    """Keep blobs in a dictionary for the lifetime of the object."""

    backend_name = "memory"

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._blobs: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    def set(self, key: str, value: str) -> None:
        self._blobs[key] = value


class JsonFileStorage(StorageMedium):
    """Store each key as a JSON file inside ``directory``."""

    backend_name = "file"

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)
        LOGGER.debug("File storage rooted at %s", self.directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            raise StorageError(
                StorageReason.CORRUPT_DATA, f"Unable to read ledger file {path}: {error}"
            ) from error

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            # Write beside the target so os.replace stays on one filesystem.
            descriptor, temp_name = tempfile.mkstemp(
                dir=self.directory, prefix=f".{key}.", suffix=".tmp"
            )
            try:
                with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
                    handle.write(value)
                os.replace(temp_name, path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
        except OSError as error:
            LOGGER.error("Failed to write ledger file %s: %s", path, error)
            raise StorageError(
                StorageReason.WRITE_FAILURE, f"Unable to write ledger file {path}: {error}"
            ) from error
        LOGGER.debug("Wrote %s bytes to %s", len(value), path)


class StorageBackendRegistry:
    """Simple registry mapping backend identifiers to medium classes."""

    def __init__(self) -> None:
        self._backends: Dict[str, Type[StorageMedium]] = {}

    def register(self, backend: Type[StorageMedium]) -> None:
        identifier = backend.backend_name.lower()
        LOGGER.debug("Registering storage backend '%s'", identifier)
        self._backends[identifier] = backend

    def available_backends(self) -> Iterable[str]:
        return sorted(self._backends.keys())

    def create(self, identifier: str, *, directory: Optional[Path] = None) -> StorageMedium:
        """Instantiate the medium registered under ``identifier``."""

        backend_cls = self._backends.get(identifier.lower())
        if not backend_cls:
            raise KeyError(f"Unknown storage backend '{identifier}'")
        LOGGER.info("Creating storage backend '%s'", identifier)
        if backend_cls is JsonFileStorage:
            if directory is None:
                raise ValueError("The file backend needs a data directory.")
            return JsonFileStorage(directory)
        return backend_cls()


STORAGE_BACKENDS = StorageBackendRegistry()
STORAGE_BACKENDS.register(MemoryStorage)
STORAGE_BACKENDS.register(JsonFileStorage)
