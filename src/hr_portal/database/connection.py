from __future__ import annotations

from typing import Optional

from ..core.exceptions import StoreError
from .persistent_store import PersistentStore
from .snapshot import Database


class SnapshotConnection:
    """Owns the live snapshot for the process lifetime.

    Note: the snapshot is loaded once, mutated in place by repositories and
    written back whole after each mutation.
    """

    def __init__(self, store: PersistentStore):
        self._store = store
        self._db: Optional[Database] = None
        self._last_error: Optional[StoreError] = None

    @property
    def database(self) -> Database:
        if self._db is None:
            self._db, error = self._store.load_or_seed()
            if error is not None:
                self._last_error = error
        return self._db

    def commit(self) -> None:
        error = self._store.save(self.database)
        if error is not None:
            self._last_error = error

    def rollback(self, backup: Database) -> None:
        self._db = backup

    def take_error(self) -> Optional[StoreError]:
        """Return and clear the last save failure."""
        error, self._last_error = self._last_error, None
        return error
