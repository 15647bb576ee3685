from __future__ import annotations

import copy
from contextlib import contextmanager
from typing import Generic, Iterator, List, Optional, Sequence, TypeVar

from .connection import SnapshotConnection
from .snapshot import Database

T = TypeVar("T")


@contextmanager
def snapshot_write(conn: SnapshotConnection) -> Iterator[Database]:
    """Yield the live snapshot for one mutation, then save it exactly once.

    If the block raises, the snapshot is restored and nothing is written.
    """
    db = conn.database
    backup = copy.deepcopy(db)
    try:
        yield db
    except Exception:
        conn.rollback(backup)
        raise
    conn.commit()


class SnapshotRepository(Generic[T]):
    """Id-keyed collection stored in one attribute of the snapshot."""

    collection: str = ""

    def __init__(self, conn: SnapshotConnection):
        self._conn = conn

    @staticmethod
    def _id_of(item: T) -> str:
        raise NotImplementedError

    def _items(self, db: Optional[Database] = None) -> List[T]:
        return getattr(db or self._conn.database, self.collection)

    def get_by_id(self, item_id: str) -> Optional[T]:
        for item in self._items():
            if self._id_of(item) == item_id:
                return item
        return None

    def list_all(self) -> Sequence[T]:
        return list(self._items())

    def add(self, item: T) -> None:
        with snapshot_write(self._conn) as db:
            self._items(db).append(item)

    def replace(self, item: T) -> bool:
        item_id = self._id_of(item)
        if self.get_by_id(item_id) is None:
            return False
        with snapshot_write(self._conn) as db:
            items = self._items(db)
            for i, existing in enumerate(items):
                if self._id_of(existing) == item_id:
                    items[i] = item
                    break
        return True

    def delete_by_id(self, item_id: str) -> bool:
        if self.get_by_id(item_id) is None:
            return False
        with snapshot_write(self._conn) as db:
            setattr(db, self.collection, [x for x in self._items(db) if self._id_of(x) != item_id])
        return True
