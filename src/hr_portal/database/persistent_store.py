from __future__ import annotations

import json
import logging
from typing import Optional, Tuple

from ..core.constants import STORAGE_KEY
from ..core.exceptions import StoreError
from .bootstrap import seed_database
from .snapshot import Database
from .storage import KeyValueStore

logger = logging.getLogger(__name__)


class PersistentStore:
    """Loads and saves the snapshot under a single storage key."""

    def __init__(self, slots: KeyValueStore, key: str = STORAGE_KEY):
        self._slots = slots
        self._key = key

    def load(self) -> Database:
        db, _ = self.load_or_seed()
        return db

    def load_or_seed(self) -> Tuple[Database, Optional[StoreError]]:
        """Read the snapshot, seeding defaults when it is missing or malformed.

        The second element is the failure from persisting the seed, if any.
        """
        try:
            raw = self._slots.get(self._key)
            if raw is None:
                logger.info("no snapshot under %r, seeding defaults", self._key)
                return self._seed()
            return Database.from_dict(json.loads(raw)), None
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            # UnicodeDecodeError from an undecodable slot is a ValueError
            logger.error("snapshot under %r is malformed (%s), seeding defaults", self._key, e)
            return self._seed()

    def save(self, db: Database) -> Optional[StoreError]:
        """Write the whole snapshot. Failures are returned, not raised."""
        try:
            payload = json.dumps(db.to_dict())
            self._slots.set(self._key, payload)
        except (OSError, TypeError, ValueError) as e:
            logger.error("failed to save snapshot: %s", e)
            return StoreError(f"Failed to save data: {e}")
        return None

    def _seed(self) -> Tuple[Database, Optional[StoreError]]:
        db = seed_database()
        return db, self.save(db)
