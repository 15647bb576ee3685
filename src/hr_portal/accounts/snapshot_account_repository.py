from __future__ import annotations

from typing import Optional

from ..common.validators import normalize_email
from ..database.snapshot_base import SnapshotRepository
from .model import Account
from .repository import AccountRepository


class SnapshotAccountRepository(SnapshotRepository[Account], AccountRepository):
    collection = "accounts"

    @staticmethod
    def _id_of(item: Account) -> str:
        return item.account_id

    def get_by_email(self, email: str) -> Optional[Account]:
        email = normalize_email(email)
        for account in self._items():
            if account.email == email:
                return account
        return None
