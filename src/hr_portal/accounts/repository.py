from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Account


class AccountRepository(Protocol):
    """Repository interface for Account.

    Note: services depend on this interface, not on the snapshot storage.
    """

    def get_by_id(self, account_id: str) -> Optional[Account]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Account]:
        """Lookup by normalized (trimmed, lower-cased) email."""
        raise NotImplementedError

    def list_all(self) -> Sequence[Account]:
        raise NotImplementedError

    def add(self, account: Account) -> None:
        raise NotImplementedError

    def replace(self, account: Account) -> bool:
        raise NotImplementedError

    def delete_by_id(self, account_id: str) -> bool:
        raise NotImplementedError
