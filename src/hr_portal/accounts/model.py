from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Account:
    """Domain entity: Account.

    Note: plain data only; storage access lives in the repositories.
    """

    account_id: str
    first_name: str
    last_name: str
    email: str
    password_hash: str
    role: Role
    verified: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
