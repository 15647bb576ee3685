from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from werkzeug.security import generate_password_hash

from ..common.ids import generate_id
from ..common.validators import normalize_email, require_non_empty, require_password
from ..core.constants import UNVERIFIED_EMAIL_KEY
from ..core.enums import Role
from ..core.exceptions import DuplicateEmail, ReferentialError, SelfDeletionForbidden, ValidationError
from ..database.storage import KeyValueStore
from .model import Account
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Use case: registration, verification and admin management of accounts."""

    def __init__(self, accounts: AccountRepository, slots: KeyValueStore):
        self._accounts = accounts
        self._slots = slots

    def get(self, account_id: str) -> Optional[Account]:
        return self._accounts.get_by_id(account_id)

    def get_by_email(self, email: str) -> Optional[Account]:
        return self._accounts.get_by_email(normalize_email(email))

    def list_all(self) -> Sequence[Account]:
        return self._accounts.list_all()

    def _require_email(self, email: str) -> str:
        email = normalize_email(email)
        if not email or "@" not in email:
            raise ValidationError("A valid email is required")
        return email

    def _require(self, account_id: str) -> Account:
        account = self._accounts.get_by_id(account_id)
        if not account:
            raise ReferentialError("Account not found")
        return account

    def register(self, *, first_name: str, last_name: str, email: str, password: str) -> Account:
        email = self._require_email(email)
        if self._accounts.get_by_email(email):
            raise DuplicateEmail()
        require_password(password)

        account = Account(
            account_id=generate_id(),
            first_name=(first_name or "").strip(),
            last_name=(last_name or "").strip(),
            email=email,
            password_hash=generate_password_hash(password),
            role=Role.USER,
            verified=False,
        )
        self._accounts.add(account)
        self._write_slot(UNVERIFIED_EMAIL_KEY, email)
        logger.info("registered %s (pending verification)", email)
        return account

    def pending_email(self) -> Optional[str]:
        return self._slots.get(UNVERIFIED_EMAIL_KEY)

    def verify_pending_email(self) -> Account:
        email = self.pending_email()
        if not email:
            raise ValidationError("No pending verification")

        account = self._accounts.get_by_email(email)
        if not account:
            raise ReferentialError("Verification failed")

        verified = replace(account, verified=True)
        self._accounts.replace(verified)
        self._remove_slot(UNVERIFIED_EMAIL_KEY)
        logger.info("verified %s", email)
        return verified

    def create_account(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        role: Role,
        verified: bool,
    ) -> Account:
        email = self._require_email(email)
        require_password(password)
        if self._accounts.get_by_email(email):
            raise DuplicateEmail("Email already exists")

        account = Account(
            account_id=generate_id(),
            first_name=(first_name or "").strip(),
            last_name=(last_name or "").strip(),
            email=email,
            password_hash=generate_password_hash(password),
            role=role,
            verified=bool(verified),
        )
        self._accounts.add(account)
        return account

    def update_account(
        self,
        *,
        account_id: str,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        role: Role,
        verified: bool,
    ) -> Account:
        """Admin edit. A blank password keeps the current one."""
        account = self._require(account_id)
        email = self._require_email(email)

        owner = self._accounts.get_by_email(email)
        if owner and owner.account_id != account.account_id:
            raise DuplicateEmail("Email already exists")

        password_hash = account.password_hash
        if password:
            password_hash = generate_password_hash(require_password(password))

        updated = replace(
            account,
            first_name=(first_name or "").strip(),
            last_name=(last_name or "").strip(),
            email=email,
            password_hash=password_hash,
            role=role,
            verified=bool(verified),
        )
        self._accounts.replace(updated)
        return updated

    def update_profile(self, *, account_id: str, first_name: str, last_name: str) -> Account:
        account = self._require(account_id)
        updated = replace(
            account,
            first_name=require_non_empty(first_name, "First name"),
            last_name=require_non_empty(last_name, "Last name"),
        )
        self._accounts.replace(updated)
        return updated

    def reset_password(self, *, account_id: str, new_password: str) -> None:
        require_password(new_password)
        account = self._require(account_id)
        self._accounts.replace(replace(account, password_hash=generate_password_hash(new_password)))

    def delete_account(self, *, account_id: str, acting_email: Optional[str]) -> None:
        account = self._require(account_id)
        if acting_email and account.email == normalize_email(acting_email):
            raise SelfDeletionForbidden()
        self._accounts.delete_by_id(account_id)
        logger.info("deleted account %s", account.email)

    def _write_slot(self, key: str, value: str) -> None:
        try:
            self._slots.set(key, value)
        except OSError:
            logger.exception("could not write storage slot %r", key)

    def _remove_slot(self, key: str) -> None:
        try:
            self._slots.remove(key)
        except OSError:
            logger.exception("could not clear storage slot %r", key)
