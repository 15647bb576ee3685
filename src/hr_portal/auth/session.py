from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash

from ..accounts.model import Account
from ..accounts.repository import AccountRepository
from ..common.validators import normalize_email
from ..core.constants import AUTH_TOKEN_KEY
from ..core.exceptions import InvalidCredentials
from ..database.storage import KeyValueStore

logger = logging.getLogger(__name__)


class AuthSession:
    """The signed-in identity plus its persisted restoration token.

    The account is re-read from the repository on every access, so edits and
    deletions are reflected immediately.
    """

    def __init__(self, accounts: AccountRepository, slots: KeyValueStore):
        self._accounts = accounts
        self._slots = slots
        self._account_id: Optional[str] = None

    @property
    def current(self) -> Optional[Account]:
        if self._account_id is None:
            return None
        account = self._accounts.get_by_id(self._account_id)
        if account is None:
            self._account_id = None
        return account

    @property
    def is_authenticated(self) -> bool:
        return self.current is not None

    @property
    def is_admin(self) -> bool:
        account = self.current
        return bool(account and account.is_admin)

    @property
    def email(self) -> Optional[str]:
        account = self.current
        return account.email if account else None

    def sign_in(self, email: str, password: str) -> Account:
        """Authenticate and start a session.

        Unknown email, wrong password and unverified account all raise the
        same InvalidCredentials.
        """
        email = normalize_email(email)
        account = self._accounts.get_by_email(email) if email else None
        if not account or not account.verified:
            logger.info("sign-in refused for %r", email)
            raise InvalidCredentials()

        try:
            ok = check_password_hash(account.password_hash, password or "")
        except ValueError:
            # unknown hash method in a hand-edited snapshot
            ok = False

        if not ok:
            logger.info("sign-in refused for %r", email)
            raise InvalidCredentials()

        self._account_id = account.account_id
        try:
            self._slots.set(AUTH_TOKEN_KEY, account.email)
        except OSError:
            logger.exception("could not persist auth token")
        logger.info("signed in %s", account.email)
        return account

    def sign_out(self) -> None:
        self._account_id = None
        try:
            self._slots.remove(AUTH_TOKEN_KEY)
        except OSError:
            logger.exception("could not clear auth token")

    def restore(self) -> Optional[Account]:
        token = self._slots.get(AUTH_TOKEN_KEY)
        if not token:
            return None

        account = self._accounts.get_by_email(token)
        if not account or not account.verified:
            logger.info("discarding stale auth token %r", token)
            self.sign_out()
            return None

        self._account_id = account.account_id
        return account
