from __future__ import annotations

from collections import Counter

import pytest

from hr_portal.container import build_container
from hr_portal.core.constants import SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD
from hr_portal.core.enums import Role
from hr_portal.database.storage import InMemoryKeyValueStore
from hr_portal.main import create_app


class CountingStore(InMemoryKeyValueStore):
    """In-memory slots that remember how many times each key was written."""

    def __init__(self, quota_bytes=None):
        super().__init__(quota_bytes=quota_bytes)
        self.writes = Counter()

    def set(self, key, value):
        super().set(key, value)
        self.writes[key] += 1


@pytest.fixture
def slots():
    return CountingStore()


@pytest.fixture
def container(slots):
    c = build_container(slots=slots)
    # force the first-run seed so tests start from a loaded snapshot
    c.conn.database
    return c


@pytest.fixture
def admin(container):
    return container.accounts_repo.get_by_email(SEED_ADMIN_EMAIL)


@pytest.fixture
def signed_in_admin(container):
    return container.session.sign_in(SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD)


@pytest.fixture
def app(monkeypatch, slots):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(slots=slots)


@pytest.fixture
def client(app):
    return app.test_client()


def make_user(container, email, password="secret1", *, verified=True, first_name="Ann", last_name="Lee"):
    """Create a User account through the admin path."""
    return container.account_service.create_account(
        first_name=first_name,
        last_name=last_name,
        email=email,
        password=password,
        role=Role.USER,
        verified=verified,
    )
