from __future__ import annotations

from werkzeug.security import generate_password_hash

from ..accounts.model import Account
from ..common.ids import generate_id
from ..core.constants import SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD, SEED_DEPARTMENTS
from ..core.enums import Role
from ..departments.model import Department
from .snapshot import Database


def seed_database() -> Database:
    """Default data for a first run: one verified admin and two departments."""
    admin = Account(
        account_id=generate_id(),
        first_name="Admin",
        last_name="User",
        email=SEED_ADMIN_EMAIL,
        password_hash=generate_password_hash(SEED_ADMIN_PASSWORD),
        role=Role.ADMIN,
        verified=True,
    )
    departments = [
        Department(dept_id=generate_id(), name=name, description=description)
        for name, description in SEED_DEPARTMENTS
    ]
    return Database(accounts=[admin], departments=departments, employees=[], requests=[])
