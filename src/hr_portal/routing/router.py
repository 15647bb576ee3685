"""Route table and guards.

Navigation is a pure function of (fragment, signed-in account): there is no
router state besides the session it reads.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from ..accounts.model import Account
from ..auth.session import AuthSession

logger = logging.getLogger(__name__)


class Route(str, Enum):
    HOME = "/"
    REGISTER = "/register"
    VERIFY_EMAIL = "/verify-email"
    LOGIN = "/login"
    PROFILE = "/profile"
    EMPLOYEES = "/employees"
    DEPARTMENTS = "/departments"
    ACCOUNTS = "/accounts"
    REQUESTS = "/requests"

    @property
    def path(self) -> str:
        return self.value


class Access(Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


GUARDS: Dict[Route, Access] = {
    Route.HOME: Access.PUBLIC,
    Route.REGISTER: Access.PUBLIC,
    Route.VERIFY_EMAIL: Access.PUBLIC,
    Route.LOGIN: Access.PUBLIC,
    Route.PROFILE: Access.AUTHENTICATED,
    Route.REQUESTS: Access.AUTHENTICATED,
    Route.EMPLOYEES: Access.ADMIN,
    Route.DEPARTMENTS: Access.ADMIN,
    Route.ACCOUNTS: Access.ADMIN,
}

ADMIN_ONLY_WARNING = "Access denied: Admin only"

_BY_NAME = {route.value.strip("/"): route for route in Route}


@dataclass(frozen=True)
class RouteDecision:
    requested: Route
    page: Route
    warning: Optional[str] = None

    @property
    def redirected(self) -> bool:
        return self.page != self.requested


def parse_fragment(fragment: Optional[str]) -> Route:
    """Map '#/x', '/x', 'x' or '/x/sub/path' to a route; anything unknown is HOME."""
    value = (fragment or "").strip()
    if value.startswith("#"):
        value = value[1:]
    name = value.strip("/").split("/", 1)[0].split("?", 1)[0]
    return _BY_NAME.get(name, Route.HOME)


def resolve(fragment: Optional[str], account: Optional[Account]) -> RouteDecision:
    route = parse_fragment(fragment)
    access = GUARDS[route]

    if access is Access.PUBLIC:
        return RouteDecision(requested=route, page=route)

    if account is None:
        return RouteDecision(requested=route, page=Route.LOGIN)

    if access is Access.ADMIN and not account.is_admin:
        return RouteDecision(requested=route, page=Route.HOME, warning=ADMIN_ONLY_WARNING)

    return RouteDecision(requested=route, page=route)


class Router:
    """Evaluates every fragment change against the live session."""

    def __init__(self, session: AuthSession):
        self._session = session

    def navigate(self, fragment: Optional[str]) -> RouteDecision:
        decision = resolve(fragment, self._session.current)
        if decision.redirected:
            logger.debug("redirect %s -> %s", decision.requested.path, decision.page.path)
        return decision
