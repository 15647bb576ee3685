from __future__ import annotations

import pytest

from hr_portal.accounts.model import Account
from hr_portal.core.enums import Role
from hr_portal.routing.router import ADMIN_ONLY_WARNING, GUARDS, Access, Route, parse_fragment, resolve

ADMIN = Account("1", "Admin", "User", "admin@example.com", "h", Role.ADMIN, True)
USER = Account("2", "Ann", "Lee", "a@x.com", "h", Role.USER, True)


@pytest.mark.parametrize(
    "fragment,expected",
    [
        (None, Route.HOME),
        ("", Route.HOME),
        ("#/", Route.HOME),
        ("#/login", Route.LOGIN),
        ("/verify-email", Route.VERIFY_EMAIL),
        ("accounts", Route.ACCOUNTS),
        ("/employees/abc/delete", Route.EMPLOYEES),
        ("/requests?x=1", Route.REQUESTS),
        ("#/nowhere", Route.HOME),
    ],
)
def test_parse_fragment(fragment, expected):
    assert parse_fragment(fragment) is expected


def test_every_route_has_a_guard():
    assert set(GUARDS) == set(Route)


@pytest.mark.parametrize("route", [r for r, a in GUARDS.items() if a is Access.PUBLIC])
def test_public_routes_open_to_everyone(route):
    for account in (None, USER, ADMIN):
        decision = resolve(route.path, account)
        assert decision.page is route
        assert not decision.redirected


@pytest.mark.parametrize("route", [r for r, a in GUARDS.items() if a is not Access.PUBLIC])
def test_anonymous_is_sent_to_login(route):
    decision = resolve(route.path, None)
    assert decision.page is Route.LOGIN
    assert decision.redirected
    assert decision.warning is None


@pytest.mark.parametrize("route", [Route.EMPLOYEES, Route.DEPARTMENTS, Route.ACCOUNTS])
def test_non_admin_is_sent_home_with_warning(route):
    decision = resolve("#" + route.path, USER)
    assert decision.page is Route.HOME
    assert decision.warning == ADMIN_ONLY_WARNING

    assert resolve(route.path, ADMIN).page is route


@pytest.mark.parametrize("route", [Route.PROFILE, Route.REQUESTS])
def test_authenticated_routes_open_to_any_signed_in_role(route):
    assert resolve(route.path, USER).page is route
    assert resolve(route.path, ADMIN).page is route


def test_resolution_depends_only_on_inputs():
    assert resolve("/accounts", USER) == resolve("/accounts", USER)
    assert resolve("/accounts", None) != resolve("/accounts", ADMIN)


def test_router_reads_live_session(container, signed_in_admin):
    assert container.router.navigate("/accounts").page is Route.ACCOUNTS
    container.session.sign_out()
    assert container.router.navigate("/accounts").page is Route.LOGIN
