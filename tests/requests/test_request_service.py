from __future__ import annotations

from datetime import datetime, timezone

import pytest

from hr_portal.core.enums import RequestStatus
from hr_portal.core.exceptions import AuthError, EmptyItemList, ValidationError
from hr_portal.requests.model import RequestItem
from hr_portal.requests.service import RequestService
from hr_portal.views import request_rows

FIXED_NOW = datetime(2026, 2, 1, 10, 0, tzinfo=timezone.utc)


class FakeRequestsRepo:
    def __init__(self):
        self.items = []

    def add(self, request):
        self.items.append(request)

    def list_all(self):
        return list(self.items)

    def list_for_owner(self, email):
        return [r for r in self.items if r.employee_email == email]


def _svc():
    return RequestService(FakeRequestsRepo(), clock=lambda: FIXED_NOW)


def test_request_starts_pending_and_belongs_to_owner():
    svc = _svc()
    req = svc.create_request(owner_email="A@x.com", request_type="Equipment", items=[("Laptop", "1")])

    assert req.status == RequestStatus.PENDING
    assert req.employee_email == "a@x.com"
    assert req.created_at == FIXED_NOW
    assert req.items == (RequestItem("Laptop", 1),)


def test_blank_rows_are_dropped_and_qty_defaults_to_one():
    svc = _svc()
    req = svc.create_request(
        owner_email="a@x.com",
        request_type="Equipment",
        items=[("Laptop", "2"), ("   ", "5"), ("Mouse", "")],
    )
    assert req.items == (RequestItem("Laptop", 2), RequestItem("Mouse", 1))


@pytest.mark.parametrize("items", [[], [("", "1")], [("  ", "3"), ("", "")]])
def test_request_without_items_is_rejected(items):
    svc = _svc()
    with pytest.raises(EmptyItemList):
        svc.create_request(owner_email="a@x.com", request_type="Equipment", items=items)
    assert svc.list_for_owner("a@x.com") == []


@pytest.mark.parametrize("qty", ["0", "-1", "two"])
def test_bad_quantity_is_rejected(qty):
    with pytest.raises(ValidationError):
        _svc().create_request(owner_email="a@x.com", request_type="Equipment", items=[("Pen", qty)])


def test_anonymous_owner_is_rejected():
    with pytest.raises(AuthError):
        _svc().create_request(owner_email="", request_type="Equipment", items=[("Pen", "1")])


def test_requests_are_visible_only_to_their_owner():
    svc = _svc()
    svc.create_request(owner_email="a@x.com", request_type="Equipment", items=[("Laptop", "1")])
    svc.create_request(owner_email="b@x.com", request_type="Resources", items=[("Desk", "1")])

    rows_a = request_rows(svc, "a@x.com")
    rows_b = request_rows(svc, "b@x.com")

    assert [r["items"] for r in rows_a] == ["Laptop (1)"]
    assert [r["items"] for r in rows_b] == ["Desk (1)"]
    assert request_rows(svc, None) == []
