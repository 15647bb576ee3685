from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..accounts.model import Account
from ..common.datetime_utils import parse_timestamp
from ..core.enums import RequestStatus, Role
from ..departments.model import Department
from ..employees.model import Employee
from ..requests.model import RequestItem, SupplyRequest


@dataclass
class Database:
    """The whole persisted state. Replaced wholesale on every save."""

    accounts: List[Account] = field(default_factory=list)
    departments: List[Department] = field(default_factory=list)
    employees: List[Employee] = field(default_factory=list)
    requests: List[SupplyRequest] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accounts": [_account_to_record(a) for a in self.accounts],
            "departments": [_department_to_record(d) for d in self.departments],
            "employees": [_employee_to_record(e) for e in self.employees],
            "requests": [_request_to_record(r) for r in self.requests],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Database":
        """Build a snapshot from its JSON shape.

        Raises KeyError/TypeError/ValueError on malformed input.
        """
        if not isinstance(data, dict):
            raise TypeError("snapshot must be a JSON object")
        return cls(
            accounts=[_account_from_record(r) for r in data["accounts"]],
            departments=[_department_from_record(r) for r in data["departments"]],
            employees=[_employee_from_record(r) for r in data["employees"]],
            requests=[_request_from_record(r) for r in data["requests"]],
        )


def _account_to_record(a: Account) -> dict:
    return {
        "id": a.account_id,
        "firstName": a.first_name,
        "lastName": a.last_name,
        "email": a.email,
        "passwordHash": a.password_hash,
        "role": a.role.value,
        "verified": a.verified,
    }


def _account_from_record(r: dict) -> Account:
    return Account(
        account_id=str(r["id"]),
        first_name=str(r.get("firstName", "")),
        last_name=str(r.get("lastName", "")),
        email=str(r["email"]).strip().lower(),
        password_hash=str(r["passwordHash"]),
        role=Role(r["role"]),
        verified=bool(r.get("verified", False)),
    )


def _department_to_record(d: Department) -> dict:
    return {"id": d.dept_id, "name": d.name, "description": d.description}


def _department_from_record(r: dict) -> Department:
    return Department(dept_id=str(r["id"]), name=str(r["name"]), description=str(r.get("description") or ""))


def _employee_to_record(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "employeeId": e.employee_code,
        "email": e.email,
        "position": e.position,
        "departmentId": e.dept_id,
        "hireDate": e.hire_date,
    }


def _employee_from_record(r: dict) -> Employee:
    return Employee(
        employee_id=str(r["id"]),
        employee_code=str(r.get("employeeId", "")),
        email=str(r["email"]),
        position=str(r.get("position", "")),
        dept_id=str(r.get("departmentId", "")),
        hire_date=str(r.get("hireDate") or ""),
    )


def _request_to_record(q: SupplyRequest) -> dict:
    return {
        "id": q.request_id,
        "type": q.request_type,
        "items": [{"name": i.name, "qty": i.qty} for i in q.items],
        "status": q.status.value,
        "date": q.created_at.isoformat(),
        "employeeEmail": q.employee_email,
    }


def _request_from_record(r: dict) -> SupplyRequest:
    if not r["items"]:
        raise ValueError(f"request {r['id']!r} has no items")
    return SupplyRequest(
        request_id=str(r["id"]),
        request_type=str(r["type"]),
        items=tuple(RequestItem(name=str(i["name"]), qty=int(i["qty"])) for i in r["items"]),
        status=RequestStatus(r["status"]),
        created_at=parse_timestamp(str(r["date"])),
        employee_email=str(r["employeeEmail"]),
    )
