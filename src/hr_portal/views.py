"""Row builders for the list pages.

Dangling references render as "N/A"; they never raise.
"""
from __future__ import annotations

from typing import List, Optional

from .accounts.service import AccountService
from .auth.session import AuthSession
from .departments.service import DepartmentService
from .employees.service import EmployeeService
from .requests.service import RequestService

MISSING = "N/A"


def employee_rows(employees: EmployeeService) -> List[dict]:
    out: List[dict] = []
    for emp in employees.list_all():
        account = employees.account_for(emp)
        department = employees.department_for(emp)
        out.append(
            {
                "employee_id": emp.employee_id,
                "employee_code": emp.employee_code,
                "name": account.full_name if account else emp.email,
                "email": emp.email,
                "position": emp.position,
                "department": department.name if department else MISSING,
                "hire_date": emp.hire_date,
            }
        )
    return out


def department_rows(departments: DepartmentService) -> List[dict]:
    return [
        {"dept_id": d.dept_id, "name": d.name, "description": d.description or ""}
        for d in departments.list_all()
    ]


def account_rows(accounts: AccountService, session: AuthSession) -> List[dict]:
    own_email = session.email
    return [
        {
            "account_id": a.account_id,
            "name": a.full_name,
            "email": a.email,
            "role": a.role.value,
            "verified": a.verified,
            "can_delete": a.email != own_email,
        }
        for a in accounts.list_all()
    ]


def request_rows(requests: RequestService, owner_email: Optional[str]) -> List[dict]:
    if not owner_email:
        return []
    return [
        {
            "request_id": r.request_id,
            "date": r.created_at.strftime("%Y-%m-%d"),
            "type": r.request_type,
            "items": ", ".join(f"{i.name} ({i.qty})" for i in r.items),
            "status": r.status.value,
        }
        for r in requests.list_for_owner(owner_email)
    ]


def profile_view(session: AuthSession) -> Optional[dict]:
    account = session.current
    if account is None:
        return None
    return {
        "name": account.full_name,
        "first_name": account.first_name,
        "last_name": account.last_name,
        "email": account.email,
        "role": account.role.value,
    }
