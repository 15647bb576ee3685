from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..accounts.model import Account
from ..accounts.repository import AccountRepository
from ..common.datetime_utils import parse_iso_date
from ..common.ids import generate_id
from ..common.validators import normalize_email, require_non_empty
from ..core.exceptions import ReferentialError, UnknownAccount
from ..departments.model import Department
from ..departments.repository import DepartmentRepository
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: admin-maintained employee directory."""

    def __init__(self, employees: EmployeeRepository, accounts: AccountRepository, departments: DepartmentRepository):
        self._employees = employees
        self._accounts = accounts
        self._departments = departments

    def get(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(employee_id)

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def account_for(self, employee: Employee) -> Optional[Account]:
        return self._accounts.get_by_email(employee.email)

    def department_for(self, employee: Employee) -> Optional[Department]:
        if not employee.dept_id:
            return None
        return self._departments.get_by_id(employee.dept_id)

    def _validated(self, *, employee_code: str, email: str, position: str, dept_id: str, hire_date: str) -> dict:
        # The account check comes first: an unknown email is reported even when other fields are bad.
        email = normalize_email(email)
        if not self._accounts.get_by_email(email):
            raise UnknownAccount()

        hire_date = (hire_date or "").strip()
        if hire_date:
            parse_iso_date(hire_date)

        return {
            "employee_code": require_non_empty(employee_code, "Employee ID"),
            "email": email,
            "position": require_non_empty(position, "Position"),
            "dept_id": (dept_id or "").strip(),
            "hire_date": hire_date,
        }

    def create(self, *, employee_code: str, email: str, position: str, dept_id: str, hire_date: str = "") -> Employee:
        fields = self._validated(
            employee_code=employee_code, email=email, position=position, dept_id=dept_id, hire_date=hire_date
        )
        employee = Employee(employee_id=generate_id(), **fields)
        self._employees.add(employee)
        return employee

    def update(
        self,
        *,
        employee_id: str,
        employee_code: str,
        email: str,
        position: str,
        dept_id: str,
        hire_date: str = "",
    ) -> Employee:
        fields = self._validated(
            employee_code=employee_code, email=email, position=position, dept_id=dept_id, hire_date=hire_date
        )
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ReferentialError("Employee not found")
        updated = replace(employee, **fields)
        self._employees.replace(updated)
        return updated

    def delete(self, employee_id: str) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise ReferentialError("Employee not found")
