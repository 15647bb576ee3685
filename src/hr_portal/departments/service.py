from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.ids import generate_id
from ..common.validators import require_non_empty
from ..core.exceptions import ReferentialError
from .model import Department
from .repository import DepartmentRepository


class DepartmentService:
    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def get(self, dept_id: str) -> Optional[Department]:
        return self._departments.get_by_id(dept_id)

    def list_all(self) -> Sequence[Department]:
        return self._departments.list_all()

    def create(self, *, name: str, description: str = "") -> Department:
        dept = Department(
            dept_id=generate_id(),
            name=require_non_empty(name, "Department name"),
            description=(description or "").strip(),
        )
        self._departments.add(dept)
        return dept

    def update(self, *, dept_id: str, name: str, description: str = "") -> Department:
        dept = self._departments.get_by_id(dept_id)
        if not dept:
            raise ReferentialError("Department not found")
        updated = replace(dept, name=require_non_empty(name, "Department name"), description=(description or "").strip())
        self._departments.replace(updated)
        return updated

    def delete(self, dept_id: str) -> None:
        # Employees keep their department_id; lookups report the gap as N/A.
        if not self._departments.delete_by_id(dept_id):
            raise ReferentialError("Department not found")
