from __future__ import annotations

from ..database.snapshot_base import SnapshotRepository
from .model import Employee
from .repository import EmployeeRepository


class SnapshotEmployeeRepository(SnapshotRepository[Employee], EmployeeRepository):
    collection = "employees"

    @staticmethod
    def _id_of(item: Employee) -> str:
        return item.employee_id
