from __future__ import annotations

from ..database.snapshot_base import SnapshotRepository
from .model import Department
from .repository import DepartmentRepository


class SnapshotDepartmentRepository(SnapshotRepository[Department], DepartmentRepository):
    collection = "departments"

    @staticmethod
    def _id_of(item: Department) -> str:
        return item.dept_id
