from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def get_by_id(self, dept_id: str) -> Optional[Department]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def add(self, department: Department) -> None:
        raise NotImplementedError

    def replace(self, department: Department) -> bool:
        raise NotImplementedError

    def delete_by_id(self, dept_id: str) -> bool:
        raise NotImplementedError
