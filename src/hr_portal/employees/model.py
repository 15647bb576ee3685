from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    employee_id: str
    employee_code: str
    email: str
    position: str
    dept_id: str
    hire_date: str = ""
