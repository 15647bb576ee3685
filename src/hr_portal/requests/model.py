from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from ..core.enums import RequestStatus


@dataclass(frozen=True)
class RequestItem:
    name: str
    qty: int


@dataclass(frozen=True)
class SupplyRequest:
    request_id: str
    request_type: str
    items: Tuple[RequestItem, ...]
    status: RequestStatus
    created_at: datetime
    employee_email: str
