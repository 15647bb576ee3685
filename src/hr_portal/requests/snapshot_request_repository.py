from __future__ import annotations

from typing import Sequence

from ..database.snapshot_base import SnapshotRepository
from .model import SupplyRequest
from .repository import RequestRepository


class SnapshotRequestRepository(SnapshotRepository[SupplyRequest], RequestRepository):
    collection = "requests"

    @staticmethod
    def _id_of(item: SupplyRequest) -> str:
        return item.request_id

    def list_for_owner(self, email: str) -> Sequence[SupplyRequest]:
        return [r for r in self._items() if r.employee_email == email]
