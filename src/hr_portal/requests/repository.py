from __future__ import annotations

from typing import Protocol, Sequence

from .model import SupplyRequest


class RequestRepository(Protocol):
    def add(self, request: SupplyRequest) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[SupplyRequest]:
        raise NotImplementedError

    def list_for_owner(self, email: str) -> Sequence[SupplyRequest]:
        raise NotImplementedError
