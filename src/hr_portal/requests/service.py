from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Sequence, Tuple, Union

from ..common.datetime_utils import now_utc
from ..common.ids import generate_id
from ..common.validators import normalize_email, require_non_empty
from ..core.constants import DEFAULT_REQUEST_QTY
from ..core.enums import RequestStatus
from ..core.exceptions import AuthError, EmptyItemList, ValidationError
from .model import RequestItem, SupplyRequest
from .repository import RequestRepository

logger = logging.getLogger(__name__)

RawItem = Tuple[str, Union[str, int, None]]


class RequestService:
    def __init__(self, requests: RequestRepository, clock: Callable = now_utc):
        self._requests = requests
        self._clock = clock

    @staticmethod
    def _parse_qty(value: Union[str, int, None]) -> int:
        v = str(value if value is not None else "").strip()
        if not v:
            return DEFAULT_REQUEST_QTY
        try:
            qty = int(v)
        except ValueError:
            raise ValidationError("Quantity must be a whole number")
        if qty < 1:
            raise ValidationError("Quantity must be at least 1")
        return qty

    def _parse_items(self, items: Iterable[RawItem]) -> List[RequestItem]:
        parsed = []
        for name, qty in items:
            name = (name or "").strip()
            # rows left blank in the form are ignored
            if not name:
                continue
            parsed.append(RequestItem(name=name, qty=self._parse_qty(qty)))
        return parsed

    def create_request(self, *, owner_email: str, request_type: str, items: Iterable[RawItem]) -> SupplyRequest:
        owner_email = normalize_email(owner_email)
        if not owner_email:
            raise AuthError("Please sign in to submit a request")

        request_type = require_non_empty(request_type, "Request type")
        parsed = self._parse_items(items)
        if not parsed:
            raise EmptyItemList()

        req = SupplyRequest(
            request_id=generate_id(),
            request_type=request_type,
            items=tuple(parsed),
            status=RequestStatus.PENDING,
            created_at=self._clock(),
            employee_email=owner_email,
        )
        self._requests.add(req)
        logger.info("request %s submitted by %s (%d items)", req.request_id, owner_email, len(parsed))
        return req

    def list_for_owner(self, email: str) -> Sequence[SupplyRequest]:
        return self._requests.list_for_owner(normalize_email(email))
