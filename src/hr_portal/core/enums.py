from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for route gating."""

    ADMIN = "Admin"
    USER = "User"


class RequestStatus(str, Enum):
    """Request workflow status. Only PENDING is ever assigned."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
