from __future__ import annotations

from typing import Optional

from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import ValidationError, WeakPassword


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_password(value: Optional[str]) -> str:
    if value is None or len(value) < MIN_PASSWORD_LENGTH:
        raise WeakPassword(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return value


def normalize_email(value: Optional[str]) -> str:
    """Trim and lower-case an email; emails are compared in this form everywhere."""
    return (value or "").strip().lower()
