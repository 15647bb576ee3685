from __future__ import annotations

from datetime import date, datetime, timezone

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Date must be in YYYY-MM-DD format")


def now_utc() -> datetime:
    """Current time.

    Note: wrapped so services can take it as an injectable clock.
    """
    return datetime.now(timezone.utc)


def parse_timestamp(value: str) -> datetime:
    # Older snapshots carry a trailing 'Z'.
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
