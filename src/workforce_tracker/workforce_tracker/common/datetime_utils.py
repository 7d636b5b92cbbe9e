from __future__ import annotations

import time
from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_date_field(value, field_name: str) -> date:
    """Accept a date or a YYYY-MM-DD string; raise ValidationError otherwise."""
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value or "").strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def parse_month(value: str) -> str:
    """Validate and normalize a YYYY-MM payroll month."""
    v = value.strip() if isinstance(value, str) else ""
    try:
        return datetime.strptime(v, "%Y-%m").strftime("%Y-%m")
    except ValueError:
        raise ValidationError("Month must be in YYYY-MM format")


def month_of(day: date) -> str:
    return day.strftime("%Y-%m")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_millis() -> int:
    return int(time.time() * 1000)
