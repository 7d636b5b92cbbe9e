from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import month_of, parse_month


@dataclass(frozen=True)
class ReportingWindow:
    """A calendar month (`YYYY-MM`) or the unrestricted all-time range."""

    month: Optional[str] = None

    @classmethod
    def all_time(cls) -> "ReportingWindow":
        return cls()

    @classmethod
    def for_month(cls, value: str) -> "ReportingWindow":
        return cls(month=parse_month(value))

    @classmethod
    def parse(cls, value: Optional[str]) -> "ReportingWindow":
        """Query-string form: empty or `all` means all time."""
        v = (value or "").strip().lower()
        if not v or v == "all":
            return cls.all_time()
        return cls.for_month(v)

    @property
    def is_all_time(self) -> bool:
        return self.month is None

    @property
    def label(self) -> str:
        return self.month or "all"

    def contains(self, day: date) -> bool:
        return self.month is None or month_of(day) == self.month
