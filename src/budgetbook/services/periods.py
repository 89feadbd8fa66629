"""
Reporting periods and month-bucket helpers.

Derivations compare ``datetime.date`` values for interval membership and use
the ``YYYY-MM`` prefix of an ISO date as the month bucket key. The only
calendar arithmetic needed is stepping whole months.
"""
from __future__ import annotations

import calendar
import datetime as dt
from dataclasses import dataclass


def month_key(day: dt.date) -> str:
    """Month bucket key (YYYY-MM) for a date."""
    return day.isoformat()[:7]


def shift_month(day: dt.date, months: int) -> dt.date:
    """Move ``day`` by whole months, clamping the day-of-month when needed."""
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    last_day = calendar.monthrange(year, month + 1)[1]
    return day.replace(year=year, month=month + 1, day=min(day.day, last_day))


def trailing_month_keys(count: int, today: dt.date | None = None) -> list[str]:
    """The ``count`` month keys ending at (and including) today's month, oldest first."""
    today = today or dt.date.today()
    return [month_key(shift_month(today, -offset)) for offset in range(count - 1, -1, -1)]


@dataclass(frozen=True)
class Period:
    """Closed date interval [start, end] used for period totals."""

    start: dt.date
    end: dt.date

    def contains(self, day: dt.date) -> bool:
        return self.start <= day <= self.end

    @property
    def month_key(self) -> str:
        return month_key(self.start)

    @classmethod
    def month_of(cls, day: dt.date) -> Period:
        """Calendar month containing ``day``."""
        last_day = calendar.monthrange(day.year, day.month)[1]
        return cls(start=day.replace(day=1), end=day.replace(day=last_day))

    @classmethod
    def current_month(cls, today: dt.date | None = None) -> Period:
        return cls.month_of(today or dt.date.today())

    @classmethod
    def trailing_months(cls, count: int, today: dt.date | None = None) -> Period:
        """Rolling window covering the last ``count`` calendar months including today's."""
        today = today or dt.date.today()
        first = cls.month_of(shift_month(today, -(count - 1)))
        return cls(start=first.start, end=cls.month_of(today).end)


__all__ = ["Period", "month_key", "shift_month", "trailing_month_keys"]
