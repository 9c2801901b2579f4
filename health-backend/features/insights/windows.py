"""Calendar windows used by the aggregation engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from config.insights.defaults import DAYS_PER_WEEK, WEEK_START_WEEKDAY

DATE_FORMAT = "%Y-%m-%d"


def to_date_string(value: date) -> str:
    """Format ``value`` as ``YYYY-MM-DD``."""

    return value.strftime(DATE_FORMAT)


@dataclass(frozen=True)
class WeekWindow:
    """Inclusive Monday..Sunday range."""

    start: date
    end: date

    @property
    def start_str(self) -> str:
        return to_date_string(self.start)

    @property
    def end_str(self) -> str:
        return to_date_string(self.end)

    def contains(self, day: str) -> bool:
        # YYYY-MM-DD is fixed width, so string order is calendar order
        return self.start_str <= day <= self.end_str


def week_window(reference: date | datetime) -> WeekWindow:
    """Return the week (Monday first) containing ``reference``."""

    if isinstance(reference, datetime):
        reference = reference.date()
    offset = (reference.weekday() - WEEK_START_WEEKDAY) % DAYS_PER_WEEK
    start = reference - timedelta(days=offset)
    return WeekWindow(start=start, end=start + timedelta(days=DAYS_PER_WEEK - 1))


__all__ = ["DATE_FORMAT", "WeekWindow", "to_date_string", "week_window"]
