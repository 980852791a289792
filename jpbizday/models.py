"""Data models for holiday lookups."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Weekday(str, Enum):
    """Japanese weekday labels, in date.weekday() order."""

    MONDAY = "月"
    TUESDAY = "火"
    WEDNESDAY = "水"
    THURSDAY = "木"
    FRIDAY = "金"
    SATURDAY = "土"
    SUNDAY = "日"

    @classmethod
    def of(cls, target_date: date) -> "Weekday":
        """Get the weekday of a date."""
        return list(cls)[target_date.weekday()]


@dataclass(frozen=True)
class HolidayInfo:
    """Answer of the holiday API for a single date."""

    date: date
    is_holiday: bool
    name: str | None = None
