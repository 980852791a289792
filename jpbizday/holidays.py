"""Business day predicates."""

from datetime import date
from typing import Protocol


class HolidayOracle(Protocol):
    """Anything that can tell whether a date is a Japanese public holiday."""

    def is_holiday(self, target_date: date) -> bool: ...


def is_weekend(target_date: date) -> bool:
    """Check if a date is a Saturday or Sunday."""
    # 5 = Saturday, 6 = Sunday
    return target_date.weekday() in (5, 6)


def is_business_day(target_date: date, oracle: HolidayOracle) -> bool:
    """
    Check if a date is a business day.

    A business day is:
    - Not a weekend (Saturday/Sunday)
    - Not a Japanese public holiday

    Weekends are rejected without asking the oracle.
    """
    if is_weekend(target_date):
        return False
    return not oracle.is_holiday(target_date)
