"""Backward scan for the previous business day."""

import logging
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from jpbizday.errors import BusinessDayCheckError, BusinessDayNotFoundError, HolidayLookupError
from jpbizday.holidays import HolidayOracle, is_business_day

# Constants
MAX_SEARCH_DAYS = 30  # sufficient for Golden Week and New Year
JST = ZoneInfo("Asia/Tokyo")  # Japan Standard Time timezone

logger = logging.getLogger(__name__)


def find_previous_business_day(
    base_date: date, oracle: HolidayOracle, max_days: int = MAX_SEARCH_DAYS
) -> date:
    """
    Find the first business day strictly before base_date.

    Args:
        base_date: Date to search back from (never itself a candidate)
        oracle: Holiday lookup used for every weekday candidate
        max_days: Number of candidate days to examine before giving up

    Raises:
        BusinessDayCheckError: The oracle failed; no further day is probed.
        BusinessDayNotFoundError: No business day within max_days.
    """
    if max_days < 1:
        msg = f"max_days must be positive, got {max_days}"
        raise ValueError(msg)

    current = base_date - timedelta(days=1)
    for _ in range(max_days):
        try:
            business_day = is_business_day(current, oracle)
        except HolidayLookupError as e:
            msg = f"営業日判定エラー: {e}"
            raise BusinessDayCheckError(msg) from e

        logger.debug("%s business_day=%s", current.isoformat(), business_day)
        if business_day:
            return current
        current -= timedelta(days=1)

    raise BusinessDayNotFoundError(max_days)


def today_jst() -> date:
    """Get today's date in Japan."""
    return datetime.now(JST).date()
