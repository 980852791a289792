"""Output formatting."""

from datetime import date

from jpbizday.models import Weekday


def format_date(target_date: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return target_date.isoformat()


def weekday_label(target_date: date) -> str:
    """Get the Japanese weekday character of a date."""
    return Weekday.of(target_date).value


def format_simple(business_day: date) -> str:
    """Only the business day."""
    return format_date(business_day)


def format_verbose(base_date: date, business_day: date) -> str:
    """Base date and business day, each with its weekday."""
    return "\n".join(
        [
            f"基準日: {format_date(base_date)} ({weekday_label(base_date)})",
            f"直前の営業日: {format_date(business_day)} ({weekday_label(business_day)})",
        ]
    )
