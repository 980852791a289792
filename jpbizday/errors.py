"""Custom exceptions."""


class PrevBizDayError(Exception):
    """Base exception for jpbizday."""


class InvalidDateError(PrevBizDayError):
    """Raised when a date string is not in YYYY-MM-DD format."""

    def __init__(self, value: str) -> None:
        super().__init__(f"無効な日付形式です: {value}")
        self.value = value


class InvalidConfigError(PrevBizDayError):
    """Raised when a configuration value cannot be parsed."""


class HolidayLookupError(PrevBizDayError):
    """Raised when the holiday API cannot answer."""


class BusinessDayCheckError(HolidayLookupError):
    """Raised when a holiday lookup fails during the business day scan."""


class BusinessDayNotFoundError(PrevBizDayError):
    """Raised when no business day is found within the search window."""

    def __init__(self, max_days: int) -> None:
        super().__init__("営業日が見つかりませんでした")
        self.max_days = max_days
