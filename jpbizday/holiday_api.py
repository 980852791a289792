"""Japanese holiday API client."""

import logging
from datetime import date
from http import HTTPStatus
from typing import Self

import requests

from jpbizday.errors import HolidayLookupError
from jpbizday.models import HolidayInfo

DEFAULT_API_BASE_URL = "https://jp-holiday.net/api/v1/holiday"
DEFAULT_TIMEOUT = 5.0  # seconds

logger = logging.getLogger(__name__)


class HolidayApiClient:
    """Session for querying the holiday API one date at a time."""

    def __init__(
        self, base_url: str = DEFAULT_API_BASE_URL, timeout: float = DEFAULT_TIMEOUT
    ) -> None:
        self._base_url: str = base_url.rstrip("/")
        self._timeout: float = timeout
        self._session: requests.Session | None = None

    def __enter__(self) -> Self:
        self._session = requests.Session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._session:
            self._session.close()
        self._session = None

    @property
    def session(self) -> requests.Session:
        """Get the active session."""
        if not self._session:
            msg = "HolidayApiClient should be used as a context manager"
            raise RuntimeError(msg)
        return self._session

    def url_for(self, target_date: date) -> str:
        """Build the endpoint URL for a date."""
        return f"{self._base_url}/{target_date.year}/{target_date.month:02d}/{target_date.day:02d}"

    def lookup(self, target_date: date) -> HolidayInfo:
        """Fetch holiday status and name for a date."""
        url = self.url_for(target_date)
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            msg = f"API呼び出しエラー: {e}"
            raise HolidayLookupError(msg) from e

        if response.status_code != HTTPStatus.OK:
            msg = f"APIエラー: ステータスコード {response.status_code}"
            raise HolidayLookupError(msg)

        return self._parse_holiday(target_date, response)

    def is_holiday(self, target_date: date) -> bool:
        """Check if a date is a Japanese public holiday."""
        info = self.lookup(target_date)
        if info.is_holiday:
            logger.debug("%s is a holiday (%s)", target_date.isoformat(), info.name)
        return info.is_holiday

    @staticmethod
    def _parse_holiday(target_date: date, response: requests.Response) -> HolidayInfo:
        """Parse the JSON body into a HolidayInfo."""
        try:
            payload = response.json()
        except ValueError as e:
            msg = f"JSONパースエラー: {e}"
            raise HolidayLookupError(msg) from e

        if not isinstance(payload, dict):
            msg = f"JSONパースエラー: unexpected payload {payload!r}"
            raise HolidayLookupError(msg)

        holiday = payload.get("holiday")
        if not isinstance(holiday, bool):
            msg = f"JSONパースエラー: invalid 'holiday' field {holiday!r}"
            raise HolidayLookupError(msg)

        name = payload.get("name")
        return HolidayInfo(
            date=target_date,
            is_holiday=holiday,
            name=str(name) if name else None,
        )
