"""Tests for the holiday API client."""

from datetime import date

import pytest
import requests

from jpbizday.errors import HolidayLookupError
from jpbizday.holiday_api import DEFAULT_TIMEOUT, HolidayApiClient
from jpbizday.models import HolidayInfo


class _DummyResponse:
    def __init__(self, status_code: int = 200, payload=None, invalid_json: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload if payload is not None else {"holiday": False, "name": ""}
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            msg = "Expecting value: line 1 column 1 (char 0)"
            raise requests.JSONDecodeError(msg, "<html>", 0)
        return self._payload


@pytest.fixture
def fake_get(monkeypatch):
    """Replace Session.get and record every call."""
    calls: list[dict] = []
    responses: list = []

    def _fake_get(self, url, timeout=None, **kwargs):
        calls.append({"url": url, "timeout": timeout})
        result = responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(requests.Session, "get", _fake_get)
    return calls, responses


def test_url_for_pads_month_and_day():
    """Month and day are zero-padded."""
    client = HolidayApiClient(base_url="https://example.test/holiday/")
    assert client.url_for(date(2025, 1, 6)) == "https://example.test/holiday/2025/01/06"
    assert client.url_for(date(2025, 11, 23)) == "https://example.test/holiday/2025/11/23"


def test_requires_context_manager():
    """Lookups outside the context manager fail."""
    client = HolidayApiClient()
    with pytest.raises(RuntimeError):
        client.is_holiday(date(2025, 7, 21))


def test_lookup_holiday(fake_get):
    """A holiday response carries its name."""
    calls, responses = fake_get
    responses.append(_DummyResponse(payload={"holiday": True, "name": "海の日"}))

    with HolidayApiClient() as client:
        info = client.lookup(date(2025, 7, 21))

    assert info == HolidayInfo(date=date(2025, 7, 21), is_holiday=True, name="海の日")
    assert calls == [
        {"url": "https://jp-holiday.net/api/v1/holiday/2025/07/21", "timeout": DEFAULT_TIMEOUT}
    ]


def test_lookup_non_holiday_has_no_name(fake_get):
    """An empty name on a regular day becomes None."""
    _, responses = fake_get
    responses.append(_DummyResponse(payload={"holiday": False, "name": ""}))

    with HolidayApiClient() as client:
        info = client.lookup(date(2025, 7, 24))

    assert info.is_holiday is False
    assert info.name is None


def test_is_holiday(fake_get):
    """is_holiday returns the holiday flag."""
    _, responses = fake_get
    responses.append(_DummyResponse(payload={"holiday": True, "name": "山の日"}))
    responses.append(_DummyResponse(payload={"holiday": False}))

    with HolidayApiClient(timeout=2.5) as client:
        assert client.is_holiday(date(2025, 8, 11)) is True
        assert client.is_holiday(date(2025, 8, 12)) is False


def test_custom_timeout_is_sent(fake_get):
    """The configured timeout is passed to every request."""
    calls, responses = fake_get
    responses.append(_DummyResponse())

    with HolidayApiClient(timeout=2.5) as client:
        client.is_holiday(date(2025, 8, 12))

    assert calls[0]["timeout"] == 2.5


def test_network_error(fake_get):
    """Connection problems raise HolidayLookupError."""
    _, responses = fake_get
    responses.append(requests.ConnectionError("connection refused"))

    with (
        HolidayApiClient() as client,
        pytest.raises(HolidayLookupError, match="API呼び出しエラー"),
    ):
        client.lookup(date(2025, 7, 24))


def test_timeout(fake_get):
    """A timeout raises HolidayLookupError chained to the original error."""
    _, responses = fake_get
    responses.append(requests.Timeout("read timed out"))

    with HolidayApiClient() as client, pytest.raises(HolidayLookupError) as exc_info:
        client.lookup(date(2025, 7, 24))

    assert isinstance(exc_info.value.__cause__, requests.Timeout)


@pytest.mark.parametrize("status_code", [404, 500, 503])
def test_non_success_status(fake_get, status_code):
    """Any status other than 200 is an error."""
    _, responses = fake_get
    responses.append(_DummyResponse(status_code=status_code))

    with HolidayApiClient() as client, pytest.raises(HolidayLookupError) as exc_info:
        client.lookup(date(2025, 7, 24))

    assert str(status_code) in str(exc_info.value)


def test_invalid_json(fake_get):
    """A body that is not JSON is an error."""
    _, responses = fake_get
    responses.append(_DummyResponse(invalid_json=True))

    with (
        HolidayApiClient() as client,
        pytest.raises(HolidayLookupError, match="JSONパースエラー"),
    ):
        client.lookup(date(2025, 7, 24))


@pytest.mark.parametrize(
    "payload",
    [
        ["holiday"],
        {"name": "海の日"},
        {"holiday": "true", "name": "海の日"},
        {"holiday": None},
    ],
)
def test_malformed_payload(fake_get, payload):
    """A JSON body without a boolean holiday field is an error."""
    _, responses = fake_get
    responses.append(_DummyResponse(payload=payload))

    with (
        HolidayApiClient() as client,
        pytest.raises(HolidayLookupError, match="JSONパースエラー"),
    ):
        client.lookup(date(2025, 7, 24))
