"""Main entry point for jp-prev-bizday."""

import argparse
import logging
import re
import sys
from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager
from datetime import date, datetime
from typing import TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from jpbizday.calculator import find_previous_business_day, today_jst
from jpbizday.config import Config
from jpbizday.errors import InvalidDateError, PrevBizDayError
from jpbizday.formatting import format_simple, format_verbose
from jpbizday.holiday_api import HolidayApiClient
from jpbizday.holidays import HolidayOracle

PROG = "jp-prev-bizday"

_DATE_REGEX = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

DESCRIPTION = """\
日本の直前の営業日を取得するツール

指定された日付（デフォルトは今日）から遡って、
最初の営業日（土日祝日を除く平日）を返します。
日本の祝日に対応しています。"""

EPILOG = f"""\
例:
  {PROG}
  {PROG} --date 2025-07-24
  {PROG} --verbose"""

OracleFactory: TypeAlias = Callable[[Config], AbstractContextManager[HolidayOracle]]


def _default_oracle_factory(config: Config) -> HolidayApiClient:
    return HolidayApiClient(base_url=config.api_base_url, timeout=config.timeout)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    # Single-dash long forms are kept for compatibility with older scripts
    parser.add_argument(
        "--date", "-date", metavar="YYYY-MM-DD", help="基準日 (デフォルト: 今日)"
    )
    parser.add_argument("--verbose", "-verbose", action="store_true", help="詳細表示モード")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="ログレベル (stderr)",
    )
    parser.add_argument("-h", "--help", "-help", action="help", help="このヘルプを表示")
    return parser


def parse_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD date string."""
    if not _DATE_REGEX.fullmatch(value):
        raise InvalidDateError(value)
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise InvalidDateError(value) from e


def setup_logging(level: str, console: Console) -> None:
    """Send package logs to stderr through rich."""
    logger = logging.getLogger("jpbizday")
    logger.setLevel(level)
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=console, show_path=False))


def main(
    argv: Sequence[str] | None = None,
    oracle_factory: OracleFactory | None = None,
    config: Config | None = None,
) -> int:
    """
    Main entry point.

    Returns the process exit status. oracle_factory and config replace the
    HTTP client and the file/environment configuration.
    """
    out = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)
    err = Console(stderr=True, highlight=False, markup=False, emoji=False, soft_wrap=True)

    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, err)
    logger = logging.getLogger(__name__)

    try:
        config = config or Config.resolve()
        base_date = parse_date(args.date) if args.date else today_jst()
        logger.debug("base date %s, config %s", base_date.isoformat(), config)

        factory = oracle_factory or _default_oracle_factory
        with factory(config) as oracle:
            business_day = find_previous_business_day(base_date, oracle, config.max_days)
    except PrevBizDayError as e:
        err.print(f"エラー: {e}")
        return 1

    if args.verbose:
        out.print(format_verbose(base_date, business_day))
    else:
        out.print(format_simple(business_day))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
