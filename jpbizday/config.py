"""Configuration management."""

import configparser
import math
import os
from dataclasses import dataclass, replace
from pathlib import Path

from jpbizday.calculator import MAX_SEARCH_DAYS
from jpbizday.errors import InvalidConfigError
from jpbizday.holiday_api import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "jp-prev-bizday" / "config.ini"

ENV_API_URL = "JP_PREV_BIZDAY_API_URL"
ENV_TIMEOUT = "JP_PREV_BIZDAY_TIMEOUT"
ENV_MAX_DAYS = "JP_PREV_BIZDAY_MAX_DAYS"


@dataclass
class Config:
    """Holiday API and search configuration."""

    api_base_url: str = DEFAULT_API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_days: int = MAX_SEARCH_DAYS

    @classmethod
    def from_env(cls, base: "Config | None" = None) -> "Config":
        """Override base (or defaults) with environment variables."""
        config = base or cls()
        if url := os.environ.get(ENV_API_URL):
            config = replace(config, api_base_url=url)
        if timeout := os.environ.get(ENV_TIMEOUT):
            config = replace(config, timeout=_parse_timeout(timeout, ENV_TIMEOUT))
        if max_days := os.environ.get(ENV_MAX_DAYS):
            config = replace(config, max_days=_parse_max_days(max_days, ENV_MAX_DAYS))
        return config

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        parser = configparser.ConfigParser(interpolation=None)
        try:
            parser.read(path, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError) as e:
            msg = f"{path}: unreadable config file: {e}"
            raise InvalidConfigError(msg) from e
        config = cls()
        if parser.has_option("api", "baseUrl"):
            config.api_base_url = parser["api"]["baseUrl"]
        if parser.has_option("api", "timeout"):
            config.timeout = _parse_timeout(parser["api"]["timeout"], "api.timeout")
        if parser.has_option("search", "maxDays"):
            config.max_days = _parse_max_days(parser["search"]["maxDays"], "search.maxDays")
        return config

    @classmethod
    def resolve(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config":
        """Defaults, then the config file, then environment variables."""
        return cls.from_env(cls.load(path))

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        parser = configparser.ConfigParser(interpolation=None)
        parser["api"] = {
            "baseUrl": self.api_base_url,
            "timeout": str(self.timeout),
        }
        parser["search"] = {"maxDays": str(self.max_days)}
        with path.open("w", encoding="utf-8") as config_file:
            parser.write(config_file)


def _parse_timeout(value: str, source: str) -> float:
    try:
        timeout = float(value)
    except ValueError as e:
        msg = f"{source}: invalid timeout {value!r}"
        raise InvalidConfigError(msg) from e
    if not math.isfinite(timeout) or timeout <= 0:
        msg = f"{source}: timeout must be positive, got {value!r}"
        raise InvalidConfigError(msg)
    return timeout


def _parse_max_days(value: str, source: str) -> int:
    try:
        max_days = int(value)
    except ValueError as e:
        msg = f"{source}: invalid day count {value!r}"
        raise InvalidConfigError(msg) from e
    if max_days < 1:
        msg = f"{source}: day count must be positive, got {value!r}"
        raise InvalidConfigError(msg)
    return max_days
