"""Configuration management."""

import configparser
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

from shukujitsu.errors import InvalidConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "shukujitsu" / "config.ini"
MAX_BETWEEN_DAYS_ENV = "SHUKUJITSU_MAX_BETWEEN_DAYS"


def _parse_days(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        msg = f"maxBetweenDays must be an integer, got {value!r}"
        raise InvalidConfigError(msg) from None


@dataclass(frozen=True)
class Config:
    """Holiday query configuration."""

    # Maximum inclusive day count of a between() query, 0 for no limit
    max_between_days: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.max_between_days, bool) or not isinstance(self.max_between_days, int):
            msg = f"max_between_days must be an integer, got {self.max_between_days!r}"
            raise InvalidConfigError(msg)
        if self.max_between_days < 0:
            msg = f"max_between_days must be >= 0, got {self.max_between_days}"
            raise InvalidConfigError(msg)

    def merge(self, **changes: int) -> "Config":
        """Return a copy with the given settings replaced."""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            msg = f"Unknown configuration keys: {', '.join(sorted(unknown))}"
            raise InvalidConfigError(msg)
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        value = os.environ.get(MAX_BETWEEN_DAYS_ENV)
        if value is None:
            return None
        return cls(max_between_days=_parse_days(value))

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        config.read(path)
        return cls(max_between_days=_parse_days(config["shukujitsu"]["maxBetweenDays"]))

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["shukujitsu"] = {"maxBetweenDays": str(self.max_between_days)}
        with path.open("w") as config_file:
            config.write(config_file)
