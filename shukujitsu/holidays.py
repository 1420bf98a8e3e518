"""Japanese national holiday calendar."""

import logging
from datetime import date, datetime

from shukujitsu.calculator import resolve
from shukujitsu.config import Config
from shukujitsu.dates import SATURDAY, SUNDAY, add_days, date_range, day_count, day_of_week, to_date
from shukujitsu.equinox import is_official_equinox_year, resolve_equinox
from shukujitsu.errors import RangeLimitExceededError
from shukujitsu.models import EquinoxKind, HolidayEntry, HolidayInfo, YearSummary
from shukujitsu.rules import CITIZENS_HOLIDAY, SUBSTITUTE_HOLIDAY

logger = logging.getLogger(__name__)


class HolidayCalendar:
    """Holiday queries bound to a configuration."""

    def __init__(self, config: Config | None = None) -> None:
        self._config: Config = config or Config()

    @property
    def config(self) -> Config:
        """The active configuration."""
        return self._config

    def configure(self, **changes: int) -> None:
        """Merge settings into the active configuration."""
        self._config = self._config.merge(**changes)

    def get_config(self) -> Config:
        """Get the active configuration."""
        return self._config

    def reset_config(self) -> None:
        """Restore the default configuration."""
        self._config = Config()

    def get_holiday_info(self, target_date: date | datetime) -> HolidayInfo | None:
        """Get the holiday observed on a date, or None if it is not a holiday."""
        return resolve(to_date(target_date))

    def is_holiday(self, target_date: date | datetime) -> bool:
        """Check if a date is a Japanese national holiday."""
        return self.get_holiday_info(target_date) is not None

    def get_name(self, target_date: date | datetime) -> str | None:
        """Get the Japanese name of a holiday, or None if not a holiday."""
        info = self.get_holiday_info(target_date)
        return info.name if info else None

    def get_name_en(self, target_date: date | datetime) -> str | None:
        """Get the English name of a holiday, or None if not a holiday."""
        info = self.get_holiday_info(target_date)
        return info.name_en if info else None

    def get_description(self, target_date: date | datetime) -> str | None:
        """Get the description of a holiday, or None if it has none."""
        info = self.get_holiday_info(target_date)
        return info.description if info else None

    def get_holidays_in_year(self, year: int) -> dict[str, HolidayInfo]:
        """Get all holidays of a year keyed by 'YYYY-MM-DD', in date order."""
        return {
            entry.date: entry.info
            for entry in self._enumerate(date(year, 1, 1), date(year, 12, 31))
        }

    def between(self, start: date | datetime, end: date | datetime) -> list[HolidayEntry]:
        """
        Get holidays between two dates, both inclusive, in date order.

        Raises:
            RangeLimitExceededError: If max_between_days is set and the range is longer.
        """
        start_date = to_date(start)
        end_date = to_date(end)

        limit = self._config.max_between_days
        if limit > 0:
            requested = day_count(start_date, end_date)
            if requested > limit:
                logger.debug(
                    "Rejected %s..%s: %d days > %d", start_date, end_date, requested, limit
                )
                raise RangeLimitExceededError(limit, requested)

        return self._enumerate(start_date, end_date)

    @staticmethod
    def _enumerate(start: date, end: date) -> list[HolidayEntry]:
        holidays = []
        for current in date_range(start, end):
            info = resolve(current)
            if info is not None:
                holidays.append(HolidayEntry.from_info(current, info))
        return holidays

    def is_working_day(self, target_date: date | datetime) -> bool:
        """
        Check if a date is a working day.

        A working day is:
        - Not a weekend (Saturday/Sunday)
        - Not a Japanese national holiday
        """
        day = to_date(target_date)
        if day_of_week(day) in (SATURDAY, SUNDAY):
            return False
        return not self.is_holiday(day)

    def next_working_day(self, target_date: date | datetime) -> date:
        """Get the first working day on or after a date."""
        current = to_date(target_date)
        while not self.is_working_day(current):
            current = add_days(current, 1)
        return current

    def working_days_between(self, start: date | datetime, end: date | datetime) -> int:
        """Count working days between two dates, both inclusive."""
        days = date_range(to_date(start), to_date(end))
        return sum(1 for day in days if self.is_working_day(day))

    def year_summary(self, year: int) -> YearSummary:
        """Summarize the holidays of a year."""
        infos = list(self.get_holidays_in_year(year).values())
        return YearSummary(
            year=year,
            holiday_count=len(infos),
            substitute_count=infos.count(SUBSTITUTE_HOLIDAY),
            citizens_count=infos.count(CITIZENS_HOLIDAY),
            working_days=self.working_days_between(date(year, 1, 1), date(year, 12, 31)),
            vernal_equinox=f"{year}-{resolve_equinox(year, EquinoxKind.VERNAL)}",
            autumnal_equinox=f"{year}-{resolve_equinox(year, EquinoxKind.AUTUMNAL)}",
            equinox_announced=is_official_equinox_year(year, EquinoxKind.VERNAL)
            and is_official_equinox_year(year, EquinoxKind.AUTUMNAL),
        )


default_calendar = HolidayCalendar()


def configure(**changes: int) -> None:
    """Merge settings into the default calendar's configuration."""
    default_calendar.configure(**changes)


def get_config() -> Config:
    """Get the default calendar's configuration."""
    return default_calendar.get_config()


def reset_config() -> None:
    """Restore the default calendar's configuration."""
    default_calendar.reset_config()


def is_holiday(target_date: date | datetime) -> bool:
    """Check if a date is a Japanese national holiday."""
    return default_calendar.is_holiday(target_date)


def get_name(target_date: date | datetime) -> str | None:
    """Get the Japanese name of a holiday, or None if not a holiday."""
    return default_calendar.get_name(target_date)


def get_name_en(target_date: date | datetime) -> str | None:
    """Get the English name of a holiday, or None if not a holiday."""
    return default_calendar.get_name_en(target_date)


def get_description(target_date: date | datetime) -> str | None:
    """Get the description of a holiday, or None if it has none."""
    return default_calendar.get_description(target_date)


def get_holiday_info(target_date: date | datetime) -> HolidayInfo | None:
    """Get the holiday observed on a date, or None if it is not a holiday."""
    return default_calendar.get_holiday_info(target_date)


def get_holidays_in_year(year: int) -> dict[str, HolidayInfo]:
    """Get all holidays of a year keyed by 'YYYY-MM-DD', in date order."""
    return default_calendar.get_holidays_in_year(year)


def between(start: date | datetime, end: date | datetime) -> list[HolidayEntry]:
    """Get holidays between two dates, both inclusive, in date order."""
    return default_calendar.between(start, end)


def is_working_day(target_date: date | datetime) -> bool:
    """Check if a date is a working day (weekday and not a holiday)."""
    return default_calendar.is_working_day(target_date)


def next_working_day(target_date: date | datetime) -> date:
    """Get the first working day on or after a date."""
    return default_calendar.next_working_day(target_date)


def working_days_between(start: date | datetime, end: date | datetime) -> int:
    """Count working days between two dates, both inclusive."""
    return default_calendar.working_days_between(start, end)
