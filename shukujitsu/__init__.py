"""Japanese national holidays (国民の祝日)."""

from shukujitsu.config import Config
from shukujitsu.errors import (
    InvalidConfigError,
    OfficialDataError,
    RangeLimitExceededError,
    ShukujitsuError,
)
from shukujitsu.holidays import (
    HolidayCalendar,
    between,
    configure,
    get_config,
    get_description,
    get_holiday_info,
    get_holidays_in_year,
    get_name,
    get_name_en,
    is_holiday,
    is_working_day,
    next_working_day,
    reset_config,
    working_days_between,
)
from shukujitsu.models import EquinoxKind, HolidayEntry, HolidayInfo

__all__ = [
    "Config",
    "EquinoxKind",
    "HolidayCalendar",
    "HolidayEntry",
    "HolidayInfo",
    "InvalidConfigError",
    "OfficialDataError",
    "RangeLimitExceededError",
    "ShukujitsuError",
    "between",
    "configure",
    "get_config",
    "get_description",
    "get_holiday_info",
    "get_holidays_in_year",
    "get_name",
    "get_name_en",
    "is_holiday",
    "is_working_day",
    "next_working_day",
    "reset_config",
    "working_days_between",
]
