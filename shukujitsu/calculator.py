"""Holiday classification logic.

A date is a holiday either in its own right (fixed-date, Happy Monday or
equinox rules) or as a derived holiday: a substitute holiday following a
Sunday holiday, or a citizen's holiday sandwiched between two holidays.
Derived rules only look at whether neighbouring days are holidays in their
own right, which keeps the lookups bounded.
"""

from datetime import date

from shukujitsu.dates import SUNDAY, add_days, day_of_week, format_month_day
from shukujitsu.equinox import equinox_holiday
from shukujitsu.models import HolidayInfo
from shukujitsu.rules import CITIZENS_HOLIDAY, SUBSTITUTE_HOLIDAY, fixed_holiday, floating_holiday

# 国民の祝日に関する法律 came into force on this date
HOLIDAY_LAW_DATE = date(1948, 7, 20)
SUBSTITUTE_HOLIDAY_SINCE = 1973
# From 2007 a Sunday anywhere in a run of holidays moves the substitute to the end of the run
CONSECUTIVE_SUBSTITUTE_SINCE = 2007
CITIZENS_HOLIDAY_SINCE = 1986
# Longest run of consecutive holidays looked back over for a Sunday
MAX_HOLIDAY_RUN = 7


def self_holiday(target_date: date) -> HolidayInfo | None:
    """Get the holiday a date is in its own right, ignoring derived holidays."""
    year = target_date.year
    month_day = format_month_day(target_date)
    return (
        fixed_holiday(year, month_day)
        or floating_holiday(target_date, year)
        or equinox_holiday(year, month_day)
    )


def is_self_holiday(target_date: date) -> bool:
    """Check if a date is a holiday in its own right."""
    return self_holiday(target_date) is not None


def substitute_holiday(target_date: date, year: int) -> HolidayInfo | None:
    """Get the substitute holiday (振替休日) for a date, if it is one."""
    if year < SUBSTITUTE_HOLIDAY_SINCE:
        return None

    previous_date = add_days(target_date, -1)
    if day_of_week(previous_date) == SUNDAY and is_self_holiday(previous_date):
        return SUBSTITUTE_HOLIDAY

    if year >= CONSECUTIVE_SUBSTITUTE_SINCE:
        check_date = previous_date
        for _ in range(MAX_HOLIDAY_RUN):
            if not is_self_holiday(check_date):
                break
            if day_of_week(check_date) == SUNDAY:
                return SUBSTITUTE_HOLIDAY
            check_date = add_days(check_date, -1)

    return None


def citizens_holiday(target_date: date, year: int) -> HolidayInfo | None:
    """Get the citizen's holiday (国民の休日) for a date, if it is one."""
    if year < CITIZENS_HOLIDAY_SINCE:
        return None

    # Sundays are already days off; the substitute rule covers them
    if day_of_week(target_date) == SUNDAY:
        return None

    # No following day to sandwich it
    if target_date == date.max:
        return None

    if is_self_holiday(add_days(target_date, -1)) and is_self_holiday(add_days(target_date, 1)):
        return CITIZENS_HOLIDAY
    return None


def resolve(target_date: date) -> HolidayInfo | None:
    """
    Get the holiday observed on a date.

    Rules are evaluated in priority order: fixed-date, Happy Monday, equinox,
    substitute holiday, citizen's holiday. The first match wins.
    """
    if target_date < HOLIDAY_LAW_DATE:
        return None

    year = target_date.year
    return (
        self_holiday(target_date)
        or substitute_holiday(target_date, year)
        or citizens_holiday(target_date, year)
    )
