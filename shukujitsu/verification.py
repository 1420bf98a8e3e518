"""Cross-check of the holiday rules against the official holiday list."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from shukujitsu.cabinet_office import OfficialHolidayList
from shukujitsu.holidays import HolidayCalendar, default_calendar


@dataclass(frozen=True)
class Mismatch:
    """A date on which the rules and the official list disagree."""

    date: date
    engine_name: str | None
    official_name: str | None
    # Official row is a plain '休日' (substitute or citizen's holiday)
    generic_day_off: bool = False

    @property
    def missing(self) -> bool:
        """The official list has a holiday the rules do not produce."""
        return self.engine_name is None


def compare_with_official(
    official: OfficialHolidayList,
    years: Iterable[int] | None = None,
    calendar: HolidayCalendar = default_calendar,
) -> list[Mismatch]:
    """
    Compare holiday dates year by year.

    Only the presence of a holiday is compared: the official list names
    substitute and citizen's holidays '休日' and spells some one-off days
    differently.

    Args:
        years: Years to compare; defaults to every year in the official list.
    """
    official_by_date = {holiday.date: holiday for holiday in official}
    if years is None:
        years = sorted({day.year for day in official_by_date})

    mismatches = []
    for year in years:
        engine_by_date = {
            date.fromisoformat(key): info.name
            for key, info in calendar.get_holidays_in_year(year).items()
        }
        official_in_year = {d: h for d, h in official_by_date.items() if d.year == year}
        for day in sorted(engine_by_date.keys() | official_in_year.keys()):
            if day in engine_by_date and day in official_in_year:
                continue
            official_holiday = official_in_year.get(day)
            mismatches.append(
                Mismatch(
                    date=day,
                    engine_name=engine_by_date.get(day),
                    official_name=official_holiday.name if official_holiday else None,
                    generic_day_off=bool(official_holiday and official_holiday.is_generic_day_off),
                )
            )
    return mismatches
