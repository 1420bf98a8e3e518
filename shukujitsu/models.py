"""Data models for holidays and holiday rules."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class EquinoxKind(str, Enum):
    """Kind of equinox holiday."""

    VERNAL = "vernal"
    AUTUMNAL = "autumnal"


@dataclass(frozen=True)
class HolidayInfo:
    """Name and description of a national holiday."""

    name: str
    name_en: str
    description: str | None = None


@dataclass(frozen=True)
class HolidayEntry:
    """A holiday on a concrete date, as returned by range queries."""

    date: str
    name: str
    name_en: str
    description: str | None = None

    @classmethod
    def from_info(cls, day: date, info: HolidayInfo) -> "HolidayEntry":
        """Build an entry for a resolved holiday."""
        return cls(
            date=day.isoformat(),
            name=info.name,
            name_en=info.name_en,
            description=info.description,
        )

    @property
    def info(self) -> HolidayInfo:
        """The holiday without its date."""
        return HolidayInfo(name=self.name, name_en=self.name_en, description=self.description)

    def to_date(self) -> date:
        """Parse the entry date."""
        return date.fromisoformat(self.date)


@dataclass(frozen=True)
class YearRange:
    """Inclusive range of years in which a rule is in force."""

    start: int
    end: int | None = None

    @classmethod
    def only(cls, year: int) -> "YearRange":
        """Range covering a single year, for one-off holidays."""
        return cls(year, year)

    def contains(self, year: int) -> bool:
        """Check if a year falls inside the range."""
        if year < self.start:
            return False
        return self.end is None or year <= self.end


@dataclass(frozen=True)
class DateRule:
    """A holiday observed on a fixed month-day."""

    month_day: str
    years: YearRange
    info: HolidayInfo
    excluded_years: frozenset[int] = field(default_factory=frozenset)

    def applies_to(self, year: int) -> bool:
        """Check if the rule is in force for a year."""
        return self.years.contains(year) and year not in self.excluded_years


@dataclass(frozen=True)
class MondayRule:
    """A holiday observed on the Nth Monday of a month (Happy Monday system)."""

    month: int
    week: int
    years: YearRange
    info: HolidayInfo
    excluded_years: frozenset[int] = field(default_factory=frozenset)

    def applies_to(self, year: int) -> bool:
        """Check if the rule is in force for a year."""
        return self.years.contains(year) and year not in self.excluded_years


@dataclass
class YearSummary:
    """Statistics for a year of holidays."""

    year: int
    holiday_count: int
    substitute_count: int
    citizens_count: int
    working_days: int
    vernal_equinox: str
    autumnal_equinox: str
    equinox_announced: bool

    @property
    def designated_count(self) -> int:
        """Holidays in their own right (excluding substitute and citizen's holidays)."""
        return self.holiday_count - self.substitute_count - self.citizens_count
