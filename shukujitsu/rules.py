"""Fixed-date and Happy Monday holiday rules.

Each rule row names the month-day (or month and Monday ordinal) it is
observed on, the years it is in force, and the holiday it yields. Rows
sharing a key are evaluated in listing order; the first row in force wins.
"""

from collections.abc import Callable, Iterable
from datetime import date
from typing import TypeVar

from shukujitsu.dates import MONDAY, day_of_week, week_of_month
from shukujitsu.models import DateRule, HolidayInfo, MondayRule, YearRange

NEW_YEARS_DAY = HolidayInfo(
    name="元日",
    name_en="New Year's Day",
    description="年のはじめを祝う。",
)
COMING_OF_AGE_DAY = HolidayInfo(
    name="成人の日",
    name_en="Coming of Age Day",
    description="おとなになったことを自覚し、みずから生き抜こうとする青年を祝いはげます。",
)
NATIONAL_FOUNDATION_DAY = HolidayInfo(
    name="建国記念の日",
    name_en="National Foundation Day",
    description="建国をしのび、国を愛する心を養う。",
)
EMPERORS_BIRTHDAY = HolidayInfo(
    name="天皇誕生日",
    name_en="Emperor's Birthday",
    description="天皇の誕生日を祝う。",
)
VERNAL_EQUINOX_DAY = HolidayInfo(
    name="春分の日",
    name_en="Vernal Equinox Day",
    description="自然をたたえ、生物をいつくしむ。",
)
SHOWA_DAY = HolidayInfo(
    name="昭和の日",
    name_en="Showa Day",
    description="激動の日々を経て、復興を遂げた昭和の時代を顧み、国の将来に思いをいたす。",
)
GREENERY_DAY = HolidayInfo(
    name="みどりの日",
    name_en="Greenery Day",
    description="自然に親しむとともにその恩恵に感謝し、豊かな心をはぐくむ。",
)
CONSTITUTION_MEMORIAL_DAY = HolidayInfo(
    name="憲法記念日",
    name_en="Constitution Memorial Day",
    description="日本国憲法の施行を記念し、国の成長を期する。",
)
CHILDRENS_DAY = HolidayInfo(
    name="こどもの日",
    name_en="Children's Day",
    description="こどもの人格を重んじ、こどもの幸福をはかるとともに、母に感謝する。",
)
MARINE_DAY = HolidayInfo(
    name="海の日",
    name_en="Marine Day",
    description="海の恩恵に感謝するとともに、海洋国日本の繁栄を願う。",
)
MOUNTAIN_DAY = HolidayInfo(
    name="山の日",
    name_en="Mountain Day",
    description="山に親しむ機会を得て、山の恩恵に感謝する。",
)
RESPECT_FOR_THE_AGED_DAY = HolidayInfo(
    name="敬老の日",
    name_en="Respect for the Aged Day",
    description="多年にわたり社会につくしてきた老人を敬愛し、長寿を祝う。",
)
AUTUMNAL_EQUINOX_DAY = HolidayInfo(
    name="秋分の日",
    name_en="Autumnal Equinox Day",
    description="祖先をうやまい、なくなった人々をしのぶ。",
)
HEALTH_AND_SPORTS_DAY = HolidayInfo(
    name="体育の日",
    name_en="Health and Sports Day",
    description="スポーツにしたしみ、健康な心身をつちかう。",
)
SPORTS_DAY = HolidayInfo(
    name="スポーツの日",
    name_en="Sports Day",
    description="スポーツを楽しみ、他者を尊重する精神を培うとともに、健康で活力ある社会の実現を願う。",
)
CULTURE_DAY = HolidayInfo(
    name="文化の日",
    name_en="Culture Day",
    description="自由と平和を愛し、文化をすすめる。",
)
LABOR_THANKSGIVING_DAY = HolidayInfo(
    name="勤労感謝の日",
    name_en="Labor Thanksgiving Day",
    description="勤労をたっとび、生産を祝い、国民たがいに感謝しあう。",
)
ENTHRONEMENT_DAY = HolidayInfo(
    name="即位の日",
    name_en="Enthronement Day",
    description="天皇の即位を公に宣明する即位礼正殿の儀が行われる日。",
)
ENTHRONEMENT_CEREMONY_DAY = HolidayInfo(
    name="即位礼正殿の儀",
    name_en="Enthronement Ceremony Day",
    description="即位礼正殿の儀が行われる日。",
)
SUBSTITUTE_HOLIDAY = HolidayInfo(name="振替休日", name_en="Substitute Holiday")
CITIZENS_HOLIDAY = HolidayInfo(name="国民の休日", name_en="Citizen's Holiday")

# Tokyo Olympics moved Marine, Sports and Mountain Day in these years
OLYMPIC_YEARS = frozenset({2020, 2021})

FIXED_DATE_RULES: tuple[DateRule, ...] = (
    DateRule("01-01", YearRange(1949), NEW_YEARS_DAY),
    DateRule("01-15", YearRange(1949, 1999), COMING_OF_AGE_DAY),
    DateRule("02-11", YearRange(1967), NATIONAL_FOUNDATION_DAY),
    DateRule("02-23", YearRange(2020), EMPERORS_BIRTHDAY),
    DateRule("04-29", YearRange(1927, 1988), EMPERORS_BIRTHDAY),
    DateRule("04-29", YearRange(1989, 2006), GREENERY_DAY),
    DateRule("04-29", YearRange(2007), SHOWA_DAY),
    # Imperial transition
    DateRule("04-30", YearRange.only(2019), CITIZENS_HOLIDAY),
    DateRule("05-01", YearRange.only(2019), ENTHRONEMENT_DAY),
    DateRule("05-02", YearRange.only(2019), CITIZENS_HOLIDAY),
    DateRule("05-03", YearRange(1949), CONSTITUTION_MEMORIAL_DAY),
    DateRule("05-04", YearRange(2007), GREENERY_DAY),
    DateRule("05-05", YearRange(1949), CHILDRENS_DAY),
    DateRule("07-20", YearRange(1996, 2002), MARINE_DAY),
    DateRule("07-22", YearRange.only(2021), MARINE_DAY),
    DateRule("07-23", YearRange.only(2020), MARINE_DAY),
    DateRule("07-23", YearRange.only(2021), SPORTS_DAY),
    DateRule("07-24", YearRange.only(2020), SPORTS_DAY),
    DateRule("08-08", YearRange.only(2021), MOUNTAIN_DAY),
    DateRule("08-10", YearRange.only(2020), MOUNTAIN_DAY),
    DateRule("08-11", YearRange(2016), MOUNTAIN_DAY, excluded_years=OLYMPIC_YEARS),
    DateRule("09-15", YearRange(1967, 2002), RESPECT_FOR_THE_AGED_DAY),
    DateRule("10-10", YearRange(1966, 1999), HEALTH_AND_SPORTS_DAY),
    DateRule("10-22", YearRange.only(2019), ENTHRONEMENT_CEREMONY_DAY),
    DateRule("11-03", YearRange(1948), CULTURE_DAY),
    DateRule("11-23", YearRange(1948), LABOR_THANKSGIVING_DAY),
    DateRule("12-23", YearRange(1989, 2018), EMPERORS_BIRTHDAY),
)

FLOATING_MONDAY_RULES: tuple[MondayRule, ...] = (
    MondayRule(1, 2, YearRange(2000), COMING_OF_AGE_DAY),
    MondayRule(7, 3, YearRange(2003), MARINE_DAY, excluded_years=OLYMPIC_YEARS),
    MondayRule(9, 3, YearRange(2003), RESPECT_FOR_THE_AGED_DAY),
    MondayRule(10, 2, YearRange(2000, 2019), HEALTH_AND_SPORTS_DAY),
    MondayRule(10, 2, YearRange(2020), SPORTS_DAY, excluded_years=OLYMPIC_YEARS),
)


K = TypeVar("K")
R = TypeVar("R")


def index_rules(rules: Iterable[R], key: Callable[[R], K]) -> dict[K, tuple[R, ...]]:
    """Group rule rows by key, keeping their listing order."""
    index: dict[K, list[R]] = {}
    for rule in rules:
        index.setdefault(key(rule), []).append(rule)
    return {k: tuple(rows) for k, rows in index.items()}


def first_applicable(rules: Iterable[DateRule | MondayRule], year: int) -> HolidayInfo | None:
    """Get the holiday of the first rule in force for a year."""
    for rule in rules:
        if rule.applies_to(year):
            return rule.info
    return None


_FIXED_BY_MONTH_DAY = index_rules(FIXED_DATE_RULES, lambda rule: rule.month_day)
_MONDAYS_BY_WEEK = index_rules(FLOATING_MONDAY_RULES, lambda rule: (rule.month, rule.week))


def fixed_holiday(year: int, month_day: str) -> HolidayInfo | None:
    """Get the fixed-date holiday observed on a month-day of a year."""
    return first_applicable(_FIXED_BY_MONTH_DAY.get(month_day, ()), year)


def floating_holiday(target_date: date, year: int) -> HolidayInfo | None:
    """Get the Happy Monday holiday observed on a date, if it is a Monday."""
    if day_of_week(target_date) != MONDAY:
        return None
    key = (target_date.month, week_of_month(target_date))
    return first_applicable(_MONDAYS_BY_WEEK.get(key, ()), year)
