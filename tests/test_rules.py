"""Tests for fixed-date and Happy Monday rule tables."""

import re
from datetime import date

from shukujitsu.models import DateRule, HolidayInfo, YearRange
from shukujitsu.rules import (
    CITIZENS_HOLIDAY,
    COMING_OF_AGE_DAY,
    EMPERORS_BIRTHDAY,
    ENTHRONEMENT_CEREMONY_DAY,
    ENTHRONEMENT_DAY,
    FIXED_DATE_RULES,
    FLOATING_MONDAY_RULES,
    GREENERY_DAY,
    HEALTH_AND_SPORTS_DAY,
    MARINE_DAY,
    MOUNTAIN_DAY,
    NEW_YEARS_DAY,
    SHOWA_DAY,
    SPORTS_DAY,
    first_applicable,
    fixed_holiday,
    floating_holiday,
    index_rules,
)


def test_new_years_day():
    """Test New Year's Day from 1949."""
    assert fixed_holiday(2024, "01-01") == NEW_YEARS_DAY
    assert fixed_holiday(1949, "01-01") == NEW_YEARS_DAY
    assert fixed_holiday(1948, "01-01") is None


def test_april_29_eras():
    """Test the three holidays observed on April 29."""
    assert fixed_holiday(1988, "04-29") == EMPERORS_BIRTHDAY
    assert fixed_holiday(1989, "04-29") == GREENERY_DAY
    assert fixed_holiday(2006, "04-29") == GREENERY_DAY
    assert fixed_holiday(2007, "04-29") == SHOWA_DAY


def test_emperors_birthday_moves():
    """Test Emperor's Birthday on December 23 then February 23."""
    assert fixed_holiday(2018, "12-23") == EMPERORS_BIRTHDAY
    assert fixed_holiday(2019, "12-23") is None
    assert fixed_holiday(2019, "02-23") is None
    assert fixed_holiday(2020, "02-23") == EMPERORS_BIRTHDAY


def test_imperial_transition_only_in_2019():
    """Test one-off holidays of the 2019 imperial transition."""
    assert fixed_holiday(2019, "04-30") == CITIZENS_HOLIDAY
    assert fixed_holiday(2019, "05-01") == ENTHRONEMENT_DAY
    assert fixed_holiday(2019, "05-02") == CITIZENS_HOLIDAY
    assert fixed_holiday(2019, "10-22") == ENTHRONEMENT_CEREMONY_DAY
    assert fixed_holiday(2018, "05-01") is None
    assert fixed_holiday(2020, "10-22") is None


def test_olympic_rescheduling():
    """Test Marine, Sports and Mountain Day in the Olympic years."""
    assert fixed_holiday(2020, "07-23") == MARINE_DAY
    assert fixed_holiday(2020, "07-24") == SPORTS_DAY
    assert fixed_holiday(2020, "08-10") == MOUNTAIN_DAY
    assert fixed_holiday(2021, "07-22") == MARINE_DAY
    assert fixed_holiday(2021, "07-23") == SPORTS_DAY
    assert fixed_holiday(2021, "08-08") == MOUNTAIN_DAY
    assert fixed_holiday(2020, "08-11") is None
    assert fixed_holiday(2021, "08-11") is None
    assert fixed_holiday(2022, "08-11") == MOUNTAIN_DAY
    assert fixed_holiday(2015, "08-11") is None


def test_fixed_dates_replaced_by_happy_monday():
    """Test that fixed-date rules end when the Monday rules begin."""
    assert fixed_holiday(1999, "01-15") == COMING_OF_AGE_DAY
    assert fixed_holiday(2000, "01-15") is None
    assert fixed_holiday(2002, "07-20") == MARINE_DAY
    assert fixed_holiday(2003, "07-20") is None
    assert fixed_holiday(1999, "10-10") == HEALTH_AND_SPORTS_DAY
    assert fixed_holiday(2000, "10-10") is None


def test_unknown_month_day():
    """Test that an unlisted month-day yields nothing."""
    assert fixed_holiday(2024, "06-15") is None


def test_floating_holiday_only_on_mondays():
    """Test that only Mondays are considered."""
    assert floating_holiday(date(2024, 1, 8), 2024) == COMING_OF_AGE_DAY
    assert floating_holiday(date(2024, 1, 9), 2024) is None
    assert floating_holiday(date(2024, 1, 1), 2024) is None  # 1st Monday


def test_floating_holiday_year_ranges():
    """Test the start years of the Happy Monday rules."""
    assert floating_holiday(date(1999, 1, 11), 1999) is None
    assert floating_holiday(date(2000, 1, 10), 2000) == COMING_OF_AGE_DAY
    assert floating_holiday(date(2002, 7, 15), 2002) is None
    assert floating_holiday(date(2003, 7, 21), 2003) == MARINE_DAY


def test_sports_day_renamed_in_2020():
    """Test the rename of Health and Sports Day to Sports Day."""
    assert floating_holiday(date(2019, 10, 14), 2019) == HEALTH_AND_SPORTS_DAY
    assert floating_holiday(date(2024, 10, 14), 2024) == SPORTS_DAY


def test_floating_holiday_excluded_in_olympic_years():
    """Test that the Olympic years skip the Monday slots."""
    assert floating_holiday(date(2020, 7, 20), 2020) is None
    assert floating_holiday(date(2021, 7, 19), 2021) is None
    assert floating_holiday(date(2020, 10, 12), 2020) is None
    assert floating_holiday(date(2021, 10, 11), 2021) is None
    assert floating_holiday(date(2022, 10, 10), 2022) == SPORTS_DAY


def test_rule_rows_are_well_formed():
    """Test that every fixed rule key is a valid MM-DD."""
    for rule in FIXED_DATE_RULES:
        assert re.fullmatch(r"\d{2}-\d{2}", rule.month_day)
        month, day = (int(part) for part in rule.month_day.split("-"))
        date(2024, month, day)
    for rule in FLOATING_MONDAY_RULES:
        assert 1 <= rule.month <= 12
        assert 1 <= rule.week <= 5


def test_at_most_one_rule_per_key_and_year():
    """Test that rules sharing a key never overlap."""
    by_month_day = index_rules(FIXED_DATE_RULES, lambda rule: rule.month_day)
    by_week = index_rules(FLOATING_MONDAY_RULES, lambda rule: (rule.month, rule.week))
    for rows in [*by_month_day.values(), *by_week.values()]:
        for year in range(1900, 2101):
            assert sum(1 for rule in rows if rule.applies_to(year)) <= 1


def test_first_applicable_keeps_listing_order():
    """Test that the first rule in force wins."""
    first = HolidayInfo(name="a", name_en="A")
    second = HolidayInfo(name="b", name_en="B")
    rows = index_rules(
        [
            DateRule("01-01", YearRange(2000), first),
            DateRule("01-01", YearRange(1990), second),
        ],
        lambda rule: rule.month_day,
    )["01-01"]
    assert first_applicable(rows, 2024) == first
    assert first_applicable(rows, 1995) == second
    assert first_applicable(rows, 1980) is None


def test_year_range():
    """Test inclusive and open-ended ranges."""
    assert YearRange(2000, 2010).contains(2000)
    assert YearRange(2000, 2010).contains(2010)
    assert not YearRange(2000, 2010).contains(2011)
    assert YearRange(2000).contains(3000)
    assert YearRange.only(2019).contains(2019)
    assert not YearRange.only(2019).contains(2020)