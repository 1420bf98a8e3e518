"""Tests for the console reports."""

import io
from datetime import date

import pytest
from rich.console import Console

from shukujitsu.config import Config
from shukujitsu.holidays import HolidayCalendar
from shukujitsu.report import (
    NAO_YOKO_URL,
    print_check_report,
    print_holiday_info,
    print_mismatches,
    print_year_report,
)
from shukujitsu.verification import Mismatch


@pytest.fixture
def console():
    """Console writing to a string buffer."""
    return Console(file=io.StringIO(), width=120)


def output(console):
    return console.file.getvalue()


def test_year_report(console):
    """Test the report of a whole year."""
    print_year_report(console, 2024, HolidayCalendar())
    text = output(console)
    assert "2024年" in text
    assert "合計: 21件" in text
    assert "[春分・秋分]" in text
    assert "2024-03-20: 春分の日" in text
    assert "2024-09-22: 秋分の日" in text


def test_year_report_range_limit(console):
    """Test that a range limit error is reported instead of raised."""
    print_year_report(console, 2024, HolidayCalendar(Config(max_between_days=30)))
    text = output(console)
    assert "エラー:" in text
    assert "合計" not in text


def test_check_report(console):
    """Test that the reference to the data source closes the report."""
    print_check_report(console, [2024, 2025], HolidayCalendar())
    text = output(console)
    assert "2024年" in text
    assert "2025年" in text
    assert text.rstrip().endswith(f"参照: {NAO_YOKO_URL}")


def test_holiday_info(console):
    """Test the report of a holiday."""
    print_holiday_info(console, date(2024, 1, 1), HolidayCalendar())
    text = output(console)
    assert "2024-01-01" in text
    assert "元日 (New Year's Day)" in text
    assert "年のはじめを祝う。" in text


def test_holiday_info_not_a_holiday(console):
    """Test the report of an ordinary day."""
    print_holiday_info(console, date(2024, 6, 10), HolidayCalendar())
    assert "not a holiday" in output(console)


def test_mismatches(console):
    """Test the differences table."""
    mismatches = [
        Mismatch(date=date(1959, 4, 10), engine_name=None, official_name="結婚の儀"),
        Mismatch(date=date(2030, 1, 1), engine_name="元日", official_name=None),
    ]
    print_mismatches(console, mismatches)
    text = output(console)
    assert "1959-04-10" in text
    assert "結婚の儀" in text
    assert "2 difference(s)" in text


def test_mismatches_label_generic_day_off(console):
    """Test that plain '休日' rows are labelled."""
    mismatches = [
        Mismatch(
            date=date(2024, 6, 11), engine_name=None, official_name="休日", generic_day_off=True
        ),
    ]
    print_mismatches(console, mismatches)
    assert "休日 (substitute or citizen's)" in output(console)


def test_no_mismatches(console):
    """Test the report when everything matches."""
    print_mismatches(console, [])
    assert "All holidays match the official list" in output(console)
