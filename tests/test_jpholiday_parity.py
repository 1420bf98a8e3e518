"""Cross-check against the jpholiday package."""

from datetime import date

import jpholiday
import pytest

from shukujitsu import is_holiday
from shukujitsu.dates import date_range


@pytest.mark.parametrize("year", range(2000, 2026))
def test_is_holiday_matches_jpholiday(year):
    """Test that every day of a year agrees with jpholiday."""
    for day in date_range(date(year, 1, 1), date(year, 12, 31)):
        assert is_holiday(day) == jpholiday.is_holiday(day), day
