"""Tests for widget helpers."""

import asyncio
from datetime import date

import pytest
from textual.widgets import Input

from shukujitsu.app import HolidayBrowserApp
from shukujitsu.widgets.lookup_dialog import LookupDialog


@pytest.mark.parametrize("value", ["2024-05-06", "2024/5/6", " 2024-05-06 "])
def test_parse_date(value):
    """Test accepted date spellings."""
    assert LookupDialog.parse_date(value) == date(2024, 5, 6)


@pytest.mark.parametrize("value", ["2024-13-01", "2024-05", "tomorrow"])
def test_parse_date_invalid(value):
    """Test that invalid input raises ValueError."""
    with pytest.raises(ValueError):
        LookupDialog.parse_date(value)


def test_lookup_dialog_prefills_date():
    """Test that the dialog opens on the given date."""

    async def open_dialog():
        app = HolidayBrowserApp()
        async with app.run_test() as pilot:
            await app.push_screen(LookupDialog(date(2024, 5, 6)))
            await pilot.pause()
            return app.screen.query_one("#date-input", Input).value

    assert asyncio.run(open_dialog()) == "2024-05-06"


@pytest.mark.parametrize(
    ("start", "action", "expected"),
    [
        (1, "action_prev_year", 1),
        (2, "action_prev_year", 1),
        (9999, "action_next_year", 9999),
        (2024, "action_next_year", 2025),
    ],
)
def test_year_navigation_stays_in_date_range(monkeypatch, start, action, expected):
    """Test that year navigation never leaves the supported years."""
    app = HolidayBrowserApp()
    monkeypatch.setattr(app, "load_year", lambda: None)
    app.current_year = start
    getattr(app, action)()
    assert app.current_year == expected
