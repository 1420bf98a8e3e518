"""Textual widgets for the TUI."""

from shukujitsu.widgets.holiday_table import HolidayTable
from shukujitsu.widgets.summary_panel import SummaryPanel

__all__ = ["HolidayTable", "SummaryPanel"]
