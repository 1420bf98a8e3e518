"""Holiday table widget listing the holidays of a year."""

from datetime import date as date_type

from rich.text import Text
from textual.widgets import DataTable

from shukujitsu.models import HolidayEntry
from shukujitsu.report import is_equinox_entry
from shukujitsu.rules import CITIZENS_HOLIDAY, SUBSTITUTE_HOLIDAY


class HolidayTable(DataTable):
    """Table displaying the holidays of a year."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.cursor_type = "row"
        self.show_cursor = True
        self.zebra_stripes = True
        self.can_focus = True

    def on_mount(self) -> None:
        """Set up the table columns."""
        # Date format is "MM/DD (Day)" = 13 chars
        self.add_column("Date", width=13)
        self.add_column("Name", width=16)
        self.add_column("English name", width=28)
        self.add_column("Description")

    def load_entries(self, entries: list[HolidayEntry], today: date_type) -> None:
        """Load holiday entries into the table."""
        self.clear()
        next_row_index = None

        for idx, entry in enumerate(entries):
            day = entry.to_date()
            date_display = f"{day.strftime('%m/%d')} {day.strftime('(%a)')[0:5]}"

            if next_row_index is None and day >= today:
                next_row_index = idx

            if day == today:
                style = "bold yellow"
            elif entry.info == SUBSTITUTE_HOLIDAY:
                style = "yellow"
            elif entry.info == CITIZENS_HOLIDAY:
                style = "cyan"
            elif is_equinox_entry(entry):
                style = "green"
            elif day < today:
                style = "dim"
            else:
                style = None

            self.add_row(
                Text(date_display, style=style or ""),
                Text(entry.name, style=style or ""),
                Text(entry.name_en, style=style or ""),
                Text(entry.description or "--", style=style or ""),
                key=entry.date,
            )

        # Move cursor to the next upcoming holiday if found
        if next_row_index is not None and len(self.rows) > 0:
            self.move_cursor(row=next_row_index)
