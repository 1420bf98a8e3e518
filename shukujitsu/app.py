"""Main Textual application."""

from datetime import date, datetime
from typing import ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.widgets import Footer, Header

from shukujitsu.equinox import JST_OFFSET
from shukujitsu.errors import ShukujitsuError
from shukujitsu.holidays import HolidayCalendar
from shukujitsu.widgets import HolidayTable, SummaryPanel
from shukujitsu.widgets.lookup_dialog import LookupDialog


class HolidayBrowserApp(App):
    """Japanese national holiday browser."""

    CSS = """
    #main-container {
        height: 100%;
    }

    Vertical {
        height: 100%;
    }

    #summary-panel {
        height: 1fr;
        padding: 1;
        background: $panel;
        border: solid $primary;
    }

    #summary-row {
        height: 100%;
        width: 100%;
    }

    .summary-box {
        width: 1fr;
        padding: 0 1;
    }

    #holiday-table {
        height: 4fr;
        border: solid $primary;
        width: 100%;
    }
    """

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("q", "quit", "Quit"),
        ("c", "current_year", "Current Year"),
        ("n", "next_year", "Next Year"),
        ("b", "prev_year", "Prev Year"),
        ("l", "lookup", "Look Up Date"),
        ("?", "help", "Help"),
    ]

    def __init__(self, calendar: HolidayCalendar | None = None) -> None:
        super().__init__()
        self.calendar = calendar or HolidayCalendar()
        # Holidays follow the calendar date in Japan
        self.today = datetime.now(JST_OFFSET).date()
        self.current_year = self.today.year

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header(show_clock=True)
        with Container(id="main-container"), Vertical():
            yield SummaryPanel(id="summary-panel")
            yield HolidayTable(id="holiday-table")
        yield Footer()

    def on_mount(self) -> None:
        """Load the current year when the app starts."""
        self.load_year()

    def load_year(self) -> None:
        """Compute the holidays of the current year and update the UI."""
        self.title = f"Shukujitsu - {self.current_year}"
        year = self.current_year
        try:
            entries = self.calendar.between(date(year, 1, 1), date(year, 12, 31))
        except ShukujitsuError as e:
            self.notify(f"Failed to load {year}: {e}", severity="error")
            return
        summary = self.calendar.year_summary(year)

        summary_panel = self.query_one("#summary-panel", SummaryPanel)
        summary_panel.update_summary(summary)

        holiday_table = self.query_one("#holiday-table", HolidayTable)
        holiday_table.load_entries(entries, self.today)

        # Focus the table so it can receive keyboard input
        holiday_table.focus()

    def action_next_year(self) -> None:
        """Navigate to next year."""
        self.current_year = min(self.current_year + 1, date.max.year)
        self.load_year()

    def action_prev_year(self) -> None:
        """Navigate to previous year."""
        self.current_year = max(self.current_year - 1, date.min.year)
        self.load_year()

    def action_current_year(self) -> None:
        """Navigate to current year (JST)."""
        self.current_year = datetime.now(JST_OFFSET).year
        self.load_year()

    def action_lookup(self) -> None:
        """Open the lookup dialog."""
        self.push_screen(LookupDialog(self.today), self.handle_lookup_result)

    def handle_lookup_result(self, result: date | None) -> None:
        """Show the holiday observed on the looked-up date."""
        if result is None:
            return

        info = self.calendar.get_holiday_info(result)
        if info is None:
            self.notify(f"{result.isoformat()} is not a holiday", severity="information")
            return

        message = f"[bold]{info.name}[/bold] ({info.name_en})"
        if info.description:
            message += f"\n{info.description}"
        self.notify(message, title=result.isoformat(), timeout=10)

        if result.year != self.current_year:
            self.current_year = result.year
            self.load_year()

    def action_help(self) -> None:
        """Show help message."""
        help_text = """
        [bold]Shukujitsu - Keyboard Shortcuts[/bold]

        [cyan]q[/cyan] - Quit application
        [cyan]n[/cyan] / [cyan]b[/cyan] - Next / previous year
        [cyan]c[/cyan] - Current year
        [cyan]l[/cyan] - Look up a date
        [cyan]?[/cyan] - Show this help

        [bold]Colors:[/bold]
        • [yellow]Substitute holiday[/yellow] (振替休日)
        • [cyan]Citizen's holiday[/cyan] (国民の休日)
        • [green]Equinox day[/green] (春分の日・秋分の日)
        """
        self.notify(help_text, title="Help", timeout=10)
