"""Summary panel widget showing yearly holiday statistics."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Static

from shukujitsu.models import YearSummary


class SummaryPanel(Container):
    """Panel displaying holiday counts and equinox days of a year."""

    def compose(self) -> ComposeResult:
        """Compose the summary panel."""
        with Horizontal(id="summary-row"):
            with Vertical(classes="summary-box"):
                yield Static("Loading...", id="summary-holidays")
                yield Static("", id="summary-designated")
                yield Static("", id="summary-working-days")

            with Vertical(classes="summary-box"):
                yield Static("", id="summary-substitute")
                yield Static("", id="summary-citizens")

            with Vertical(classes="summary-box"):
                yield Static("", id="summary-vernal")
                yield Static("", id="summary-autumnal")
                yield Static("", id="summary-equinox-source")

    def update_summary(self, summary: YearSummary) -> None:
        """Update the displayed statistics."""
        self.query_one("#summary-holidays", Static).update(
            f"[bold]Holidays:[/bold] {summary.holiday_count}"
        )
        self.query_one("#summary-designated", Static).update(
            f"[bold]Designated:[/bold] {summary.designated_count}"
        )
        self.query_one("#summary-working-days", Static).update(
            f"[bold]Working Days:[/bold] {summary.working_days}"
        )
        self.query_one("#summary-substitute", Static).update(
            f"[bold]Substitute:[/bold] {summary.substitute_count}"
        )
        self.query_one("#summary-citizens", Static).update(
            f"[bold]Citizen's:[/bold] {summary.citizens_count}"
        )
        self.query_one("#summary-vernal", Static).update(
            f"[bold]Vernal Equinox:[/bold] {summary.vernal_equinox}"
        )
        self.query_one("#summary-autumnal", Static).update(
            f"[bold]Autumnal Equinox:[/bold] {summary.autumnal_equinox}"
        )
        # Dates past the announced table are only an approximation
        if summary.equinox_announced:
            self.query_one("#summary-equinox-source", Static).update(
                "[green]Announced by NAO ✓[/green]"
            )
        else:
            self.query_one("#summary-equinox-source", Static).update(
                "[yellow]Estimated ⚠️[/yellow]"
            )

        self.refresh()
