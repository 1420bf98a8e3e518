"""Dialog for looking up a single date."""

from datetime import date
from typing import ClassVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label


class LookupDialog(ModalScreen):
    """Modal dialog asking for a date to look up."""

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("escape", "dismiss", "Cancel"),
    ]

    CSS = """
    LookupDialog {
        align: center middle;
    }

    #dialog {
        width: 40;
        height: auto;
        border: thick $primary;
        padding: 1 2;
    }

    #date-row, #button-row {
        height: auto;
        margin-top: 1;
    }
    """

    def __init__(self, default_date: date, **kwargs) -> None:
        super().__init__(**kwargs)
        self.default_date = default_date

    def compose(self) -> ComposeResult:
        """Compose the dialog."""
        with Vertical(id="dialog"):
            yield Label("[bold]Look up a date[/bold]")
            with Horizontal(id="date-row"):
                yield Input(
                    value=self.default_date.isoformat(), placeholder="YYYY-MM-DD", id="date-input"
                )
            with Horizontal(id="button-row"):
                yield Button("Look up", id="lookup-button", variant="primary")
                yield Button("Cancel", id="cancel-button", variant="default")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "cancel-button":
            self.dismiss(None)
        elif event.button.id == "lookup-button":
            self.submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Look up on Enter."""
        self.submit()

    @staticmethod
    def parse_date(value: str) -> date:
        """Parse 'YYYY-MM-DD' or 'YYYY/MM/DD'."""
        value = value.strip().replace("/", "-")
        year, month, day = value.split("-")
        return date(int(year), int(month), int(day))

    def submit(self) -> None:
        """Validate the date and dismiss the dialog."""
        date_input = self.query_one("#date-input", Input)
        try:
            target_date = self.parse_date(date_input.value)
        except ValueError as e:
            self.notify(f"Invalid date: {e}. Use YYYY-MM-DD", severity="error")
            return

        self.dismiss(target_date)
