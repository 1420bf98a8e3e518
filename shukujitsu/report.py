"""Console reports of holidays, rendered with rich."""

from datetime import date

from rich.console import Console
from rich.table import Table
from rich.text import Text

from shukujitsu.errors import ShukujitsuError
from shukujitsu.holidays import HolidayCalendar
from shukujitsu.models import HolidayEntry
from shukujitsu.rules import AUTUMNAL_EQUINOX_DAY, VERNAL_EQUINOX_DAY
from shukujitsu.verification import Mismatch

NAO_YOKO_URL = "https://eco.mtk.nao.ac.jp/koyomi/yoko/"
EQUINOX_NAMES = frozenset({VERNAL_EQUINOX_DAY.name, AUTUMNAL_EQUINOX_DAY.name})


def is_equinox_entry(entry: HolidayEntry) -> bool:
    """Check if an entry is the vernal or autumnal equinox day."""
    return entry.name in EQUINOX_NAMES


def holiday_table(year: int, entries: list[HolidayEntry]) -> Table:
    """Build a table of the holidays of a year."""
    table = Table(title=f"{year}年", title_style="bold")
    table.add_column("Date", width=10)
    table.add_column("Name")
    table.add_column("English name")
    for entry in entries:
        style = "bold green" if is_equinox_entry(entry) else None
        table.add_row(entry.date, entry.name, entry.name_en, style=style)
    return table


def print_year_report(console: Console, year: int, calendar: HolidayCalendar) -> None:
    """Print all holidays of a year with their count, highlighting equinox days."""
    try:
        entries = calendar.between(date(year, 1, 1), date(year, 12, 31))
    except ShukujitsuError as e:
        console.print(Text(f"エラー: {e}", style="red"))
        return

    console.print(holiday_table(year, entries))
    console.print(f"合計: {len(entries)}件")

    equinoxes = [entry for entry in entries if is_equinox_entry(entry)]
    if equinoxes:
        console.print(Text("\n[春分・秋分]", style="bold"))
        for entry in equinoxes:
            console.print(f"  {entry.date}: {entry.name}")


def print_check_report(console: Console, years: list[int], calendar: HolidayCalendar) -> None:
    """Print the yearly reports followed by the data source reference."""
    for year in years:
        console.print()
        print_year_report(console, year, calendar)
    console.print("\n---")
    console.print(f"参照: {NAO_YOKO_URL}")


def print_holiday_info(console: Console, target_date: date, calendar: HolidayCalendar) -> None:
    """Print the holiday observed on a date."""
    info = calendar.get_holiday_info(target_date)
    header = target_date.strftime("%Y-%m-%d (%a)")
    if info is None:
        console.print(f"{header}: not a holiday")
        return
    console.print(Text.assemble((header, "bold"), ": ", (info.name, "red"), f" ({info.name_en})"))
    if info.description:
        console.print(f"  {info.description}")


def print_mismatches(console: Console, mismatches: list[Mismatch]) -> None:
    """Print the dates on which the rules and the official list disagree."""
    if not mismatches:
        console.print("[green]✓ All holidays match the official list[/green]")
        return

    table = Table(title="Differences from the official list", title_style="bold")
    table.add_column("Date", width=10)
    table.add_column("Rules")
    table.add_column("Official")
    for mismatch in mismatches:
        official = mismatch.official_name or "--"
        if mismatch.generic_day_off:
            official += " (substitute or citizen's)"
        table.add_row(
            mismatch.date.isoformat(),
            mismatch.engine_name or "--",
            official,
            style="red" if mismatch.missing else "yellow",
        )
    console.print(table)
    console.print(f"{len(mismatches)} difference(s)")
