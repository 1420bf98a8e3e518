"""Main entry point for shukujitsu."""

import logging
import sys
from datetime import date, datetime

from rich.console import Console

from shukujitsu.app import HolidayBrowserApp
from shukujitsu.cabinet_office import CabinetOfficeSession
from shukujitsu.config import DEFAULT_CONFIG_PATH, Config
from shukujitsu.equinox import JST_OFFSET
from shukujitsu.errors import ShukujitsuError
from shukujitsu.holidays import HolidayCalendar
from shukujitsu.report import print_check_report, print_holiday_info, print_mismatches
from shukujitsu.verification import compare_with_official

USAGE = """\
Usage: shukujitsu [--verbose] [COMMAND]

Commands:
  check [YEAR ...]   List the holidays of each year (default: this year and next)
  info DATE          Show the holiday observed on DATE (YYYY-MM-DD)
  verify [YEAR ...]  Compare with the Cabinet Office holiday list
  config             Configure settings
  (none)             Browse holidays interactively
"""


def configure() -> None:
    """Interactive configuration setup."""
    # Using sys.stdout.write for interactive prompts is allowed
    sys.stdout.write("Shukujitsu Configuration\n")
    sys.stdout.write("=" * 40 + "\n")
    value = input("Maximum days per range query (0 = unlimited): ").strip() or "0"

    try:
        config = Config(max_between_days=int(value))
    except ValueError as e:
        sys.stdout.write(f"\n✗ Invalid value: {e}\n")
        return
    config.save()
    sys.stdout.write("\n✓ Configuration saved successfully!\n")
    sys.stdout.write(f"Config file: {DEFAULT_CONFIG_PATH}\n")


def parse_years(console: Console, args: list[str]) -> list[int]:
    """Parse year arguments, skipping anything that is not a year."""
    years = []
    for arg in args:
        try:
            years.append(int(arg))
        except ValueError:
            console.print(f"Skipping invalid year: {arg}", style="yellow", markup=False)
    return years


def check(console: Console, calendar: HolidayCalendar, args: list[str]) -> None:
    """Print the holidays of the given years."""
    years = parse_years(console, args)
    if not args:
        current_year = datetime.now(JST_OFFSET).year
        years = [current_year, current_year + 1]
    print_check_report(console, years, calendar)


def info(console: Console, calendar: HolidayCalendar, args: list[str]) -> None:
    """Print the holiday observed on a date."""
    if len(args) != 1:
        console.print(USAGE, markup=False)
        return
    try:
        target_date = date.fromisoformat(args[0])
    except ValueError:
        console.print(f"Invalid date: {args[0]}", style="red", markup=False)
        return
    print_holiday_info(console, target_date, calendar)


def verify(console: Console, calendar: HolidayCalendar, args: list[str]) -> None:
    """Compare the rules with the official holiday list."""
    years = parse_years(console, args) if args else None
    try:
        with CabinetOfficeSession() as session:
            official = session.get_holiday_list()
    except ShukujitsuError as e:
        console.print(str(e), style="red", markup=False)
        return
    print_mismatches(console, compare_with_official(official, years, calendar))


def main() -> None:
    """Main entry point."""
    args = sys.argv[1:]
    if "--verbose" in args:
        args.remove("--verbose")
        logging.basicConfig(level=logging.DEBUG)

    if args and args[0] == "config":
        configure()
        return

    try:
        config = Config.from_env() or Config.load() or Config()
    except ShukujitsuError as e:
        Console(stderr=True).print(f"Invalid configuration: {e}", style="red", markup=False)
        sys.exit(1)
    calendar = HolidayCalendar(config)

    if not args:
        # Run the TUI
        app = HolidayBrowserApp(calendar)
        app.run()
        return

    console = Console()
    command, rest = args[0], args[1:]
    if command == "check":
        check(console, calendar, rest)
    elif command == "info":
        info(console, calendar, rest)
    elif command == "verify":
        verify(console, calendar, rest)
    else:
        console.print(USAGE, markup=False)


if __name__ == "__main__":
    main()
