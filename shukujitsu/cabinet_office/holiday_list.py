"""Official holiday list published by the Cabinet Office."""

import csv
import io
import re
from dataclasses import dataclass
from datetime import date
from typing import TypeAlias

from shukujitsu.errors import OfficialDataError

_date_regex = re.compile(r"^(\d{4})/(\d{1,2})/(\d{1,2})$")


@dataclass(frozen=True)
class OfficialHoliday:
    """Single row of the official list."""

    date: date
    name: str

    @property
    def is_generic_day_off(self) -> bool:
        """Substitute and citizen's holidays are both listed as plain '休日'."""
        return self.name.startswith("休日")


OfficialHolidayList: TypeAlias = list[OfficialHoliday]


def parse_holiday_csv(text: str) -> OfficialHolidayList:
    """
    Parse the CSV text into OfficialHoliday rows.

    The file has a header row followed by rows like '2024/2/12,休日'.
    """
    reader = csv.reader(io.StringIO(text))
    header = next(reader, None)
    if not header:
        msg = "Official holiday list is empty"
        raise OfficialDataError(msg)

    holidays: OfficialHolidayList = []
    for row in reader:
        if not row or not row[0].strip():
            continue
        match = _date_regex.match(row[0].strip())
        if not match or len(row) < 2:
            msg = f"Unexpected row in official holiday list: {row!r}"
            raise OfficialDataError(msg)
        year, month, day = (int(group) for group in match.groups())
        holidays.append(OfficialHoliday(date=date(year, month, day), name=row[1].strip()))
    return holidays
