"""Cabinet Office holiday list integration."""

from shukujitsu.cabinet_office.cabinet_office_session import CabinetOfficeSession
from shukujitsu.cabinet_office.holiday_list import (
    OfficialHoliday,
    OfficialHolidayList,
    parse_holiday_csv,
)

__all__ = ["CabinetOfficeSession", "OfficialHoliday", "OfficialHolidayList", "parse_holiday_csv"]
