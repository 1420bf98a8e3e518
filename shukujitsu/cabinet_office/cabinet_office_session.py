"""Download of the Cabinet Office holiday list."""

import logging
from typing import Self

import requests

from shukujitsu.cabinet_office.holiday_list import OfficialHolidayList, parse_holiday_csv
from shukujitsu.errors import OfficialDataError

logger = logging.getLogger(__name__)

HOLIDAY_CSV_URL = "https://www8.cao.go.jp/chosei/shukujitsu/syukujitsu.csv"
# The CSV is published in Shift_JIS
HOLIDAY_CSV_ENCODING = "cp932"
REQUEST_TIMEOUT = 30  # seconds


class CabinetOfficeSession:
    """Session for fetching the official holiday list."""

    def __init__(self, url: str = HOLIDAY_CSV_URL, timeout: float = REQUEST_TIMEOUT) -> None:
        self._url: str = url
        self._timeout: float = timeout
        self._session: requests.Session | None = None

    def __enter__(self) -> Self:
        self._session = requests.Session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._session:
            self._session.close()
        self._session = None

    @property
    def session(self) -> requests.Session:
        """Get the active session."""
        if not self._session:
            msg = "CabinetOfficeSession should be used as a context manager"
            raise RuntimeError(msg)
        return self._session

    def get_holiday_list(self) -> OfficialHolidayList:
        """Fetch and parse the official holiday list."""
        logger.debug("Fetching %s", self._url)
        try:
            response = self.session.get(self._url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            msg = f"Could not fetch official holiday list: {e}"
            raise OfficialDataError(msg) from e

        try:
            text = response.content.decode(HOLIDAY_CSV_ENCODING)
        except UnicodeDecodeError as e:
            msg = f"Official holiday list is not {HOLIDAY_CSV_ENCODING}: {e}"
            raise OfficialDataError(msg) from e
        return parse_holiday_csv(text)
