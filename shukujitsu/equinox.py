"""Vernal and autumnal equinox days.

Equinox holidays are not fixed by law: the National Astronomical Observatory
of Japan announces them on February 1st of the preceding year (暦要項).
Announced dates are kept in the tables below; later years fall back to an
approximation of the equinox instant, evaluated in JST.

See https://eco.mtk.nao.ac.jp/koyomi/yoko/
"""

from datetime import UTC, datetime, timedelta, timezone
from types import MappingProxyType

from shukujitsu.dates import format_month_day
from shukujitsu.models import EquinoxKind, HolidayInfo
from shukujitsu.rules import AUTUMNAL_EQUINOX_DAY, VERNAL_EQUINOX_DAY

JST_OFFSET = timezone(timedelta(hours=9))
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# Equinox instants of the year 2000, in seconds since the Unix epoch
VERNAL_EPOCH_SECONDS = 953537715.36
AUTUMNAL_EPOCH_SECONDS = 969642576.00
# Tropical year, in units of 1e-5 seconds
TROPICAL_YEAR = 3155692525056
TROPICAL_YEAR_SCALE = 100000
# Per-year drift, in units of 1e-4 seconds
DRIFT = 53
DRIFT_SCALE = 10000

VERNAL_EQUINOX_DAYS = MappingProxyType(
    {
        1949: "03-21", 1950: "03-21", 1951: "03-21", 1952: "03-21",
        1953: "03-21", 1954: "03-21", 1955: "03-21", 1956: "03-21",
        1957: "03-21", 1958: "03-21", 1959: "03-21", 1960: "03-20",
        1961: "03-21", 1962: "03-21", 1963: "03-21", 1964: "03-20",
        1965: "03-21", 1966: "03-21", 1967: "03-21", 1968: "03-20",
        1969: "03-21", 1970: "03-21", 1971: "03-21", 1972: "03-20",
        1973: "03-21", 1974: "03-21", 1975: "03-21", 1976: "03-20",
        1977: "03-21", 1978: "03-21", 1979: "03-21", 1980: "03-20",
        1981: "03-21", 1982: "03-21", 1983: "03-21", 1984: "03-20",
        1985: "03-21", 1986: "03-21", 1987: "03-21", 1988: "03-20",
        1989: "03-21", 1990: "03-21", 1991: "03-21", 1992: "03-20",
        1993: "03-20", 1994: "03-21", 1995: "03-21", 1996: "03-20",
        1997: "03-20", 1998: "03-21", 1999: "03-21", 2000: "03-20",
        2001: "03-20", 2002: "03-21", 2003: "03-21", 2004: "03-20",
        2005: "03-20", 2006: "03-21", 2007: "03-21", 2008: "03-20",
        2009: "03-20", 2010: "03-21", 2011: "03-21", 2012: "03-20",
        2013: "03-20", 2014: "03-21", 2015: "03-21", 2016: "03-20",
        2017: "03-20", 2018: "03-21", 2019: "03-21", 2020: "03-20",
        2021: "03-20", 2022: "03-21", 2023: "03-21", 2024: "03-20",
        2025: "03-20", 2026: "03-20", 2027: "03-21",
    }
)  # fmt: skip

AUTUMNAL_EQUINOX_DAYS = MappingProxyType(
    {
        1948: "09-23", 1949: "09-23", 1950: "09-23", 1951: "09-24",
        1952: "09-23", 1953: "09-23", 1954: "09-23", 1955: "09-24",
        1956: "09-23", 1957: "09-23", 1958: "09-23", 1959: "09-24",
        1960: "09-23", 1961: "09-23", 1962: "09-23", 1963: "09-24",
        1964: "09-23", 1965: "09-23", 1966: "09-23", 1967: "09-24",
        1968: "09-23", 1969: "09-23", 1970: "09-23", 1971: "09-24",
        1972: "09-23", 1973: "09-23", 1974: "09-23", 1975: "09-24",
        1976: "09-23", 1977: "09-23", 1978: "09-23", 1979: "09-24",
        1980: "09-23", 1981: "09-23", 1982: "09-23", 1983: "09-23",
        1984: "09-23", 1985: "09-23", 1986: "09-23", 1987: "09-23",
        1988: "09-23", 1989: "09-23", 1990: "09-23", 1991: "09-23",
        1992: "09-23", 1993: "09-23", 1994: "09-23", 1995: "09-23",
        1996: "09-23", 1997: "09-23", 1998: "09-23", 1999: "09-23",
        2000: "09-23", 2001: "09-23", 2002: "09-23", 2003: "09-23",
        2004: "09-23", 2005: "09-23", 2006: "09-23", 2007: "09-23",
        2008: "09-23", 2009: "09-23", 2010: "09-23", 2011: "09-23",
        2012: "09-22", 2013: "09-23", 2014: "09-23", 2015: "09-23",
        2016: "09-22", 2017: "09-23", 2018: "09-23", 2019: "09-23",
        2020: "09-22", 2021: "09-23", 2022: "09-23", 2023: "09-23",
        2024: "09-22", 2025: "09-23", 2026: "09-23", 2027: "09-23",
    }
)  # fmt: skip

_TABLES = {
    EquinoxKind.VERNAL: VERNAL_EQUINOX_DAYS,
    EquinoxKind.AUTUMNAL: AUTUMNAL_EQUINOX_DAYS,
}

# Equinox holidays were not observed before these years
_FIRST_YEAR = {
    EquinoxKind.VERNAL: 1949,
    EquinoxKind.AUTUMNAL: 1948,
}

_HOLIDAYS = {
    EquinoxKind.VERNAL: VERNAL_EQUINOX_DAY,
    EquinoxKind.AUTUMNAL: AUTUMNAL_EQUINOX_DAY,
}


def _signed_triangular(n: int) -> int:
    """Sum of 0..n, negated for negative n."""
    if n >= 0:
        return n * (n + 1) // 2
    return -(-n * (-n + 1) // 2)


def calculate_equinox_day(year: int, kind: EquinoxKind) -> str:
    """
    Approximate the equinox day of a year as 'MM-DD' (JST).

    The instant is extrapolated from the year 2000 equinox by whole tropical
    years plus a quadratic drift term. It is not guaranteed to match the
    announced date, which is why the announced tables take precedence.
    """
    base = VERNAL_EPOCH_SECONDS if kind == EquinoxKind.VERNAL else AUTUMNAL_EPOCH_SECONDS
    years = year - 2000
    timestamp = (
        base
        + TROPICAL_YEAR * years / TROPICAL_YEAR_SCALE
        + DRIFT * _signed_triangular(years) / DRIFT_SCALE
    )
    instant = EPOCH + timedelta(seconds=timestamp)
    return format_month_day(instant.astimezone(JST_OFFSET))


def is_official_equinox_year(year: int, kind: EquinoxKind) -> bool:
    """Check if the equinox day of a year comes from the announced table."""
    return year in _TABLES[kind]


def resolve_equinox(year: int, kind: EquinoxKind) -> str:
    """Get the equinox day of a year as 'MM-DD', preferring the announced date."""
    announced = _TABLES[kind].get(year)
    if announced is not None:
        return announced
    return calculate_equinox_day(year, kind)


def equinox_holiday(year: int, month_day: str) -> HolidayInfo | None:
    """Get the equinox holiday falling on a month-day, if any."""
    for kind in (EquinoxKind.VERNAL, EquinoxKind.AUTUMNAL):
        if year >= _FIRST_YEAR[kind] and resolve_equinox(year, kind) == month_day:
            return _HOLIDAYS[kind]
    return None
