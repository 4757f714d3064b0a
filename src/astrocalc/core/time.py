from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .errors import InvalidDateError


J2000 = 2451545.0           # JD(TT) at J2000.0
MJD_OFFSET = 2400000.5
GREGORIAN_REFORM_JDN = 2299161   # first Gregorian day, 1582 Oct 15


class CalendarKind(Enum):
    GREGORIAN = "gregorian"
    JULIAN = "julian"

    @classmethod
    def parse(cls, value: CalendarKind | str) -> CalendarKind:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower().strip())
        except ValueError:
            raise InvalidDateError(f"unknown calendar kind: {value!r}") from None


@dataclass(frozen=True)
class CalendarDate:
    """A calendar date with a decimal day of month (day 4.81 = 4th, 19h26m24s)."""
    year: int
    month: int
    day: float
    kind: CalendarKind = CalendarKind.GREGORIAN

    def __post_init__(self) -> None:
        _check_month(self.month)

    @property
    def day_of_month(self) -> int:
        return int(math.floor(self.day))

    @property
    def day_fraction(self) -> float:
        return self.day - math.floor(self.day)

    def time_of_day(self) -> Tuple[int, int, float]:
        """(hour, minute, second) carried by the fractional day."""
        h = self.day_fraction * 24.0
        hour = int(h)
        m = (h - hour) * 60.0
        minute = int(m)
        return hour, minute, (m - minute) * 60.0


def _check_month(month: int) -> None:
    if not (1 <= month <= 12):
        raise InvalidDateError(f"month must be in 1..12, got {month}")


# ============================================================
# Calendar date <-> JD (Meeus ch. 7)
# ============================================================

def decimal_day(day: int, hour: int = 0, minute: int = 0, second: float = 0.0) -> float:
    """Day of month with the time of day folded in."""
    return day + hour / 24.0 + minute / 1440.0 + second / 86400.0


def julian_day(year: int, month: int, day: float, kind: CalendarKind | str = CalendarKind.GREGORIAN) -> float:
    """
    Julian Day of a calendar date (Meeus 7.1).

    Works for negative years (astronomical numbering, year 0 = 1 BC) and
    for results below zero. kind picks the calendar explicitly; nothing is
    inferred from the date.
    """
    kind = CalendarKind.parse(kind)
    _check_month(month)

    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12

    if kind is CalendarKind.GREGORIAN:
        a = math.floor(y / 100)
        b = 2 - a + math.floor(a / 4)
    else:
        b = 0

    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + day + b - 1524.5


def julian_day_from_date(date: CalendarDate) -> float:
    return julian_day(date.year, date.month, date.day, date.kind)


def date_from_julian_day(jd: float) -> CalendarDate:
    """
    Calendar date of a JD (Meeus ch. 7).

    Days from 1582 Oct 15 (JDN 2299161) on come back Gregorian, earlier
    days Julian. Negative JD is rejected.
    """
    if jd < 0:
        raise InvalidDateError(f"date_from_julian_day is undefined for negative JD ({jd})")

    z = math.floor(jd + 0.5)
    f = jd + 0.5 - z

    if z < GREGORIAN_REFORM_JDN:
        a = z
        kind = CalendarKind.JULIAN
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)
        kind = CalendarKind.GREGORIAN

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    return CalendarDate(int(year), int(month), day, kind)


def julian_century(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - J2000) / 36525.0


def julian_millennium(jd: float) -> float:
    """Julian millennia from J2000.0."""
    return (jd - J2000) / 365250.0


def mjd_from_jd(jd: float) -> float:
    return jd - MJD_OFFSET


def jd_from_mjd(mjd: float) -> float:
    return mjd + MJD_OFFSET


# ============================================================
# Calendar helpers
# ============================================================

def is_leap_year(year: int, kind: CalendarKind | str = CalendarKind.GREGORIAN) -> bool:
    kind = CalendarKind.parse(kind)
    if kind is CalendarKind.JULIAN:
        return year % 4 == 0
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def day_of_week(jd: float) -> int:
    """Weekday of the civil day containing jd: 0 = Sunday ... 6 = Saturday."""
    return int(math.floor(jd + 1.5)) % 7


def day_of_year(year: int, month: int, day: float, kind: CalendarKind | str = CalendarKind.GREGORIAN) -> int:
    """Ordinal day in the year, 1 = Jan 1 (Meeus ch. 7)."""
    _check_month(month)
    k = 1 if is_leap_year(year, kind) else 2
    return (275 * month) // 9 - k * ((month + 9) // 12) + int(math.floor(day)) - 30


def date_from_day_of_year(year: int, n: int, kind: CalendarKind | str = CalendarKind.GREGORIAN) -> CalendarDate:
    kind = CalendarKind.parse(kind)
    leap = is_leap_year(year, kind)
    if not (1 <= n <= (366 if leap else 365)):
        raise InvalidDateError(f"day of year {n} out of range for {year}")
    k = 1 if leap else 2
    month = 1 if n < 32 else int(9 * (k + n) / 275 + 0.98)
    day = n - (275 * month) // 9 + k * ((month + 9) // 12) + 30
    return CalendarDate(year, month, float(day), kind)


def decimal_year(year: int, month: int, day: float, kind: CalendarKind | str = CalendarKind.GREGORIAN) -> float:
    """Year plus the elapsed fraction of it (Jan 1.0 -> year + 0)."""
    n_days = 366 if is_leap_year(year, kind) else 365
    doy = day_of_year(year, month, day, kind)
    return year + (doy - 1 + (day - math.floor(day))) / n_days


def easter_date(year: int, kind: CalendarKind | str | None = None) -> Tuple[int, int]:
    """
    (month, day) of Easter Sunday (Meeus ch. 8).

    Gregorian rule for years after 1582 unless a kind is given; the
    Julian rule applies to any year, the Gregorian one from 1583.
    """
    if kind is None:
        kind = CalendarKind.GREGORIAN if year > 1582 else CalendarKind.JULIAN
    kind = CalendarKind.parse(kind)

    if kind is CalendarKind.JULIAN:
        a = year % 4
        b = year % 7
        c = year % 19
        d = (19 * c + 15) % 30
        e = (2 * a + 4 * b - d + 34) % 7
        f, g = divmod(d + e + 114, 31)
        return f, g + 1

    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    n, p = divmod(h + l - 7 * m + 114, 31)
    return n, p + 1
