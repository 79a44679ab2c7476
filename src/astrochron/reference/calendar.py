# reference/calendar.py

"""
Civil calendar <-> continuous time scales (Meeus, Astronomical Algorithms, ch. 7-12).

Dates use astronomical year numbering (year 0 = 1 BC) and follow the Julian
calendar up to 4 October 1582 and the Gregorian calendar from 15 October 1582.
"""

from __future__ import annotations

import math

from astrochron.core.types import CalendarDate, Month, Weekday

from . import deltat
from .time_scales import J2000, DAYS_IN_JULIAN_CENTURY, GREGORIAN_START_JDN, SECONDS_IN_DAY


GREGORIAN_REFORM_YEAR = 1582
JULIAN_START_DATE = CalendarDate(-4712, Month.JANUARY, 1.5)
JULIAN_END_DATE = CalendarDate(1582, Month.OCTOBER, 4.0)
GREGORIAN_START_DATE = CalendarDate(1582, Month.OCTOBER, 15.0)

_DAYS_IN_MONTH = (
    (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),    # common year
    (0, 31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),    # leap year
)


def _key(d: CalendarDate):
    return (d.year, int(d.month), d.day)


def is_leap_year(year: int) -> bool:
    """Gregorian rule from the reform year on, Julian rule (every 4th year) before."""
    if year >= GREGORIAN_REFORM_YEAR:
        return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    return _DAYS_IN_MONTH[int(is_leap_year(year))][int(month)]


def is_valid(d: CalendarDate) -> bool:
    """
    True when the month exists, the day fits in it, the date is not before
    the origin of Julian dates and not inside the Gregorian reform gap
    (5-14 October 1582).

    Days count from 1.0 (Meeus), so 0 <= day < 1 is rejected.
    """
    if not (Month.JANUARY <= d.month <= Month.DECEMBER):
        return False
    if not (1.0 <= d.day < days_in_month(d.year, d.month) + 1):
        return False
    if _key(d) < _key(JULIAN_START_DATE):
        return False
    if (d.year, int(d.month)) == (GREGORIAN_REFORM_YEAR, Month.OCTOBER) \
            and JULIAN_END_DATE.day + 1.0 <= d.day < GREGORIAN_START_DATE.day:
        return False
    return True


def julian_date(d: CalendarDate) -> float:
    """
    Julian date of a calendar date (Meeus 7.1).

    January and February count as months 13 and 14 of the previous year;
    the century correction B only applies to Gregorian dates.
    """
    year, month = d.year, int(d.month)
    if month <= 2:
        year -= 1
        month += 12

    if _key(d) >= _key(GREGORIAN_START_DATE):
        a = int(year / 100)
        b = 2 - a + int(a / 4)
    else:
        b = 0

    return int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + d.day + b - 1524.5


def calendar_date(jd: float) -> CalendarDate:
    """Calendar date of a Julian date (Meeus ch. 7, valid for jd >= 0)."""
    f, z = math.modf(jd + 0.5)

    if z < GREGORIAN_START_JDN:
        a = z
    else:
        alpha = int((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - int(alpha / 4)

    b = a + 1524
    c = int((b - 122.1) / 365.25)
    dd = int(365.25 * c)
    e = int((b - dd) / 30.6001)

    day = b - dd - int(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    return CalendarDate(int(year), Month(month), float(day))


def day_of_week(d: CalendarDate) -> Weekday:
    jd = julian_date(d)
    return Weekday(int(math.fmod(jd + 0.5, 7.0)) + 1)


def day_of_year(d: CalendarDate) -> int:
    k = 1 if is_leap_year(d.year) else 2
    m = int(d.month)
    return int(275 * m / 9) - k * int((m + 9) / 12) + int(d.day) - 30


def decimal_year(d: CalendarDate) -> float:
    """year + day_of_year / length of year, the argument of the ΔT tables."""
    return d.year + day_of_year(d) / (366.0 if is_leap_year(d.year) else 365.0)


def dynamical_time_difference(d: CalendarDate) -> float:
    """ΔT = TD - UT in seconds; tables or parabola are picked by the calendar year."""
    return deltat.delta_t_seconds(decimal_year(d), d.year)


def dynamical_time_uncertainty(d: CalendarDate) -> float:
    """Uncertainty of ΔT in seconds (nan outside the tabulated years)."""
    return deltat.delta_t_uncertainty(decimal_year(d), d.year)


def julian_ephemeris_date(d: CalendarDate) -> float:
    return julian_date(d) + dynamical_time_difference(d) / SECONDS_IN_DAY


def date_of_easter(year: int) -> CalendarDate:
    """
    Easter Sunday: Gregorian algorithm (Meeus ch. 8) after the reform year,
    Julian algorithm up to and including 1582.
    """
    if year > GREGORIAN_REFORM_YEAR:
        a = year // 100
        b = (a - (a + 8) // 25 + 1) // 3
        c = (19 * (year % 19) + a - a // 4 - b + 15) % 30
        d = (32 + 2 * (a % 4) + 2 * ((year % 100) // 4) - c - (year % 100) % 4) % 7
        e = ((year % 19) + 11 * c + 22 * d) // 451
        f = c + d - 7 * e + 114
    else:
        a = (19 * (year % 19) + 15) % 30
        b = (2 * (year % 4) + 4 * (year % 7) - a + 34) % 7
        f = a + b + 114

    return CalendarDate(year, Month(f // 31), float(f % 31 + 1))


def greenwich_mean_sidereal_time(d: CalendarDate) -> float:
    """Mean sidereal time at Greenwich in hours, [0, 24) (Meeus 12.4)."""
    jd = julian_date(d)
    T = (jd - J2000) / DAYS_IN_JULIAN_CENTURY
    theta = 280.46061837 + 360.98564736629 * (jd - J2000) + 0.000387933 * T * T - T * T * T / 38710000.0
    theta = math.fmod(theta, 360.0)
    if theta < 0.0:
        theta += 360.0
    return theta / 15.0
