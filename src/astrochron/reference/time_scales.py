from __future__ import annotations

from datetime import datetime, timezone


# ============================================================
# Epochs and intervals
# ============================================================

J2000 = 2451545.0  # JD of 2000 January 1.5 (TT)
DAYS_IN_JULIAN_CENTURY = 36525.0
DAYS_IN_JULIAN_MILLENNIUM = 365250.0
SECONDS_IN_DAY = 86400.0

# first day of the Gregorian calendar as a Julian day number
GREGORIAN_START_JDN = 2299161


def julian_centuries(jd: float) -> float:
    """
    T = (JD - 2451545.0) / 36525
    Julian centuries from J2000.0.
    """
    return (jd - J2000) / DAYS_IN_JULIAN_CENTURY


def julian_millennia(jd: float) -> float:
    """
    τ = (JD - 2451545.0) / 365250
    Julian millennia from J2000.0, the time argument of VSOP theories.
    """
    return (jd - J2000) / DAYS_IN_JULIAN_MILLENNIUM


def jd_from_centuries(T: float) -> float:
    return J2000 + DAYS_IN_JULIAN_CENTURY * T


def jd_from_millennia(tau: float) -> float:
    return J2000 + DAYS_IN_JULIAN_MILLENNIUM * tau


# ============================================================
# datetime(UTC) <-> JD(UTC)
# ============================================================

_JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC


def datetime_utc_to_jd(dt: datetime) -> float:
    """
    datetime -> JD (UTC). Requires timezone-aware datetime.
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    dt_utc = dt.astimezone(timezone.utc)
    return _JD_UNIX_EPOCH + dt_utc.timestamp() / SECONDS_IN_DAY


def jd_to_datetime_utc(jd: float) -> datetime:
    """
    JD (UTC) -> timezone-aware datetime in UTC.
    """
    t = (jd - _JD_UNIX_EPOCH) * SECONDS_IN_DAY
    return datetime.fromtimestamp(t, tz=timezone.utc)
