# reference/solar.py

from __future__ import annotations

import logging
import math

from astrochron import api
from astrochron.core.errors import ConvergenceError
from astrochron.core.types import CalendarDate, EclipticPoint, Equinox, Month, Planet, Solstice, SphericalPoint

from .angles import arcsec_to_rad, normalize, rad_to_hours, wrap_pi
from .calendar import calendar_date, dynamical_time_difference, julian_ephemeris_date
from .coordinates import ecliptic_to_equatorial
from .earth import ABERRATION_CONSTANT, nutation_in_longitude, true_obliquity_of_ecliptic
from .orbital import orbital_elements
from .time_scales import SECONDS_IN_DAY, julian_centuries, julian_millennia

logger = logging.getLogger(__name__)

SEASON_TOLERANCE = 1e-7     # days
SEASON_MAX_ITERATIONS = 50


def _earth(d: CalendarDate, theory) -> tuple[SphericalPoint, float]:
    jde = julian_ephemeris_date(d)
    earth = api.planetary_theory(theory).heliocentric_position(julian_millennia(jde), Planet.EARTH)
    return earth, julian_centuries(jde)


def _geometric_sun(d: CalendarDate, theory) -> tuple[EclipticPoint, float]:
    """FK5 geocentric Sun and the Earth-Sun distance in AU."""
    earth, T = _earth(d, theory)
    lon = earth.longitude + math.pi
    lat = -earth.latitude

    lp = lon - math.radians(1.397 * T + 0.00031 * T * T)
    lon += arcsec_to_rad(-0.09033)
    lat += arcsec_to_rad(0.03916 * (math.cos(lp) - math.sin(lp)))
    return EclipticPoint(normalize(lon), lat), earth.distance


def sun_true_position(d: CalendarDate, *, theory=None) -> EclipticPoint:
    """Geometric geocentric Sun referred to the mean equinox of date (FK5)."""
    return _geometric_sun(d, theory)[0]


def sun_apparent_position(d: CalendarDate, *, theory=None) -> EclipticPoint:
    """True position corrected for nutation and aberration (-κ/R)."""
    p, R = _geometric_sun(d, theory)
    lon = p.longitude + nutation_in_longitude(d) - arcsec_to_rad(ABERRATION_CONSTANT) / R
    return EclipticPoint(normalize(lon), p.latitude)


def sun_distance_to_earth(d: CalendarDate, *, theory=None) -> float:
    """Distance in AU."""
    return _earth(d, theory)[0].distance


def _equinox_solstice(year: int, k: int, theory) -> CalendarDate:
    """
    Instant (UT) when the apparent longitude of the Sun is k·90°.

    Starts on the 21st of March/June/September/December and applies
    Meeus' correction 58 sin(k·90° - λ) days until it drops below a
    hundredth of a second.
    """
    d = CalendarDate(year, Month((k + 1) * 3), 21.0)
    jde = julian_ephemeris_date(d)

    for i in range(1, SEASON_MAX_ITERATIONS + 1):
        lam = sun_apparent_position(d, theory=theory).longitude
        c = 58.0 * math.sin(k * math.pi / 2.0 - lam)
        jde += c
        d = calendar_date(jde - dynamical_time_difference(d) / SECONDS_IN_DAY)
        if abs(c) < SEASON_TOLERANCE:
            logger.debug("season k=%d of %d converged after %d iterations (last correction %.3e d)", k, year, i, c)
            return d

    raise ConvergenceError("equinox/solstice", SEASON_MAX_ITERATIONS, c)


def equinox(year: int, which: Equinox, *, theory=None) -> CalendarDate:
    if which not in (Equinox.VERNAL, Equinox.AUTUMNAL):
        return CalendarDate(year, Month.UNKNOWN, -1.0)
    return _equinox_solstice(year, int(which), theory)


def solstice(year: int, which: Solstice, *, theory=None) -> CalendarDate:
    if which not in (Solstice.SUMMER, Solstice.WINTER):
        return CalendarDate(year, Month.UNKNOWN, -1.0)
    return _equinox_solstice(year, int(which), theory)


def _equation_of_time_rad(d: CalendarDate, theory) -> float:
    # Sun's mean longitude is Earth's heliocentric mean longitude + π
    L0 = orbital_elements(d, Planet.EARTH).mean_longitude + math.pi
    dpsi = nutation_in_longitude(d)
    eps = true_obliquity_of_ecliptic(d)
    alpha = ecliptic_to_equatorial(sun_apparent_position(d, theory=theory), eps).right_ascension
    return L0 - alpha + dpsi * math.cos(eps)


def equation_of_time(d: CalendarDate, *, theory=None) -> float:
    """Equation of time in hours, normalized to [0, 24): small negative values appear near 24."""
    return rad_to_hours(normalize(_equation_of_time_rad(d, theory)))


def equation_of_time_minutes(d: CalendarDate, *, theory=None) -> float:
    """Signed equation of time (apparent minus mean solar time) in minutes."""
    return rad_to_hours(wrap_pi(_equation_of_time_rad(d, theory))) * 60.0
