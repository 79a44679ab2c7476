# reference/orbital.py

from __future__ import annotations

import math
from typing import Dict, Tuple

from astrochron.core.types import CalendarDate, Frame, OrbitalElements, Planet

from .angles import normalize, poly
from .calendar import julian_ephemeris_date
from .time_scales import julian_millennia
from .vsop82_table import VSOP82_DATE, VSOP82_J2000


_TABLES: Dict[Frame, Dict[Planet, Tuple[Tuple[float, ...], ...]]] = {
    Frame.J2000: VSOP82_J2000,
    Frame.OF_DATE: VSOP82_DATE,
}


def mean_elements(tau: float, planet: Planet, frame: Frame = Frame.OF_DATE) -> OrbitalElements:
    """
    VSOP82 mean orbital elements at tau Julian millennia from J2000 (TT).

    The series give a, λ, k, h, q, p; the remaining elements follow from
      k = e cos ϖ, h = e sin ϖ, q = sin(i/2) cos Ω, p = sin(i/2) sin Ω.
    """
    a, lam, k, h, q, p = (poly(tau, row) for row in _TABLES[frame][planet])

    perihelion = math.atan2(h, k)
    node = math.atan2(p, q)
    return OrbitalElements(
        mean_longitude=normalize(lam),
        semi_major_axis=a,
        eccentricity=math.hypot(k, h),
        inclination=2.0 * math.asin(math.hypot(q, p)),
        ascending_node_longitude=normalize(node),
        perihelion_longitude=normalize(perihelion),
        frame=frame,
    )


def orbital_elements(d: CalendarDate, planet: Planet, frame: Frame = Frame.OF_DATE) -> OrbitalElements:
    """Mean orbital elements of a planet on a calendar date (UT), series evaluated in JDE."""
    return mean_elements(julian_millennia(julian_ephemeris_date(d)), planet, frame)
