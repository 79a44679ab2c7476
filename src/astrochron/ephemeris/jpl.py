#ephemeris/jpl.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from astrochron.core.errors import TheoryUnavailableError
from astrochron.core.types import Planet, SphericalPoint
from astrochron.reference.angles import apply_matrix, rad_to_arcsec, rectangular_to_spherical
from astrochron.reference.earth import icrf_to_ecliptic_of_date
from astrochron.reference.time_scales import jd_from_centuries, jd_from_millennia, julian_centuries

from . import require_ephemeris

logger = logging.getLogger(__name__)

DEFAULT_KERNEL = "de421.bsp"
AU_KM = 149597870.7

SOLAR_SYSTEM_BARYCENTER = 0
EARTH_MOON_BARYCENTER = 3
SUN = 10
MOON = 301
EARTH = 399

# planets are represented by the barycentres of their systems
_BARYCENTERS = {
    Planet.MERCURY: 1,
    Planet.VENUS: 2,
    Planet.MARS: 4,
    Planet.JUPITER: 5,
    Planet.SATURN: 6,
    Planet.URANUS: 7,
    Planet.NEPTUNE: 8,
}


# --------------------------
# kernel location
# --------------------------

def cache_dir() -> Path:
    base = os.environ.get("XDG_CACHE_HOME", "").strip()
    root = Path(base).expanduser() if base else Path.home() / ".cache"
    return root / "astrochron"


def kernel_path() -> Path:
    """
    ASTROCHRON_SPK if it names an existing file, otherwise de421.bsp in the
    cache directory, downloaded through skyfield when missing.
    """
    configured = os.environ.get("ASTROCHRON_SPK", "").strip()
    if configured:
        p = Path(configured).expanduser()
        if p.is_file():
            return p
        logger.warning("ASTROCHRON_SPK=%s is not a file; falling back to %s", p, DEFAULT_KERNEL)

    d = cache_dir()
    p = d / DEFAULT_KERNEL
    if p.is_file():
        return p

    from skyfield.api import Loader

    d.mkdir(parents=True, exist_ok=True)
    logger.info("downloading %s into %s", DEFAULT_KERNEL, d)
    Loader(str(d), verbose=False).download(DEFAULT_KERNEL)
    return p


@lru_cache(maxsize=4)
def open_kernel(path: Optional[str] = None):
    require_ephemeris()
    from jplephem.spk import SPK

    p = Path(path) if path is not None else kernel_path()
    try:
        kernel = SPK.open(str(p))
    except OSError as e:
        raise TheoryUnavailableError(f"cannot open SPK kernel {p}: {e}") from e
    logger.debug("opened SPK kernel %s", p)
    return kernel


def _to_ecliptic_of_date(v_km, jd: float) -> SphericalPoint:
    M = icrf_to_ecliptic_of_date(julian_centuries(jd))
    lon, lat, dist = rectangular_to_spherical(apply_matrix(M, [float(x) for x in v_km]))
    return SphericalPoint(lon, lat, dist)


# --------------------------
# theories
# --------------------------

@dataclass
class JplPlanetaryTheory:
    """
    Heliocentric positions from a JPL kernel, rotated from ICRF to the mean
    ecliptic and equinox of date.

    Requires optional deps:
      pip install "astrochron[ephemeris]"
    """
    kernel: object
    name: str = "jpl"

    @classmethod
    def load(cls, path: Optional[str] = None) -> "JplPlanetaryTheory":
        return cls(kernel=open_kernel(path))

    def _barycentric(self, planet: Planet, jd: float):
        k = self.kernel
        if planet is Planet.EARTH:
            return k[SOLAR_SYSTEM_BARYCENTER, EARTH_MOON_BARYCENTER].compute(jd) \
                + k[EARTH_MOON_BARYCENTER, EARTH].compute(jd)
        return k[SOLAR_SYSTEM_BARYCENTER, _BARYCENTERS[planet]].compute(jd)

    def heliocentric_position(self, tau: float, planet: Planet) -> SphericalPoint:
        jd = jd_from_millennia(tau)
        v = self._barycentric(planet, jd) - self.kernel[SOLAR_SYSTEM_BARYCENTER, SUN].compute(jd)
        p = _to_ecliptic_of_date(v, jd)
        return SphericalPoint(p.longitude, p.latitude, p.distance / AU_KM)


@dataclass
class JplLunarTheory:
    """Geocentric Moon from a JPL kernel (arcseconds, km), ecliptic of date."""
    kernel: object
    name: str = "jpl"

    @classmethod
    def load(cls, path: Optional[str] = None) -> "JplLunarTheory":
        return cls(kernel=open_kernel(path))

    def geocentric_position(self, T: float) -> SphericalPoint:
        jd = jd_from_centuries(T)
        k = self.kernel
        v = k[EARTH_MOON_BARYCENTER, MOON].compute(jd) - k[EARTH_MOON_BARYCENTER, EARTH].compute(jd)
        p = _to_ecliptic_of_date(v, jd)
        return SphericalPoint(rad_to_arcsec(p.longitude), rad_to_arcsec(p.latitude), p.distance)
