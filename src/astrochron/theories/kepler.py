# theories/kepler.py

from __future__ import annotations

import math

from astrochron.core.errors import ConvergenceError
from astrochron.core.types import Frame, Planet, SphericalPoint
from astrochron.reference.angles import normalize, rectangular_to_spherical
from astrochron.reference.orbital import mean_elements


KEPLER_TOLERANCE = 1e-12
KEPLER_MAX_ITERATIONS = 50


def solve_kepler(mean_anomaly: float, eccentricity: float) -> float:
    """Eccentric anomaly E of E - e sin E = M by Newton iteration (radians)."""
    M = normalize(mean_anomaly)
    e = eccentricity
    E = M + e * math.sin(M) * (1.0 + e * math.cos(M))
    dE = math.inf
    for _ in range(KEPLER_MAX_ITERATIONS):
        dE = (E - e * math.sin(E) - M) / (1.0 - e * math.cos(E))
        E -= dE
        if abs(dE) < KEPLER_TOLERANCE:
            return E
    raise ConvergenceError("kepler", KEPLER_MAX_ITERATIONS, dE)


class KeplerPlanetaryTheory:
    """
    Unperturbed two-body orbits on the VSOP82 mean elements of date.

    Good to a few arcminutes for the inner planets; the outer planets lose
    the great inequalities and can be off by a degree.
    """

    name = "kepler"

    def heliocentric_position(self, tau: float, planet: Planet) -> SphericalPoint:
        el = mean_elements(tau, planet, Frame.OF_DATE)
        e = el.eccentricity
        E = solve_kepler(el.mean_longitude - el.perihelion_longitude, e)

        nu = 2.0 * math.atan2(math.sqrt(1.0 + e) * math.sin(E / 2.0), math.sqrt(1.0 - e) * math.cos(E / 2.0))
        r = el.semi_major_axis * (1.0 - e * math.cos(E))

        node = el.ascending_node_longitude
        u = el.perihelion_longitude - node + nu   # argument of latitude
        ci, si = math.cos(el.inclination), math.sin(el.inclination)

        x = r * (math.cos(node) * math.cos(u) - math.sin(node) * math.sin(u) * ci)
        y = r * (math.sin(node) * math.cos(u) + math.cos(node) * math.sin(u) * ci)
        z = r * math.sin(u) * si

        lon, lat, dist = rectangular_to_spherical((x, y, z))
        return SphericalPoint(lon, lat, dist)
