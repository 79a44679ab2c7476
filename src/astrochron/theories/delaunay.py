# theories/delaunay.py

from __future__ import annotations

from typing import Tuple

from astrochron.reference.angles import poly


# IERS Conventions (2010) eq. 5.43, arcseconds, T in Julian centuries (TT)
MOON_MEAN_ANOMALY = (485868.249036, 1717915923.2178, 31.8792, 0.051635, -0.00024470)
SUN_MEAN_ANOMALY = (1287104.79305, 129596581.0481, -0.5532, 0.000136, -0.00001149)
MOON_ARGUMENT_OF_LATITUDE = (335779.526232, 1739527262.8478, -12.7512, -0.001037, 0.00000417)
MOON_MEAN_ELONGATION = (1072260.70369, 1602961601.2090, -6.3706, 0.006593, -0.00003169)


class IersDelaunayArguments:
    """
    Delaunay arguments l, l', F, D of the IERS conventions.

    `terms` keeps the first `terms` powers of T, so `terms=2` gives the
    linear mean motions only.
    """

    name = "iers"

    def arguments(self, T: float, terms: int = 5) -> Tuple[float, float, float, float]:
        if not 1 <= terms <= 5:
            raise ValueError(f"terms must be in 1..5, got {terms}")
        return (
            poly(T, MOON_MEAN_ANOMALY[:terms]),
            poly(T, SUN_MEAN_ANOMALY[:terms]),
            poly(T, MOON_ARGUMENT_OF_LATITUDE[:terms]),
            poly(T, MOON_MEAN_ELONGATION[:terms]),
        )
