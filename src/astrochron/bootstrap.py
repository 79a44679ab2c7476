from __future__ import annotations

import logging
import os

from astrochron.core.errors import TheoryUnavailableError
from astrochron.core.theory import TheoryRegistry

logger = logging.getLogger(__name__)

DEFAULT_THEORIES = {
    "planetary": "kepler",
    "lunar": "meeus",
    "delaunay": "iers",
}

ENV_VARS = {
    "planetary": "ASTROCHRON_PLANETARY_THEORY",
    "lunar": "ASTROCHRON_LUNAR_THEORY",
}


def _kepler():
    from astrochron.theories.kepler import KeplerPlanetaryTheory
    return KeplerPlanetaryTheory()

def _meeus():
    from astrochron.theories.meeus_moon import MeeusLunarTheory
    return MeeusLunarTheory()

def _iers():
    from astrochron.theories.delaunay import IersDelaunayArguments
    return IersDelaunayArguments()

def _jpl(kind):
    from astrochron.ephemeris.jpl import JplLunarTheory, JplPlanetaryTheory
    cls = JplPlanetaryTheory if kind == "planetary" else JplLunarTheory
    try:
        return cls.load()
    except RuntimeError as e:
        raise TheoryUnavailableError(f"jpl {kind} theory unavailable: {e}") from e

def _jpl_planetary():
    return _jpl("planetary")

def _jpl_lunar():
    return _jpl("lunar")


def build_registry() -> TheoryRegistry:
    reg = TheoryRegistry()
    reg.register("planetary", "kepler", _kepler)
    reg.register("planetary", "jpl", _jpl_planetary)
    reg.register("lunar", "meeus", _meeus)
    reg.register("lunar", "jpl", _jpl_lunar)
    reg.register("delaunay", "iers", _iers)

    for kind, name in DEFAULT_THEORIES.items():
        wanted = os.environ.get(ENV_VARS.get(kind, ""), "").strip() or name
        if wanted not in reg.list(kind):
            logger.warning("%s=%s is not a known %s theory; using %s", ENV_VARS[kind], wanted, kind, name)
            wanted = name
        reg.set_default(kind, wanted)
    return reg
