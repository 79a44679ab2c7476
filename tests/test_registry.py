# tests/test_registry.py

import logging
import math

import pytest

import astrochron
from astrochron import api
from astrochron.bootstrap import DEFAULT_THEORIES, build_registry
from astrochron.core.errors import TheoryUnavailableError
from astrochron.core.theory import TheoryRegistry
from astrochron.core.types import CalendarDate, Month, Planet, SphericalPoint
from astrochron.reference import solar
from astrochron.theories.kepler import KeplerPlanetaryTheory


class FixedEarth:
    """Earth parked on the vernal equinox direction at 1 AU."""

    name = "fixed"

    def heliocentric_position(self, tau, planet):
        if planet is Planet.EARTH:
            return SphericalPoint(0.0, 0.0, 1.0)
        return SphericalPoint(math.pi / 2.0, 0.0, 5.0)


def test_builtin_theories(fresh_registry):
    assert astrochron.list_theories() == {
        "planetary": ["jpl", "kepler"],
        "lunar": ["jpl", "meeus"],
        "delaunay": ["iers"],
    }
    assert astrochron.list_theories("lunar") == ["jpl", "meeus"]
    assert astrochron.default_theories() == DEFAULT_THEORIES


def test_instances_are_built_once(fresh_registry):
    a = fresh_registry.get("planetary", "kepler")
    assert isinstance(a, KeplerPlanetaryTheory)
    assert fresh_registry.get("planetary", "kepler") is a
    assert api.planetary_theory() is a
    assert api.planetary_theory("kepler") is a


def test_unknown_theory_and_kind(fresh_registry):
    with pytest.raises(TheoryUnavailableError):
        api.planetary_theory("vsop87")
    with pytest.raises(TheoryUnavailableError):
        astrochron.use_theories(lunar="elp2000")
    with pytest.raises(ValueError):
        astrochron.list_theories("cometary")


def test_register_requires_overwrite(fresh_registry):
    astrochron.register_theory("planetary", "fixed", FixedEarth)
    with pytest.raises(KeyError):
        astrochron.register_theory("planetary", "fixed", FixedEarth)
    astrochron.register_theory("planetary", "fixed", FixedEarth, overwrite=True)
    assert "fixed" in astrochron.list_theories("planetary")


def test_theory_selection_per_call_and_by_default(fresh_registry):
    d = CalendarDate(2000, Month.JANUARY, 1.5)
    astrochron.register_theory("planetary", "fixed", FixedEarth)

    by_name = solar.sun_true_position(d, theory="fixed")
    by_object = solar.sun_true_position(d, theory=FixedEarth())
    assert by_name == by_object
    # FK5 shifts the geometric Sun by a tenth of an arcsecond
    assert by_name.longitude == pytest.approx(math.pi, abs=1e-6)
    assert solar.sun_distance_to_earth(d, theory="fixed") == 1.0

    assert solar.sun_true_position(d) != by_name
    astrochron.use_theories(planetary="fixed")
    assert astrochron.default_theories()["planetary"] == "fixed"
    assert solar.sun_true_position(d) == by_name


def test_uninitialized_registry():
    saved = api._registry
    api.set_registry(None)
    try:
        with pytest.raises(RuntimeError, match="not initialized"):
            api.lunar_theory()
    finally:
        api.set_registry(saved)


def test_environment_selects_defaults(monkeypatch):
    monkeypatch.setenv("ASTROCHRON_PLANETARY_THEORY", "jpl")
    monkeypatch.setenv("ASTROCHRON_LUNAR_THEORY", "jpl")
    reg = build_registry()
    # the backend is only loaded on first use
    assert reg.defaults == {"planetary": "jpl", "lunar": "jpl", "delaunay": "iers"}
    assert reg._instances == {}


def test_unknown_environment_theory_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("ASTROCHRON_PLANETARY_THEORY", "ptolemy")
    monkeypatch.delenv("ASTROCHRON_LUNAR_THEORY", raising=False)
    with caplog.at_level(logging.WARNING, logger="astrochron.bootstrap"):
        reg = build_registry()
    assert reg.defaults["planetary"] == "kepler"
    assert "ptolemy" in caplog.text


def test_unavailable_backend_is_reported():
    reg = TheoryRegistry()

    def broken():
        raise TheoryUnavailableError("no kernel")

    reg.register("lunar", "broken", broken)
    reg.set_default("lunar", "broken")
    with pytest.raises(TheoryUnavailableError, match="no kernel"):
        reg.default("lunar")
