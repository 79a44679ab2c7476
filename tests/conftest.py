# tests/conftest.py

import pytest
from unittest.mock import patch

from astrochron import api
from astrochron.bootstrap import build_registry
from astrochron.reference import deltat


@pytest.fixture
def no_delta_t():
    """
    Worked examples in Meeus are given in dynamical time. Zeroing ΔT lets a
    CalendarDate stand for the TD instant of the example.
    """
    with patch("astrochron.reference.calendar.dynamical_time_difference", return_value=0.0):
        yield


@pytest.fixture
def fresh_registry(monkeypatch):
    """A registry built from a clean environment, restored after the test."""
    monkeypatch.delenv("ASTROCHRON_PLANETARY_THEORY", raising=False)
    monkeypatch.delenv("ASTROCHRON_LUNAR_THEORY", raising=False)
    saved = api._registry
    reg = build_registry()
    api.set_registry(reg)
    yield reg
    api.set_registry(saved)


@pytest.fixture
def clear_deltat_cache():
    deltat.load_override_table.cache_clear()
    yield
    deltat.load_override_table.cache_clear()
