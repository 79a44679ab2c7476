# tests/test_deltat.py

import logging
import math

import pytest

from astrochron.reference import deltat


def test_table_lengths_and_ranges():
    assert len(deltat.PRE_TELESCOPE_ERA) == 28
    assert deltat.PRE_TELESCOPE_ERA.range == (-1000.0, 1700.0)
    assert deltat.TELESCOPE_ERA.range == (1700.0, 2020.0)
    assert deltat.TABLE_START_YEAR == -1000.0
    assert deltat.TABLE_END_YEAR == 2020.0


def test_table_interpolation():
    assert deltat.PRE_TELESCOPE_ERA.eval(-1000.0) == 25400.0
    assert deltat.PRE_TELESCOPE_ERA.eval(-950.0) == pytest.approx(24550.0)
    assert deltat.TELESCOPE_ERA.eval(2005.0) == pytest.approx(65.5)
    assert deltat.TELESCOPE_ERA.uncertainty(2015.0) == pytest.approx(2.0)


def test_table_out_of_range():
    with pytest.raises(ValueError):
        deltat.TELESCOPE_ERA.eval(1699.0)
    with pytest.raises(ValueError):
        deltat.PRE_TELESCOPE_ERA.eval(1701.0)
    with pytest.raises(ValueError):
        deltat.TELESCOPE_ERA.eval(2021.0)
    assert deltat.TELESCOPE_ERA.eval(2021.0, extend=True) == pytest.approx(71.5)


def test_table_without_uncertainty_column():
    t = deltat.DeltaTTable((0.0, 1.0), (10.0, 20.0))
    assert t.eval(0.25) == pytest.approx(12.5)
    assert math.isnan(t.uncertainty(0.5))
    assert list(t) == [(0.0, 10.0), (1.0, 20.0)]


@pytest.mark.usefixtures("clear_deltat_cache")
class TestDeltaTModel:
    def test_eras_join_at_1700(self):
        assert deltat.delta_t_seconds(1700.0) == pytest.approx(9.0)
        assert deltat.delta_t_seconds(1650.0) == pytest.approx(64.5)

    def test_parabola_outside_tables(self):
        assert deltat.delta_t_parabola(1820.0) == -20.0
        assert deltat.delta_t_seconds(-2000.0) == pytest.approx(-20.0 + 32.0 * 38.2 ** 2)
        assert deltat.delta_t_seconds(2150.0) == pytest.approx(-20.0 + 32.0 * 3.3 ** 2)

    def test_uncertainty(self):
        assert deltat.delta_t_uncertainty(-1000.0) == pytest.approx(640.0)
        assert deltat.delta_t_uncertainty(1950.0) == 0.0
        assert math.isnan(deltat.delta_t_uncertainty(-1001.0))
        assert math.isnan(deltat.delta_t_uncertainty(2021.0))

    def test_last_table_year_continues_last_segment(self):
        # 2010: 66 s, 2020: 71 s, uncertainty 0 -> 4 s
        assert deltat.in_tables(2020)
        assert not deltat.in_tables(2021)
        assert deltat.delta_t_seconds(2020.5) == pytest.approx(71.25)
        assert deltat.delta_t_uncertainty(2020.5) == pytest.approx(4.2)
        assert deltat.delta_t_seconds(2021.0, year=2020) == pytest.approx(71.5)
        assert deltat.delta_t_uncertainty(2021.0, year=2020) == pytest.approx(4.4)
        assert deltat.delta_t_seconds(2021.0) == pytest.approx(deltat.delta_t_parabola(2021.0))

    def test_no_override_by_default(self, monkeypatch):
        monkeypatch.delenv("ASTROCHRON_DELTAT_TABLE", raising=False)
        assert deltat.load_override_table() is None

    def test_override_table(self, monkeypatch, tmp_path):
        p = tmp_path / "deltat.csv"
        p.write_text("decimal_year,delta_t_seconds\n2000.0,63.8\n2001.0,64.1\n", encoding="utf-8")
        monkeypatch.setenv("ASTROCHRON_DELTAT_TABLE", str(p))

        assert deltat.delta_t_seconds(2000.5) == pytest.approx(63.95)
        # built-in tables outside the override's own range
        assert deltat.delta_t_seconds(1990.0) == pytest.approx(57.0)

    def test_override_missing_file_warns(self, monkeypatch, tmp_path, caplog):
        monkeypatch.setenv("ASTROCHRON_DELTAT_TABLE", str(tmp_path / "missing.csv"))
        with caplog.at_level(logging.WARNING, logger="astrochron.reference.deltat"):
            assert deltat.delta_t_seconds(2000.0) == pytest.approx(65.0)
        assert "not a file" in caplog.text

    def test_override_not_increasing_warns(self, monkeypatch, tmp_path, caplog):
        p = tmp_path / "deltat.csv"
        p.write_text("decimal_year,delta_t_seconds\n2001.0,64.1\n2000.0,63.8\n", encoding="utf-8")
        monkeypatch.setenv("ASTROCHRON_DELTAT_TABLE", str(p))
        with caplog.at_level(logging.WARNING, logger="astrochron.reference.deltat"):
            assert deltat.load_override_table() is None
        assert "cannot read" in caplog.text
