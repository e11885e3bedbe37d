import sys

import pytest

from boschetch.distributions import BoschDistribution, ViaDistribution
from boschetch.process import BoschProcess, re_from_ash_time
from boschetch.process_data import BoschProcessData


def _tapered(taper_start=-24.5, bottom=0.3):
    return BoschProcessData(
        num_cycles=100,
        iso_rate=-0.6,
        depth_per_cycle=-1.0,
        start_width=1.0,
        bottom_width=bottom,
        taper_start=taper_start,
        grid_delta=0.1,
    )


def test_re_from_ash_time_limits():
    assert re_from_ash_time(0.0) == 0.0
    assert re_from_ash_time(4.0) == 1.0
    assert re_from_ash_time(-5.0) == 0.0
    assert re_from_ash_time(100.0) == 1.0


def test_re_from_ash_time_monotonic_between_limits():
    values = [re_from_ash_time(t) for t in (1.0, 1.2, 1.5, 2.0, 2.5)]
    assert all(0.0 < v < 1.0 for v in values)
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_re_from_ash_time_continuous_near_upper_limit():
    assert re_from_ash_time(3.936) == pytest.approx(1.0, abs=1e-3)


def test_invalid_dimension():
    with pytest.raises(ValueError):
        BoschProcess(_tapered(), 4)


def test_taper_ratio_from_re_solves_width_equation():
    process = BoschProcess(_tapered())
    process.data.num_taper_cycles = 30
    for r_e in (0.0, 0.3, 0.8):
        x = process.taper_ratio_from_re(r_e)
        assert 0.0 < x < 1.0
        frac = (1 - x) / (1 + x)
        assert 1 - (1 - frac**30) * (1 + x) == pytest.approx(r_e, abs=1e-6)


def test_taper_ratio_decreases_with_wider_bottom():
    process = BoschProcess(_tapered())
    process.data.num_taper_cycles = 30
    assert process.taper_ratio_from_re(0.2) > process.taper_ratio_from_re(0.7)


def test_prepare_without_taper_when_widths_equal():
    data = BoschProcessData(
        num_cycles=10,
        depth_per_cycle=-1.0,
        start_width=1.0,
        bottom_width=1.0,
        taper_start=-3.0,
        grid_delta=0.1,
    )
    result = BoschProcess(data).prepare()
    assert result is data
    assert data.taper_start == -sys.float_info.max
    assert data.trench_bottom == pytest.approx(-10.05)
    assert data.num_taper_cycles == 0


def test_prepare_with_taper_invariants():
    data = _tapered()
    BoschProcess(data).prepare()
    straight = data.num_cycles - data.num_taper_cycles
    assert straight > 0
    assert (data.taper_start - data.top_offset) / data.depth_per_cycle - 0.5 == (
        pytest.approx(straight)
    )
    assert 0.0 < data.taper_ratio < 1.0
    assert data.trench_bottom < data.taper_start
    assert data.trench_bottom > data.taper_start + data.depth_per_cycle * (
        data.num_taper_cycles
    )


def test_z_from_taper_ratio_matches_trench_bottom():
    data = _tapered()
    process = BoschProcess(data)
    process.prepare()
    assert data.trench_bottom == pytest.approx(
        data.taper_start + process.z_from_taper_ratio()
    )


def test_prepare_zero_start_width():
    data = _tapered()
    data.start_width = 0.0
    with pytest.raises(ValueError):
        BoschProcess(data).prepare()


def test_distributions_are_independent_copies():
    data = _tapered()
    process = BoschProcess(data, 3)
    process.prepare()
    via, bosch = process.distributions()
    assert isinstance(via, ViaDistribution)
    assert isinstance(bosch, BoschDistribution)
    assert via.dimension == 3 and bosch.dimension == 3
    assert via.data == data
    data.trench_bottom = 5.0
    assert via.data.trench_bottom != 5.0
    assert bosch.data is not via.data