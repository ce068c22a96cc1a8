# test/test_scales.py
from datetime import date, datetime

import numpy as np
import pytest

from fuelchart.core import (
    Dataset,
    Sample,
    LinearScale,
    TimeScale,
    build_scales,
    compute_domains,
    EmptyDatasetError,
    InvalidScale,
)


def _ds(*items) -> Dataset:
    return Dataset(samples=[Sample(date.fromisoformat(d), k, v) for d, k, v in items])


def test_compute_domains_pins_value_range_to_zero():
    ds = _ds(("2020-03-01", "a", 50), ("2020-01-01", "b", 70), ("2020-02-01", "b", 20))
    time_range, value_range = compute_domains(ds)

    assert time_range == (date(2020, 1, 1), date(2020, 3, 1))
    assert value_range == (0.0, 70.0)
    assert time_range[0] <= time_range[1]


def test_compute_domains_empty_raises():
    with pytest.raises(EmptyDatasetError):
        compute_domains(Dataset())


def test_build_scales_maps_domain_to_pixels():
    scales = build_scales((date(2020, 1, 1), date(2020, 1, 11)), (0.0, 100.0), 100, 50)

    assert scales.x(date(2020, 1, 1)) == 0.0
    assert scales.x(date(2020, 1, 6)) == pytest.approx(50.0)
    assert scales.x(date(2020, 1, 11)) == pytest.approx(100.0)

    assert scales.y(0) == 50.0
    assert scales.y(50) == pytest.approx(25.0)
    assert scales.y(100) == pytest.approx(0.0)
    assert scales.width == 100.0
    assert scales.height == 50.0


def test_value_scale_is_inverted():
    scales = build_scales((date(2020, 1, 1), date(2021, 1, 1)), (0.0, 1234.0), 600, 400)
    values = np.linspace(0.0, 1234.0, 25)
    ys = scales.y(values)

    # larger value -> smaller pixel y
    assert np.all(np.diff(ys) < 0)


def test_time_scale_invert_roundtrip():
    scales = build_scales((date(2020, 1, 1), date(2020, 1, 11)), (0.0, 1.0), 100, 50)

    assert scales.x.invert(50.0) == np.datetime64("2020-01-06T00:00:00.000")
    # half a day
    assert scales.x.invert(5.0) == np.datetime64("2020-01-01T12:00:00.000")


def test_time_scale_accepts_datetime_and_datetime64():
    x = TimeScale(domain=(date(2020, 1, 1), date(2020, 1, 3)), range=(0.0, 200.0))

    assert x(datetime(2020, 1, 1, 12)) == pytest.approx(50.0)
    assert x(np.datetime64("2020-01-02")) == pytest.approx(100.0)
    assert np.allclose(x(np.array(["2020-01-01", "2020-01-03"], dtype="datetime64[D]")), [0.0, 200.0])

    with pytest.raises(TypeError):
        x("2020-01-01")


def test_degenerate_time_domain_maps_to_zero():
    scales = build_scales((date(2020, 1, 1), date(2020, 1, 1)), (0.0, 10.0), 100, 50)

    assert scales.x(date(2020, 1, 1)) == 0.0
    assert scales.x.invert(80.0) == np.datetime64("2020-01-01T00:00:00.000")


def test_degenerate_value_domain_maps_to_bottom():
    y = LinearScale(domain=(0.0, 0.0), range=(50.0, 0.0))
    assert y(0.0) == 50.0
    assert y.invert(10.0) == 0.0


def test_build_scales_rejects_nan_domain_and_empty_plot():
    with pytest.raises(InvalidScale):
        build_scales((date(2020, 1, 1), date(2020, 2, 1)), (0.0, float("nan")), 100, 50)
    with pytest.raises(InvalidScale):
        build_scales((date(2020, 1, 1), date(2020, 2, 1)), (0.0, 1.0), 0, 50)
    with pytest.raises(InvalidScale):
        build_scales((date(2020, 2, 1), date(2020, 1, 1)), (0.0, 1.0), 100, 50)


def test_linear_invert():
    y = LinearScale(domain=(0.0, 100.0), range=(400.0, 0.0))
    assert y.invert(100.0) == pytest.approx(75.0)


def test_linear_ticks_are_nice():
    assert np.allclose(LinearScale((0.0, 1000.0), (390.0, 0.0)).ticks(10), np.arange(0, 1001, 100))
    assert np.allclose(LinearScale((0.0, 23456.0), (390.0, 0.0)).ticks(10), np.arange(0, 22001, 2000))
    assert np.allclose(LinearScale((0.0, 0.0), (390.0, 0.0)).ticks(10), [0.0])


def test_year_ticks_cover_every_january_first():
    x = TimeScale(domain=(date(2016, 6, 1), date(2019, 1, 1)), range=(0.0, 100.0))
    assert x.year_ticks() == [date(2017, 1, 1), date(2018, 1, 1), date(2019, 1, 1)]


def test_time_scale_invert_clamps_to_domain():
    x = TimeScale(domain=(date(2020, 1, 1), date(2020, 1, 11)), range=(0.0, 100.0))

    assert x.invert(1e13) == np.datetime64("2020-01-11T00:00:00.000")
    assert x.invert(float("-inf")) == np.datetime64("2020-01-01T00:00:00.000")
    assert x.invert(float("nan")) == np.datetime64("2020-01-01T00:00:00.000")
