# test/test_config.py
import pytest

from fuelchart.core import ChartConfig, Margin, InvalidConfig


def test_default_plot_area():
    cfg = ChartConfig()

    assert cfg.margin == Margin(top=70, right=200, bottom=40, left=80)
    assert cfg.inner_width == 1220
    assert cfg.inner_height == 390
    assert cfg.tooltip_offset_x == 100
    assert cfg.tooltip_offset_y == 50


def test_margin_rejects_negative():
    with pytest.raises(InvalidConfig):
        Margin(top=-1)


def test_config_rejects_empty_plot_area():
    with pytest.raises(InvalidConfig):
        ChartConfig(width=200)


@pytest.mark.parametrize(
    "kwargs",
    [{"palette": ()}, {"value_tick_count": 0}, {"tooltip_offset_x": float("nan")}, {"margin": (1, 2, 3, 4)}],
)
def test_config_rejects_bad_fields(kwargs):
    with pytest.raises(InvalidConfig):
        ChartConfig(**kwargs)
