import pytest

from barviz.chart.config import configure
from barviz.chart.layout import compute_layout, upper_bound
from barviz.svl.bar_verify import NormalizedData, normalize
from barviz.svl.errors import EmptyDatasetError


def test_configure_margins_and_style():
    cfg = configure("chart", 200, 100, [])
    assert cfg.vertical_margin == 10
    assert cfg.horizontal_margin == 20
    assert cfg.axis_ratio == 10
    assert cfg.axis_color == "#b1b1b1" and cfg.axis_width == 0.75
    assert cfg.gridline_color == "#e5e5e5" and cfg.gridline_width == 0.5
    assert cfg.font_color == "#666"
    assert cfg.vertical_font_size == 3
    assert cfg.horizontal_font_size == 6
    assert cfg.font(cfg.vertical_font_size) == "normal 300 3px times"


def test_two_item_scenario():
    data = [{"label": "A", "value": 10}, {"label": "B", "value": 30}]
    cfg = configure("chart", 200, 100, data)
    geo = compute_layout(cfg, normalize(cfg.data))
    assert geo.vertical_upper_bound == 30
    assert geo.vertical_label_step == 15
    assert geo.vertical_axis_length == 80
    assert geo.horizontal_axis_length == 160
    assert geo.horizontal_label_step == 80
    assert geo.vertical_tick_values() == [30, 15, 0]
    assert [geo.vertical_tick_y(i) for i in range(3)] == [10, 50, 90]


def test_single_item_scenario():
    cfg = configure("chart", 200, 100, [{"label": "X", "value": 7}])
    geo = compute_layout(cfg, normalize(cfg.data))
    assert geo.vertical_upper_bound == 10
    assert geo.vertical_tick_values() == [10, 0]


@pytest.mark.parametrize("max_value", [0.1, 1, 7, 9.99, 10, 10.01, 30, 31, 99, 100, 1234.5])
def test_upper_bound_is_inclusive_multiple_of_ten(max_value):
    b = upper_bound(max_value)
    assert b % 10 == 0
    assert b >= max_value
    assert b - max_value < 10


def test_tick_spacing_matches_scaled_step():
    cfg = configure("chart", 640, 480, [{"label": str(i), "value": v} for i, v in enumerate([3, 18, 44])])
    geo = compute_layout(cfg, normalize(cfg.data))
    scaled = (geo.vertical_axis_length / geo.vertical_upper_bound) * geo.vertical_label_step
    assert geo.vertical_tick_spacing == pytest.approx(scaled)


def test_zero_items_fail_fast():
    cfg = configure("chart", 200, 100, [])
    empty = NormalizedData(labels=(), values=(), item_count=0, max_value=0, min_value=0)
    with pytest.raises(EmptyDatasetError):
        compute_layout(cfg, empty)
