import logging
import math
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from barviz.chart.config import configure
from barviz.svl.bar_spec import BarDatum
from barviz.svl.bar_verify import normalize
from barviz.svl.errors import EmptyDatasetError, InvalidValueError


def test_parallel_sequences_keep_input_order():
    data = [{"label": "c", "value": 3}, {"label": "a", "value": 1}, {"label": "b", "value": 2}]
    n = normalize(data)
    assert n.labels == ("c", "a", "b")
    assert n.values == (3.0, 1.0, 2.0)
    assert n.item_count == len(n.labels) == len(n.values) == 3


def test_min_max_by_full_scan():
    n = normalize([{"label": "x", "value": 5}, {"label": "y", "value": -4}, {"label": "z", "value": 12.5}])
    assert n.max_value == 12.5
    assert n.min_value == -4


def test_input_is_not_mutated():
    data = [{"label": "A", "value": 10}, {"label": "B", "value": 30}]
    before = [dict(d) for d in data]
    normalize(data)
    assert data == before


def test_accepts_bar_datum_instances():
    n = normalize([BarDatum(label="A", value=1), {"label": "B", "value": 2}])
    assert n.labels == ("A", "B")


def test_numeric_labels_become_text():
    n = normalize([{"label": 2024, "value": 1}])
    assert n.labels == ("2024",)


def test_empty_dataset_rejected():
    with pytest.raises(EmptyDatasetError):
        normalize([])


@pytest.mark.parametrize("bad", ["10", None, True, math.nan, math.inf, -math.inf, 10 ** 400, Decimal("NaN")])
def test_non_numeric_or_non_finite_values_rejected(bad):
    with pytest.raises(InvalidValueError) as ei:
        normalize([{"label": "ok", "value": 1}, {"label": "bad", "value": bad}])
    assert "data[1]" in str(ei.value)


def test_missing_fields_rejected():
    with pytest.raises(InvalidValueError):
        normalize([{"value": 3}])
    with pytest.raises(InvalidValueError):
        normalize([{"label": "no value"}])
    with pytest.raises(InvalidValueError):
        normalize([("A", 3)])


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        normalize([])


def test_negative_values_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="barviz.svl.bar_verify"):
        n = normalize([{"label": "loss", "value": -3}, {"label": "gain", "value": 8}])
    assert n.min_value == -3
    assert "negative values" in caplog.text


def test_other_real_number_types_accepted():
    data = [
        {"label": "i64", "value": np.int64(5)},
        {"label": "f32", "value": np.float32(2.5)},
        {"label": "dec", "value": Decimal("1.5")},
        {"label": "frac", "value": Fraction(1, 4)},
    ]
    n = normalize(data)
    assert n.values == (5.0, 2.5, 1.5, 0.25)
    assert all(type(v) is float for v in n.values)
    assert n.max_value == 5.0


def test_extra_keys_are_ignored_even_when_not_strings():
    n = normalize([{"label": "a", "value": 1, 3: "x", "color": "red"}])
    assert n.labels == ("a",) and n.values == (1.0,)


def test_array_input_is_not_truth_tested():
    data = np.array([{"label": "a", "value": 2}, {"label": "b", "value": 4}], dtype=object)
    cfg = configure("c", 200, 100, data)
    assert len(cfg.data) == 2
    assert normalize(data).labels == ("a", "b")
    assert normalize(cfg.data).values == (2.0, 4.0)
