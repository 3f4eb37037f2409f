import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from hyperquat.utils import format_fixed, grid_key, parse_double, split_components, strip_marker


def test_format_fixed_digits():
    assert format_fixed(3.14159, 1) == "3.1"
    assert format_fixed(3.14159, 3) == "3.142"
    assert format_fixed(2.5, 0) == "3"
    assert format_fixed(-2.5, 0) == "-3"


def test_strip_marker_only_removes_suffix():
    assert strip_marker("2.0i", "i") == "2.0"
    assert strip_marker("2.0", "i") == "2.0"
    assert strip_marker("Infinityi", "i") == "Infinity"
    assert strip_marker("2.0ii", "i") == "2.0i"


def test_split_components_drops_only_trailing_empties():
    assert split_components("1+2+3+4++") == ["1", "2", "3", "4"]
    assert split_components("+1+2") == ["", "1", "2"]
    assert split_components("") == []


def test_grid_key():
    assert grid_key(1.0, 1e-9) == grid_key(1.0 + 1e-13, 1e-9)
    assert grid_key(1.0, 1e-9) != grid_key(1.0 + 1e-8, 1e-9)
    assert grid_key(float("inf"), 1e-9) == float("inf")


def test_format_fixed_rounds_shortest_repr():
    assert format_fixed(0.15) == "0.2"
    assert format_fixed(2.675, 2) == "2.68"
    assert format_fixed(1e20) == "100000000000000000000.0"


def test_parse_double():
    assert parse_double(" -2.5e3 ") == -2500.0
    assert parse_double("7f") == 7.0
    assert parse_double("-Infinity") == float("-inf")
    for bad in ("1_0", "inf", "nan", "Infinityd", "", "1e", "--1"):
        with pytest.raises(ValueError):
            parse_double(bad)
