import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from hyperquat import EPS, Quaternion


def test_equality_is_tolerant():
    base = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert base == Quaternion(1.0 + 1e-10, 2.0, 3.0, 4.0)
    assert base.equals(Quaternion(1.0, 2.0, 3.0 - 1e-10, 4.0))
    assert base != Quaternion(1.1, 2.0, 3.0, 4.0)
    assert not base.equals(Quaternion(1.0, 2.0, 3.0, 4.0 + 2 * EPS))


def test_equality_is_reflexive_and_symmetric():
    a = Quaternion(1.0, 2.0, 3.0, 4.0)
    b = Quaternion(1.0 + 1e-10, 2.0, 3.0, 4.0)
    assert a == a
    assert a == b and b == a
    c = Quaternion(1.1, 2.0, 3.0, 4.0)
    assert a != c and c != a


def test_equality_against_other_types():
    q = Quaternion(1, 0, 0, 0)
    assert q != 1
    assert q != (1.0, 0.0, 0.0, 0.0)
    assert q != "1.0+0.0i+0.0j+0.0k"
    with pytest.raises(TypeError):
        q.equals(1)


def test_nan_is_never_equal():
    q = Quaternion(float("nan"), 0, 0, 0)
    assert q != q


def test_hash_consistent_for_equal_values_in_one_cell():
    a = Quaternion(1.0, 2.0, 3.0, 4.0)
    b = Quaternion(1.0 + 1e-13, 2.0, 3.0 - 1e-13, 4.0)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, a.copy()}) == 1


def test_hash_distinguishes_distinct_values():
    values = {Quaternion(1, 2, 3, 4), Quaternion(4, 3, 2, 1), Quaternion(1, 2, 3, 4)}
    assert len(values) == 2


def test_signed_zero_hashes_alike():
    assert hash(Quaternion(0.0, -0.0, 0.0, -0.0)) == hash(Quaternion.ZERO)


def test_non_finite_components_are_hashable():
    q = Quaternion(float("inf"), -float("inf"), 1e308, 0.0)
    assert hash(q) == hash(Quaternion(float("inf"), -float("inf"), 1e308, 0.0))
