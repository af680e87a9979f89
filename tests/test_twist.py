import math

import numpy as np
import pytest

from basetypes.twist import Twist


def test_default_twist_is_all_nan_and_invalid():
    t = Twist()
    assert np.isnan(t.linear).all()
    assert np.isnan(t.angular).all()
    assert t.is_valid() is False


def test_set_zero_makes_twist_valid():
    t = Twist()
    t.set_zero()
    assert t.is_valid() is True
    assert not t.linear.any()
    assert not t.angular.any()


def test_set_nan_invalidates():
    t = Twist([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
    assert t.is_valid() is True
    t.set_nan()
    assert t.is_valid() is False
    assert np.isnan(t.linear).all() and np.isnan(t.angular).all()


def test_single_nan_component_is_invalid():
    t = Twist([1.0, math.nan, 3.0], [4.0, 5.0, 6.0])
    assert t.is_valid() is False


def test_infinity_is_not_nan_so_still_valid():
    t = Twist([math.inf, 0.0, 0.0], [0.0, 0.0, -math.inf])
    assert t.is_valid() is True


def test_constructor_keeps_values():
    t = Twist([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
    assert list(t.linear) == [1.0, 2.0, 3.0]
    assert list(t.angular) == [4.0, 5.0, 6.0]


def test_constructor_copies_input():
    lin = np.array([1.0, 2.0, 3.0])
    t = Twist(lin, [0.0, 0.0, 0.0])
    t.set_zero()
    assert list(lin) == [1.0, 2.0, 3.0]


def test_add_then_subtract_round_trip():
    a = Twist([1.5, -2.0, 0.25], [0.5, 0.75, -1.0])
    b = Twist([0.5, 4.0, 2.0], [1.0, -3.0, 2.5])
    back = (a + b) - b
    assert np.allclose(back.linear, a.linear)
    assert np.allclose(back.angular, a.angular)


def test_add_is_commutative():
    a = Twist([1.5, -2.0, 0.25], [0.5, 0.75, -1.0])
    b = Twist([0.5, 4.0, 2.0], [1.0, -3.0, 2.5])
    ab = a + b
    ba = b + a
    assert np.array_equal(ab.linear, ba.linear)
    assert np.array_equal(ab.angular, ba.angular)


def test_subtract_self_is_zero():
    a = Twist([1.5, -2.0, 0.25], [0.5, 0.75, -1.0])
    d = a - a
    assert not d.linear.any()
    assert not d.angular.any()


def test_nan_propagates_through_addition():
    a = Twist()
    b = Twist([1.0, 1.0, 1.0], [1.0, 1.0, 1.0])
    assert (a + b).is_valid() is False


def test_wrong_shape_raises():
    with pytest.raises(ValueError):
        Twist([1.0, 2.0], [0.0, 0.0, 0.0])


def test_add_with_other_type_raises():
    with pytest.raises(TypeError):
        Twist([0.0, 0.0, 0.0], [0.0, 0.0, 0.0]) + 1.0