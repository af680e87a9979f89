import math

import numpy as np
import pytest

from basetypes.wrench import Wrench


def test_default_wrench_is_nan_and_invalid():
    w = Wrench()
    assert np.isnan(w.force).all()
    assert np.isnan(w.torque).all()
    assert w.is_valid() is False


def test_set_zero_makes_valid():
    w = Wrench()
    w.set_zero()
    assert w.is_valid() is True
    assert not w.force.any()
    assert not w.torque.any()


def test_set_nan_invalidates():
    w = Wrench([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
    assert w.is_valid() is True
    w.set_nan()
    assert w.is_valid() is False


def test_nan_in_torque_only_is_invalid():
    w = Wrench([1.0, 2.0, 3.0], [4.0, 5.0, math.nan])
    assert w.is_valid() is False


def test_constructor_keeps_values():
    w = Wrench([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
    assert list(w.force) == [1.0, 2.0, 3.0]
    assert list(w.torque) == [4.0, 5.0, 6.0]


def test_add_subtract_round_trip():
    a = Wrench([10.0, -2.5, 0.5], [0.1, 0.2, 0.3])
    b = Wrench([-1.0, 3.0, 7.0], [2.0, -1.0, 0.5])
    back = (a + b) - b
    assert np.allclose(back.force, a.force)
    assert np.allclose(back.torque, a.torque)


def test_subtract_self_is_zero():
    a = Wrench([10.0, -2.5, 0.5], [0.1, 0.2, 0.3])
    d = a - a
    assert not d.force.any()
    assert not d.torque.any()


def test_addition_does_not_modify_operands():
    a = Wrench([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
    b = Wrench([1.0, 1.0, 1.0], [1.0, 1.0, 1.0])
    _ = a + b
    assert list(a.force) == [1.0, 2.0, 3.0]
    assert list(b.torque) == [1.0, 1.0, 1.0]


def test_wrong_shape_raises():
    with pytest.raises(ValueError):
        Wrench([0.0, 0.0, 0.0], [0.0, 0.0, 0.0, 0.0])


def test_subtract_other_type_raises():
    with pytest.raises(TypeError):
        Wrench([0.0, 0.0, 0.0], [0.0, 0.0, 0.0]) - "x"