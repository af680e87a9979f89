import math

import numpy as np
import pytest

from basetypes.floats import is_unknown
from basetypes.waypoint import Waypoint


def test_default_waypoint():
    wp = Waypoint()
    assert wp.has_valid_position() is True
    assert np.array_equal(wp.position, [1.0, 0.0, 0.0])
    assert wp.heading == 0
    assert wp.tol_position == 0
    assert wp.tol_heading == 0


def test_position_and_heading():
    wp = Waypoint([1.0, 1.0, 1.0], math.pi)
    assert wp.has_valid_position() is True
    assert np.array_equal(wp.position, [1.0, 1.0, 1.0])
    assert wp.heading == math.pi
    assert wp.tol_position == 0
    assert wp.tol_heading == 0


def test_all_values():
    wp = Waypoint([1.0, 1.0, 1.0], math.pi / 2, 1, 2)
    assert np.array_equal(wp.position, [1.0, 1.0, 1.0])
    assert wp.has_valid_position() is True
    assert wp.heading == math.pi / 2
    assert wp.tol_position == 1
    assert wp.tol_heading == 2


def test_unknown_waypoint():
    wp = Waypoint.unknown()
    assert wp.has_valid_position() is False
    assert is_unknown(wp.heading) is True
    assert is_unknown(wp.tol_position) is True
    assert is_unknown(wp.tol_heading) is True


def test_infinite_position_is_invalid():
    wp = Waypoint([math.inf, 0.0, 0.0])
    assert wp.has_valid_position() is False


def test_default_positions_are_independent():
    a = Waypoint()
    b = Waypoint()
    a.position[0] = 5.0
    assert b.position[0] == 1.0


def test_wrong_position_shape_raises():
    with pytest.raises(ValueError):
        Waypoint([1.0, 2.0])