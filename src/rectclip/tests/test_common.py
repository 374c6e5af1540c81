import dataclasses

import numpy as np
import pytest

from rectclip.common import Boundary, Edge, Point


def test_point_is_a_value():
    p = Point(1.5, 2)
    assert p == (1.5, 2)
    assert p.x == 1.5
    assert p.y == 2
    with pytest.raises(AttributeError):
        p.x = 3


def test_boundary_is_frozen(box):
    with pytest.raises(dataclasses.FrozenInstanceError):
        box.west = 1


def test_boundary_from_bounds():
    assert Boundary.from_bounds((1, 2, 3, 4)) == Boundary(1, 2, 3, 4)
    assert Boundary.from_bounds([-1.5, 0, 2, 8]).bounds == (-1.5, 0, 2, 8)


def test_boundary_from_points():
    points = [(1, 5), (3, -2), (0, 4)]
    assert Boundary.from_points(points) == Boundary(0, -2, 3, 5)
    assert Boundary.from_points(np.array(points)) == Boundary(0, -2, 3, 5)


def test_boundary_from_no_points():
    with pytest.raises(ValueError):
        Boundary.from_points([])


def test_boundary_corners(box):
    assert box.corners() == [(0, 0), (10, 0), (10, 10), (0, 10)]


def test_boundary_contains(box):
    assert box.contains((5, 5))
    assert box.contains((10, 0))
    assert not box.contains((10.5, 0))


def test_edge_bits():
    assert [int(edge) for edge in Edge] == [1, 2, 4, 8]
    assert repr(Edge.TOP) == "Edge.TOP"


def test_boundary_coerces_to_float():
    boundary = Boundary(0, 0, 10, 10)
    assert all(isinstance(value, float) for value in boundary.bounds)
    assert all(isinstance(value, float) for value in Boundary.from_points([(1, 2)]).bounds)


def test_boundary_contains_nan():
    assert not Boundary(0, 0, 10, 10).contains((float("nan"), 5))
