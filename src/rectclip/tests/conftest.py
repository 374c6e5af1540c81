import pytest

from rectclip.bitcode import outcode
from rectclip.common import Boundary


@pytest.fixture
def box():
    return Boundary(0, 0, 10, 10)


@pytest.fixture
def example_box():
    return Boundary(5, -5, 15, 15)


def grow(boundary: Boundary, tolerance=1e-9) -> Boundary:
    return Boundary(
        boundary.west - tolerance,
        boundary.south - tolerance,
        boundary.east + tolerance,
        boundary.north + tolerance,
    )


def all_inside(points, boundary: Boundary, tolerance=1e-9) -> bool:
    grown = grow(boundary, tolerance)
    return all(outcode(point, grown) == 0 for point in points)
