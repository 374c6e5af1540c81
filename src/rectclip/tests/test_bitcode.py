import pytest

from rectclip.bitcode import intersect, outcode
from rectclip.common import Edge, Point


@pytest.mark.parametrize(
    "point, code",
    [
        ((5, 5), 0),
        ((-1, 5), 1),
        ((11, 5), 2),
        ((5, -1), 4),
        ((5, 11), 8),
        ((-1, -1), 5),
        ((11, -1), 6),
        ((-1, 11), 9),
        ((11, 11), 10),
    ],
)
def test_outcode_regions(box, point, code):
    assert outcode(point, box) == code


def test_outcode_on_edge_is_inside(box):
    assert outcode((0, 5), box) == 0
    assert outcode((10, 5), box) == 0
    assert outcode((5, 0), box) == 0
    assert outcode((5, 10), box) == 0
    assert outcode((10, 10), box) == 0
    assert outcode((0, 0), box) == 0


def test_outcode_accepts_points(box):
    assert outcode(Point(12, 3), box) == Edge.RIGHT


def test_intersect_single_edges(box):
    assert intersect((5, 5), (5, 15), Edge.TOP, box) == (5, 10)
    assert intersect((5, 5), (5, -5), Edge.BOTTOM, box) == (5, 0)
    assert intersect((5, 5), (15, 5), Edge.RIGHT, box) == (10, 5)
    assert intersect((5, 5), (-5, 5), Edge.LEFT, box) == (0, 5)


def test_intersect_interpolates(box):
    p = intersect((0, 5), (20, 15), Edge.RIGHT, box)
    assert isinstance(p, Point)
    assert p.x == 10
    assert p.y == pytest.approx(10)

    p = intersect((2, 8), (6, 12), Edge.TOP, box)
    assert p == (pytest.approx(4), 10)


def test_intersect_corner_prefers_top(box):
    # top-right corner code, top is tested first
    p = intersect((5, 5), (15, 20), Edge.TOP | Edge.RIGHT, box)
    assert p.y == 10
    assert p.x == pytest.approx(5 + 10 / 3)

    # bottom-left corner code, bottom is tested first
    p = intersect((5, 5), (-10, -1), Edge.BOTTOM | Edge.LEFT, box)
    assert p.y == 0
    assert p.x == pytest.approx(5 - 15 * 5 / 6)


def test_intersect_without_edge_bit(box):
    with pytest.raises(ValueError):
        intersect((5, 5), (15, 5), 0, box)


def test_intersect_parallel_segment(box):
    with pytest.raises(ZeroDivisionError):
        intersect((0, 5), (10, 5), Edge.TOP, box)
