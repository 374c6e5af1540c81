from typing import Iterable

from rectclip.bitcode import intersect, outcode
from rectclip.common import Boundary, ClosedPath, Edge
from rectclip.utils.utils import as_points

# Pass order for Sutherland-Hodgman, not the same as the intersect priority
CLIP_PASSES = (Edge.LEFT, Edge.RIGHT, Edge.BOTTOM, Edge.TOP)


def clip_polygon(points: Iterable, boundary: Boundary) -> ClosedPath:
    """
    Sutherland-Hodgman polygon clipping. The ring is clipped against each
    side of the boundary in turn.

    :param points: implicitly closed ring of at least three points
    :param boundary: clip window
    :return: clipped ring, empty if nothing remains inside
    """
    ring: ClosedPath = as_points(points)

    for edge in CLIP_PASSES:
        if not ring:
            break

        clipped: ClosedPath = []
        prev = ring[-1]
        prev_inside = not outcode(prev, boundary) & edge

        for p in ring:
            inside = not outcode(p, boundary) & edge

            # if segment goes through the clip window, add an intersection
            if inside != prev_inside:
                clipped.append(intersect(prev, p, edge, boundary))

            if inside:
                clipped.append(p)

            prev = p
            prev_inside = inside

        ring = clipped

    return ring
