from rectclip.common import Boundary, Edge, Point


def outcode(point: tuple[float, float], boundary: Boundary) -> int:
    """
    Classify a point against the boundary, see ``rectclip.common``.
    Points lying exactly on an edge count as inside.
    """
    x, y = point
    code = 0

    if x < boundary.west:
        code |= Edge.LEFT
    elif x > boundary.east:
        code |= Edge.RIGHT

    if y < boundary.south:
        code |= Edge.BOTTOM
    elif y > boundary.north:
        code |= Edge.TOP

    return int(code)


def intersect(
    a: tuple[float, float], b: tuple[float, float], edge: int, boundary: Boundary
) -> Point:
    """
    Intersect segment a-b with the line of one boundary edge.

    When ``edge`` has several bits set the first one in the order
    top, bottom, right, left wins. The segment must not be parallel
    to the chosen edge.

    :param a: segment start
    :param b: segment end
    :param edge: outcode or single Edge bit
    :param boundary: clip window
    :return: new point on the edge line
    """
    ax, ay = a
    bx, by = b

    if edge & Edge.TOP:
        return Point(ax + (bx - ax) * (boundary.north - ay) / (by - ay), boundary.north)
    elif edge & Edge.BOTTOM:
        return Point(ax + (bx - ax) * (boundary.south - ay) / (by - ay), boundary.south)
    elif edge & Edge.RIGHT:
        return Point(boundary.east, ay + (by - ay) * (boundary.east - ax) / (bx - ax))
    elif edge & Edge.LEFT:
        return Point(boundary.west, ay + (by - ay) * (boundary.west - ax) / (bx - ax))

    raise ValueError(f"Edge code {edge} has no boundary bit set")
