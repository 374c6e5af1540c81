from typing import Iterable

from rectclip.bitcode import intersect, outcode
from rectclip.common import Boundary, OpenPath
from rectclip.utils.utils import as_points, flatten_list


def clip_polyline(
    points: Iterable, boundary: Boundary, result: list[OpenPath] | None = None
) -> list[OpenPath]:
    """
    Cohen-Sutherland line clipping, adapted to handle polylines rather
    than single segments. The polyline is split into a new part each time
    it leaves the boundary.

    :param points: open path of at least two points
    :param boundary: clip window
    :param result: optional list to append the parts to, allows collecting
                   several polylines into one result
    :return: list of parts, each an open path inside the boundary
    """
    if result is None:
        result = []

    points = as_points(points)
    n = len(points)
    part: OpenPath = []
    code_a = outcode(points[0], boundary) if points else 0

    for i in range(1, n):
        a = points[i - 1]
        b = points[i]
        code_b = last_code = outcode(b, boundary)

        while True:
            if not code_a | code_b:
                # accept
                part.append(a)

                if code_b != last_code:
                    # segment went outside
                    part.append(b)

                    if i < n - 1:
                        # start a new line
                        result.append(part)
                        part = []

                elif i == n - 1:
                    part.append(b)
                break

            elif code_a & code_b:
                # trivial reject
                break

            elif code_a:
                # a outside, intersect with clip edge
                a = intersect(a, b, code_a, boundary)
                code_a = outcode(a, boundary)

            else:
                # b outside
                b = intersect(a, b, code_b, boundary)
                code_b = outcode(b, boundary)

        code_a = last_code

    if part:
        result.append(part)

    return result


def clip_polyline_flat(points: Iterable, boundary: Boundary) -> OpenPath:
    """Clip a polyline and concatenate the parts into one sequence"""
    return flatten_list(clip_polyline(points, boundary))
