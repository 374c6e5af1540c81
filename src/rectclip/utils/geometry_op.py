import logging
from typing import Literal

import pyclipper as pc
import shapely
from shapely.geometry.base import BaseGeometry

from rectclip.bitcode import outcode
from rectclip.common import Boundary, ClosedPath, OpenPath, Path
from rectclip.polygon import clip_polygon
from rectclip.polyline import clip_polyline
from rectclip.utils.utils import as_points, flatten_list

logger = logging.getLogger(__name__)

Engine = Literal["lineclip", "clipper"]

# Decimal digits kept when scaling coordinates to clipper integers
DEFAULT_PRECISION = 9


def tuplify_path(path: Path):
    return [tuple(point) for point in path]


def open_ring(coords) -> ClosedPath:
    ring = as_points(coords)
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring = ring[:-1]
    return ring


def scale_to_clipper(path: Path, precision: int = DEFAULT_PRECISION):
    # noinspection PyArgumentList
    return pc.scale_to_clipper(tuplify_path(path), 10**precision)


def scale_from_clipper(path, precision: int = DEFAULT_PRECISION) -> Path:
    # noinspection PyArgumentList
    return as_points(pc.scale_from_clipper(path, 10**precision))


def prepare_boundary_op(
    subjects: list[Path], boundary: Boundary, closed: bool, precision: int
) -> pc.Pyclipper:
    clipper = pc.Pyclipper()
    scaled_subjects = [scale_to_clipper(subject, precision) for subject in subjects]
    clipper.AddPaths(scaled_subjects, pc.PT_SUBJECT, closed)
    clipper.AddPath(scale_to_clipper(boundary.corners(), precision), pc.PT_CLIP, True)
    return clipper


def clipper_clip_polygon(
    path: ClosedPath, boundary: Boundary, precision: int = DEFAULT_PRECISION
) -> list[ClosedPath]:
    """
    Intersect a ring with the boundary rectangle using clipper.
    Unlike `clip_polygon` a concave ring may split into several rings.
    """
    clipper = prepare_boundary_op([as_points(path)], boundary, True, precision)
    return [
        scale_from_clipper(result, precision)
        for result in clipper.Execute(pc.CT_INTERSECTION, pc.PFT_EVENODD)
    ]


def clipper_clip_polyline(
    path: OpenPath, boundary: Boundary, precision: int = DEFAULT_PRECISION
) -> list[OpenPath]:
    clipper = prepare_boundary_op([as_points(path)], boundary, False, precision)
    poly_tree = clipper.Execute2(pc.CT_INTERSECTION)
    return [
        scale_from_clipper(result, precision)
        for result in pc.OpenPathsFromPolyTree(poly_tree)
    ]


def poly_tree_to_polygons(
    poly_tree: pc.PyPolyNode, precision: int
) -> list[shapely.Polygon]:
    polygons = []
    nodes = list(poly_tree.Childs)
    while nodes:
        node = nodes.pop(0)
        shell = scale_from_clipper(node.Contour, precision)
        holes = []
        for child in node.Childs:
            holes.append(scale_from_clipper(child.Contour, precision))
            # islands inside holes become polygons of their own
            nodes += child.Childs
        polygons.append(shapely.Polygon(shell, holes))
    return polygons


def _clip_points(geometry: BaseGeometry, boundary: Boundary) -> BaseGeometry:
    points = [
        point
        for point in as_points(shapely.get_coordinates(geometry))
        if not outcode(point, boundary)
    ]
    if isinstance(geometry, shapely.MultiPoint):
        return shapely.MultiPoint(points)
    if points:
        return shapely.Point(points[0])
    return shapely.Point()


def _lines_to_geometry(parts: list[OpenPath]) -> BaseGeometry:
    lines = []
    for part in parts:
        if len(part) < 2:
            logger.debug("Dropping clipped line part with %d point(s)", len(part))
            continue
        lines.append(part)

    if not lines:
        return shapely.LineString()
    if len(lines) == 1:
        return shapely.LineString(lines[0])
    return shapely.MultiLineString(lines)


def _clip_line_string(
    geometry: shapely.LineString, boundary: Boundary, engine: Engine
) -> BaseGeometry:
    if geometry.is_empty:
        return shapely.LineString()
    if engine == "clipper":
        return _lines_to_geometry(clipper_clip_polyline(geometry.coords, boundary))
    return _lines_to_geometry(clip_polyline(geometry.coords, boundary))


def _clip_ring(coords, boundary: Boundary) -> ClosedPath | None:
    ring = clip_polygon(open_ring(coords), boundary)
    if len(ring) < 3:
        if ring:
            logger.debug("Dropping clipped ring with %d point(s)", len(ring))
        return None
    return ring


def _clip_polygon(
    geometry: shapely.Polygon, boundary: Boundary, engine: Engine
) -> BaseGeometry:
    if geometry.is_empty:
        return shapely.Polygon()

    if engine == "clipper":
        rings = [open_ring(geometry.exterior.coords)] + [
            open_ring(interior.coords) for interior in geometry.interiors
        ]
        clipper = prepare_boundary_op(rings, boundary, True, DEFAULT_PRECISION)
        poly_tree = clipper.Execute2(pc.CT_INTERSECTION, pc.PFT_EVENODD)
        polygons = poly_tree_to_polygons(poly_tree, DEFAULT_PRECISION)
        if not polygons:
            return shapely.Polygon()
        if len(polygons) == 1:
            return polygons[0]
        return shapely.MultiPolygon(polygons)

    shell = _clip_ring(geometry.exterior.coords, boundary)
    if shell is None:
        if geometry.interiors:
            logger.warning("Polygon exterior clipped away, dropping interiors")
        return shapely.Polygon()

    holes = [
        hole
        for hole in (_clip_ring(interior.coords, boundary) for interior in geometry.interiors)
        if hole is not None
    ]
    return shapely.Polygon(shell, holes)


def _flatten_parts(geometry: BaseGeometry) -> list[BaseGeometry]:
    if isinstance(geometry, (shapely.MultiLineString, shapely.MultiPolygon)):
        return list(geometry.geoms)
    return [geometry]


def clip_geometry(
    geometry: BaseGeometry, boundary: Boundary, engine: Engine = "lineclip"
) -> BaseGeometry:
    """
    Clip a shapely geometry to the boundary.

    :param geometry: any shapely geometry of points, lines or polygons
    :param boundary: clip window
    :param engine: "lineclip" for the Cohen-Sutherland / Sutherland-Hodgman
                   clippers, "clipper" for pyclipper boolean intersection
    :return: geometry of the same family, possibly empty
    """
    if engine not in ("lineclip", "clipper"):
        raise ValueError("Unknown engine")

    if isinstance(geometry, (shapely.Point, shapely.MultiPoint)):
        return _clip_points(geometry, boundary)

    if isinstance(geometry, shapely.LinearRing):
        # A ring is a closed line, clip it as a polyline
        return _clip_line_string(shapely.LineString(geometry.coords), boundary, engine)

    if isinstance(geometry, shapely.LineString):
        return _clip_line_string(geometry, boundary, engine)

    if isinstance(geometry, shapely.Polygon):
        return _clip_polygon(geometry, boundary, engine)

    if isinstance(geometry, shapely.MultiLineString):
        parts = flatten_list(
            [
                _flatten_parts(_clip_line_string(line, boundary, engine))
                for line in geometry.geoms
            ]
        )
        return shapely.MultiLineString([part for part in parts if not part.is_empty])

    if isinstance(geometry, shapely.MultiPolygon):
        parts = flatten_list(
            [
                _flatten_parts(_clip_polygon(polygon, boundary, engine))
                for polygon in geometry.geoms
            ]
        )
        return shapely.MultiPolygon([part for part in parts if not part.is_empty])

    if isinstance(geometry, shapely.GeometryCollection):
        members = [clip_geometry(member, boundary, engine) for member in geometry.geoms]
        return shapely.GeometryCollection(
            [member for member in members if not member.is_empty]
        )

    raise ValueError(f"Unsupported geometry {type(geometry)}")
