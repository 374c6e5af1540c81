from rectclip.bitcode import intersect, outcode
from rectclip.common import Boundary, Edge, Point
from rectclip.polygon import clip_polygon
from rectclip.polyline import clip_polyline, clip_polyline_flat
from rectclip.utils.geometry_op import clip_geometry

lineclip = clip_polyline

__all__ = [
    "Boundary",
    "Edge",
    "Point",
    "outcode",
    "intersect",
    "clip_polyline",
    "clip_polyline_flat",
    "clip_polygon",
    "clip_geometry",
    "lineclip",
]
