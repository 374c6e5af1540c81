import logging

import shapely

from rectclip import Boundary, clip_geometry, clip_polygon, clip_polyline


def demo():
    view = Boundary(5, -5, 15, 15)

    road = [(0, 0), (10, 0), (10, 10), (20, 10)]
    print("road", clip_polyline(road, view))

    lake = [(0, 0), (0, 1), (1, 1), (1, 0)]
    print("lake", clip_polygon(lake, Boundary(0.5, 0, 2, 2)))


def demo2():
    # Two prongs of a concave parcel, one ring with lineclip, two with clipper
    parcel = shapely.Polygon(
        [(0, 0), (30, 0), (30, 30), (20, 30), (20, 10), (10, 10), (10, 30), (0, 30)]
    )
    view = Boundary.from_bounds((-5, 20, 35, 40))
    print(clip_geometry(parcel, view).wkt)
    print(clip_geometry(parcel, view, engine="clipper").wkt)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    demo()
    demo2()
