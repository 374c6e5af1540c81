"""
The clip window is an axis-aligned rectangle given by its west, south, east
and north extents. Every point is classified against it with a 4-bit code:

            left   mid   right
    top     1001   1000   1010
    mid     0001   0000   0010
    bottom  0101   0100   0110

Left/right and bottom/top are mutually exclusive pairs, so a point is either
inside (0000), beside one edge or beyond a corner.
"""

from dataclasses import dataclass
from enum import IntFlag
from typing import Iterable, NamedTuple, TypeAlias

import numpy as np


class Edge(IntFlag):
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8

    def __repr__(self):
        return f"{self.__class__.__name__}.{self._name_}"


class Point(NamedTuple):
    x: float
    y: float


Path: TypeAlias = list[Point]
OpenPath = Path
ClosedPath = Path


@dataclass(frozen=True)
class Boundary:
    west: float
    south: float
    east: float
    north: float

    def __post_init__(self):
        for name in ("west", "south", "east", "north"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def from_bounds(cls, bounds: Iterable[float]):
        """
        Build a boundary from a (minx, miny, maxx, maxy) sequence, the order
        used by shapely's ``bounds`` and most map tooling.
        """
        minx, miny, maxx, maxy = bounds
        return cls(minx, miny, maxx, maxy)

    @classmethod
    def from_points(cls, points: Iterable[tuple[float, float]]):
        array = np.asarray(list(points), dtype=float)
        if array.ndim != 2 or array.shape[0] == 0 or array.shape[1] < 2:
            raise ValueError("Boundary requires at least one (x, y) point")
        minx, miny = array[:, :2].min(axis=0)
        maxx, maxy = array[:, :2].max(axis=0)
        return cls(minx, miny, maxx, maxy)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return self.west, self.south, self.east, self.north

    def corners(self) -> ClosedPath:
        return [
            Point(self.west, self.south),
            Point(self.east, self.south),
            Point(self.east, self.north),
            Point(self.west, self.north),
        ]

    def contains(self, point: tuple[float, float]) -> bool:
        x, y = point
        return self.west <= x <= self.east and self.south <= y <= self.north
