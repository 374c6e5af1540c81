import itertools
from typing import Iterable, List, TypeVar

import numpy as np

from rectclip.common import Path, Point

T = TypeVar("T")


def as_points(points: Iterable) -> Path:
    """
    Normalise a sequence of (x, y) pairs, or an array-like of shape (N, >=2),
    into a list of Points. Extra columns such as z are dropped.
    """
    if isinstance(points, np.ndarray):
        array = points.astype(float)
    else:
        points = list(points)
        if not points:
            return []
        array = np.asarray(points, dtype=float)

    if array.size == 0:
        return []

    if array.ndim != 2 or array.shape[1] < 2:
        raise ValueError(f"Expected (N, 2) coordinates, got shape {array.shape}")

    return [Point(float(x), float(y)) for x, y in array[:, :2]]


def flatten_list(lists: List[List[T]]) -> List[T]:
    return list(itertools.chain(*lists))
