from typing import Callable, List, Protocol, runtime_checkable
import numpy as np


@runtime_checkable
class KDPoint(Protocol):
    def dimensions(self) -> int:
        ...

    def value_along_axis(self, axis: int):
        ...


# Signed per-axis delta: negative means a comes before b on that axis.
# Squared and summed over every axis it gives the squared distance.
DistanceCalculator = Callable[[KDPoint, KDPoint, int], float]


class ArrayPoint:
    def __init__(self, coords):
        coords = np.asarray(coords, dtype=float)
        if coords.ndim != 1 or coords.size == 0:
            raise ValueError(f"ArrayPoint needs a non-empty 1-D array, got shape {coords.shape}")
        self.coords = coords

    def dimensions(self) -> int:
        return self.coords.shape[0]

    def value_along_axis(self, axis: int) -> float:
        return self.coords[axis]

    def __eq__(self, other):
        if not isinstance(other, ArrayPoint):
            return NotImplemented
        return np.array_equal(self.coords, other.coords)

    def __hash__(self):
        return hash(self.coords.tobytes())

    def __repr__(self):
        return f"ArrayPoint({self.coords.tolist()})"


def as_points(array) -> List[ArrayPoint]:
    '''Wrap the rows of an (n, k) array as points. A 1-D array is n points of dimension 1.'''
    array = np.asarray(array, dtype=float)
    if array.ndim == 1:
        array = array[:, None]
    return [ArrayPoint(row) for row in array]


def euclidean_delta(a: KDPoint, b: KDPoint, axis: int) -> float:
    return float(a.value_along_axis(axis) - b.value_along_axis(axis))


def squared_distance(a: KDPoint, b: KDPoint, dst_fn: DistanceCalculator) -> float:
    total = 0.0
    for axis in range(a.dimensions()):
        delta = dst_fn(a, b, axis)
        total += delta * delta
    return total
