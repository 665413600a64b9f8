"""
Geometric Primitives for the Elastic Net.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union, TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

PointLike = Union["Point", Tuple[float, float], Sequence[float]]


@dataclass(frozen=True)
class Point:
    """An immutable point in the plane."""
    x: float
    y: float

    @classmethod
    def from_tuple(cls, value: PointLike) -> Point:
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


def points_to_array(points: Iterable[PointLike]) -> npt.NDArray[np.float64]:
    """
    Convert points (or (x, y) pairs) into a fresh (n, 2) float array.

    Args:
        points: Iterable of Point instances or coordinate pairs.

    Returns:
        Array of shape (n, 2). An empty input gives shape (0, 2).
    """
    coords = [Point.from_tuple(p).to_tuple() for p in points]
    if not coords:
        return np.empty((0, 2), dtype=np.float64)
    return np.array(coords, dtype=np.float64)


def array_to_points(array: npt.NDArray[np.float64]) -> List[Point]:
    """Convert an (n, 2) array into a list of Points (values are copied)."""
    arr = np.asarray(array, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected shape (N, 2), got {arr.shape}.")
    return [Point(float(x), float(y)) for x, y in arr]


def centroid(points: npt.NDArray[np.float64]) -> Point:
    """Arithmetic mean of an (n, 2) array of coordinates."""
    if len(points) == 0:
        raise ValueError("Cannot compute the centroid of an empty point set.")
    cx, cy = np.mean(points, axis=0)
    return Point(float(cx), float(cy))


def evenly_spaced_angles(n: int) -> npt.NDArray[np.float64]:
    """
    n angles starting at 0 with a constant step of 2*pi/n.
    The full turn (2*pi) itself is excluded, so no two points coincide.
    """
    return np.arange(n, dtype=np.float64) * (2.0 * math.pi / n)


def regular_polygon(center: Point, radius: float, n: int) -> npt.NDArray[np.float64]:
    """
    Vertices of a regular n-gon around `center`.

    Args:
        center: Center of the circumscribed circle.
        radius: Circumradius.
        n: Number of vertices (at least 1).

    Returns:
        Array of shape (n, 2), counter-clockwise from angle 0.
    """
    if n < 1:
        raise ValueError(f"A polygon needs at least one vertex, got {n}.")
    thetas = evenly_spaced_angles(n)
    return np.column_stack((
        center.x + radius * np.cos(thetas),
        center.y + radius * np.sin(thetas),
    ))


def random_cities(n: int, seed: Optional[int] = None) -> List[Point]:
    """n cities drawn uniformly from the unit square."""
    rng = np.random.default_rng(seed)
    return array_to_points(rng.random((n, 2)))
