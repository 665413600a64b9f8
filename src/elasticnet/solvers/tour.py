"""
Tour extraction from an Elastic Net ring.

The ring itself is only an approximation of a tour. These helpers read the
visiting order of the cities off the ring and measure the resulting tour.
"""
from __future__ import annotations

from typing import List, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def tour_order(
    cities: npt.NDArray[np.float64],
    ring: npt.NDArray[np.float64],
) -> List[int]:
    """
    Order the cities by the ring point they are closest to.

    Cities sharing a nearest ring point are ordered by their projection on
    the local ring tangent, then by their own index.

    Args:
        cities: Array of shape (n_cities, 2).
        ring: Array of shape (n_points, 2), in ring order.

    Returns:
        A permutation of range(n_cities).
    """
    cities = np.asarray(cities, dtype=np.float64)
    ring = np.asarray(ring, dtype=np.float64)
    if len(cities) == 0:
        return []

    deltas = cities[:, np.newaxis, :] - ring[np.newaxis, :, :]
    dist2 = np.einsum("ijk,ijk->ij", deltas, deltas)
    nearest = dist2.argmin(axis=1)

    tangents = np.roll(ring, -1, axis=0) - np.roll(ring, 1, axis=0)
    offsets = cities - ring[nearest]
    projection = np.einsum("ij,ij->i", offsets, tangents[nearest])

    order = np.lexsort((np.arange(len(cities)), projection, nearest))
    return [int(i) for i in order]


def tour_length(cities: npt.NDArray[np.float64], order: Sequence[int]) -> float:
    """Length of the closed tour visiting `cities` in `order`."""
    if len(order) < 2:
        return 0.0
    path = np.asarray(cities, dtype=np.float64)[list(order)]
    return ring_length(path)


def ring_length(ring: npt.NDArray[np.float64]) -> float:
    """Perimeter of a closed polyline."""
    ring = np.asarray(ring, dtype=np.float64)
    if len(ring) < 2:
        return 0.0
    segments = np.roll(ring, -1, axis=0) - ring
    return float(np.linalg.norm(segments, axis=1).sum())
