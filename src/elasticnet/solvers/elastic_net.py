from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, TYPE_CHECKING

import numpy as np

from elasticnet.config import K_FLOOR
from elasticnet.model.geometry import Point, PointLike, array_to_points, centroid, points_to_array, regular_polygon
from elasticnet.model.params import ElasticNetParams
from elasticnet.solvers.tour import tour_order

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def ring_size(num_cities: int, num_points_factor: float) -> int:
    """Number of ring points, rounded half up, never less than one."""
    return max(1, int(math.floor(num_points_factor * num_cities + 0.5)))


class ElasticNetSolver:
    """
    Elastic Net approximation of a closed Euclidean TSP tour.

    A ring of candidate points is pulled towards the cities by a gaussian
    weighted attraction force and kept short and smooth by a tension force.
    Each call to `advance` performs exactly one iteration.
    """

    def __init__(
        self,
        cities: Sequence[PointLike],
        params: ElasticNetParams,
    ) -> None:
        """
        Place the initial ring around the centroid of the cities.

        Args:
            cities: Non-empty sequence of cities (Points or (x, y) pairs).
            params: Parameter set. The solver works on its own copy, which
                is exposed as `params` and may be modified between iterations.
        """
        self._cities = points_to_array(cities)
        if len(self._cities) == 0:
            raise ValueError("The elastic net needs at least one city.")

        self._params = params.copy()
        self._iteration = 0
        self._k = float(self._params.initial_k)
        self._gaussian_denominator = -2.0 * self._k ** 2
        self._worst_distance: Optional[float] = None

        n_points = ring_size(self.num_cities, self._params.num_points_factor)
        self._points = regular_polygon(centroid(self._cities), self._params.radius, n_points)

        # Scratch storage, (num_cities, num_points[, 2])
        self._deltas = np.zeros((self.num_cities, n_points, 2), dtype=np.float64)
        self._dist2 = np.zeros((self.num_cities, n_points), dtype=np.float64)
        self._weights = np.zeros((self.num_cities, n_points), dtype=np.float64)

    # ---------------------------------------------------------------- state

    @property
    def params(self) -> ElasticNetParams:
        return self._params

    @property
    def cities(self) -> npt.NDArray[np.float64]:
        return self._cities.copy()

    @property
    def points(self) -> npt.NDArray[np.float64]:
        return self._points.copy()

    @property
    def num_cities(self) -> int:
        return len(self._cities)

    @property
    def num_points(self) -> int:
        return len(self._points)

    @property
    def iteration(self) -> int:
        return self._iteration

    @property
    def k(self) -> float:
        return self._k

    @property
    def worst_distance(self) -> Optional[float]:
        """Largest nearest-point distance over all cities, None before the first iteration."""
        return self._worst_distance

    @property
    def weights(self) -> Optional[npt.NDArray[np.float64]]:
        if self._iteration == 0:
            return None
        return self._weights.copy()

    # ----------------------------------------------------------- iteration

    def advance(self) -> bool:
        """
        Perform one iteration of the Elastic Net.

        Returns:
            True once the worst city distance dropped below epsilon or the
            iteration cap was exceeded, False otherwise.
        """
        self._update_k()
        self._update_geometry()
        self._update_worst_distance()
        self._update_weights()
        self._update_points()

        self._iteration += 1
        return self._done()

    def solution(self) -> List[Point]:
        """Snapshot of the ring as a list of Points."""
        return array_to_points(self._points)

    def city_points(self) -> List[Point]:
        return array_to_points(self._cities)

    def tour(self) -> List[int]:
        """City indices in the order the ring currently visits them."""
        return tour_order(self._cities, self._points)

    def _done(self) -> bool:
        return (
            self._worst_distance < self._params.epsilon
            or self._iteration > self._params.max_num_iter
        )

    def _update_k(self) -> None:
        if self._iteration % self._params.k_update_period == 0:
            self._k = max(K_FLOOR, self._params.k_alpha * self._k)
            self._gaussian_denominator = -2.0 * self._k ** 2
            logger.debug(f"Iteration {self._iteration}: k decayed to {self._k:.5f}")

    def _update_geometry(self) -> None:
        # delta[i, j] points from ring point j to city i
        self._deltas = self._cities[:, np.newaxis, :] - self._points[np.newaxis, :, :]
        self._dist2 = np.einsum("ijk,ijk->ij", self._deltas, self._deltas)

    def _update_worst_distance(self) -> None:
        closest = self._dist2.min(axis=1)
        self._worst_distance = float(np.sqrt(closest.max()))

    def _update_weights(self) -> None:
        weights = np.exp(self._dist2 / self._gaussian_denominator)
        sums = weights.sum(axis=1, keepdims=True)

        # A city whose weights all underflowed contributes nothing
        self._weights = np.divide(
            weights, sums,
            out=np.zeros_like(weights),
            where=sums > 0.0,
        )

    def _update_points(self) -> None:
        dist_force = np.einsum("ij,ijk->jk", self._weights, self._deltas)

        # Discrete ring laplacian: previous + next - 2 * current
        length_force = (
            np.roll(self._points, 1, axis=0)
            + np.roll(self._points, -1, axis=0)
            - 2.0 * self._points
        )

        alpha = self._params.alpha
        beta = self._params.beta
        self._points = self._points + alpha * dist_force + beta * self._k * length_force
