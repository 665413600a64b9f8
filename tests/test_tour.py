import numpy as np
import pytest

from elasticnet.solvers.tour import ring_length, tour_length, tour_order

SQUARE = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])


def test_order_follows_ring() -> None:
    # Cities listed out of ring order
    cities = SQUARE[[2, 0, 3, 1]]
    order = tour_order(cities, SQUARE * 0.98 + 0.01)
    assert [cities[i].tolist() for i in order] == SQUARE.tolist()


def test_cities_sharing_a_point_follow_the_tangent() -> None:
    ring = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
    # Both close to ring point 1; the tangent there points from (0,0) to (1,1)
    cities = np.array([[1.05, 0.1], [0.95, -0.1]])
    assert tour_order(cities, ring) == [1, 0]


def test_order_is_a_permutation() -> None:
    rng = np.random.default_rng(0)
    cities = rng.random((25, 2))
    ring = rng.random((60, 2))
    assert sorted(tour_order(cities, ring)) == list(range(25))


def test_empty_cities() -> None:
    assert tour_order(np.empty((0, 2)), SQUARE) == []


def test_tour_length_closes_the_loop() -> None:
    assert tour_length(SQUARE, [0, 1, 2, 3]) == pytest.approx(4.0)
    assert tour_length(SQUARE, [0, 2, 1, 3]) == pytest.approx(2.0 + 2.0 * np.sqrt(2.0))
    assert tour_length(SQUARE, [0]) == 0.0


def test_ring_length() -> None:
    assert ring_length(SQUARE) == pytest.approx(4.0)
    assert ring_length(SQUARE[:1]) == 0.0
