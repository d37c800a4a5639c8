"""Shared pytest fixtures for room_footprint tests."""

import random
from typing import List

import pytest

from room_footprint import FootprintConfig, Point, PointSet, RoomFinder


def pytest_configure(config):
    """Add custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")


@pytest.fixture
def config() -> FootprintConfig:
    """Default thresholds, independent of the environment."""
    return FootprintConfig(_env_file=None)


@pytest.fixture
def finder(config) -> RoomFinder:
    return RoomFinder(config=config)


@pytest.fixture
def room_corners() -> List[Point]:
    """Corners of a 10 x 5 room plus one interior sample."""
    return [
        Point(0, 0, 0),
        Point(10, 0, 0),
        Point(10, 0, 5),
        Point(0, 0, 5),
        Point(5, 0, 2.5),
    ]


@pytest.fixture
def random_cloud() -> PointSet:
    """A seeded cloud of floor samples inside a rotated rectangle."""
    rng = random.Random(1234)
    point_set = PointSet()
    for _ in range(300):
        u = rng.uniform(-4.0, 4.0)
        v = rng.uniform(-1.5, 1.5)
        # Rotate by roughly 30 degrees and shift away from the origin
        x = 2.0 + 0.866 * u - 0.5 * v
        z = -3.0 + 0.5 * u + 0.866 * v
        point_set.add(Point(x, rng.uniform(-0.05, 0.05), z))
    return point_set
