"""Unit tests for PointSet."""

import math
import random

import pytest

from room_footprint import EmptySetError, InvalidPointError, Point, PointSet


@pytest.mark.unit
def test_add_keeps_points_sorted_by_x():
    rng = random.Random(7)
    point_set = PointSet()
    for _ in range(200):
        point_set.add(
            (rng.uniform(-5, 5), rng.uniform(0, 3), rng.uniform(-5, 5))
        )

    xs = [p.x for p in point_set]
    assert xs == sorted(xs)


@pytest.mark.unit
def test_equal_x_points_keep_insertion_order():
    point_set = PointSet()
    point_set.add(Point(1, 0, 9))
    point_set.add(Point(0, 0, 0))
    point_set.add(Point(1, 0, 3))
    point_set.add(Point(1, 0, 6))

    assert [p.z for p in point_set] == [0.0, 9.0, 3.0, 6.0]


@pytest.mark.unit
def test_duplicate_insert_is_noop():
    point_set = PointSet()
    assert point_set.add(Point(1, 2, 3)) is True
    bounds_before = point_set.bounds()

    assert point_set.add(Point(1, 2, 3)) is False
    assert len(point_set) == 1
    assert point_set.bounds() == bounds_before


@pytest.mark.unit
def test_near_duplicate_with_different_x_is_noop():
    point_set = PointSet()
    point_set.add(Point(1.0, 0.0, 1.0))
    point_set.add(Point(5.0, 0.0, 1.0))

    # Squared distance 2e-6, below the 1e-5 threshold
    assert point_set.add(Point(1.001, 0.0, 1.001)) is False
    assert len(point_set) == 2


@pytest.mark.unit
def test_point_outside_threshold_is_stored():
    point_set = PointSet()
    point_set.add(Point(0, 0, 0))

    # Squared distance 1e-4, above the threshold
    assert point_set.add(Point(0.01, 0, 0)) is True
    assert len(point_set) == 2


@pytest.mark.unit
def test_custom_duplicate_threshold():
    point_set = PointSet(duplicate_distance_sq=1.0)
    point_set.add(Point(0, 0, 0))

    assert point_set.add(Point(0.5, 0.5, 0)) is False
    assert point_set.add(Point(1, 1, 0)) is True


@pytest.mark.unit
def test_invalid_threshold_rejected():
    with pytest.raises(ValueError, match="must be positive"):
        PointSet(duplicate_distance_sq=0)


@pytest.mark.unit
@pytest.mark.parametrize(
    "bad",
    [
        (math.nan, 0, 0),
        (0, math.inf, 0),
        (0, 0, -math.inf),
        ("1", 0, 0),
        (True, 0, 0),
        (1, 2),
    ],
)
def test_invalid_point_leaves_set_unchanged(bad):
    point_set = PointSet()
    point_set.add(Point(1, 1, 1))

    with pytest.raises(InvalidPointError):
        point_set.add(bad)
    assert len(point_set) == 1
    assert point_set[0] == Point(1, 1, 1)


@pytest.mark.unit
def test_add_accepts_dicts_and_sequences():
    point_set = PointSet()
    point_set.add({"x": 1, "y": 2, "z": 3})
    point_set.add([4, 5, 6])

    assert point_set.snapshot() == (Point(1, 2, 3), Point(4, 5, 6))


@pytest.mark.unit
def test_bounds_of_points():
    point_set = PointSet()
    point_set.add(Point(3, -1, 2))
    point_set.add(Point(-2, 4, 7))
    point_set.add(Point(1, 0, -5))

    bounds = point_set.bounds()
    assert bounds.minimum == Point(-2, -1, -5)
    assert bounds.maximum == Point(3, 4, 7)
    assert bounds.size == (5.0, 5.0, 12.0)
    assert bounds.center == Point(0.5, 1.5, 1.0)


@pytest.mark.unit
def test_bounds_single_point_has_zero_size():
    point_set = PointSet()
    point_set.add(Point(2, 3, 4))

    bounds = point_set.bounds()
    assert bounds.size == (0.0, 0.0, 0.0)
    assert bounds.center == Point(2, 3, 4)


@pytest.mark.unit
def test_bounds_of_empty_set_raises():
    with pytest.raises(EmptySetError):
        PointSet().bounds()


@pytest.mark.unit
def test_bounds_match_full_recompute(random_cloud):
    points = list(random_cloud)
    bounds = random_cloud.bounds()

    assert bounds.minimum.x == min(p.x for p in points)
    assert bounds.maximum.z == max(p.z for p in points)
    assert all(bounds.contains(p) for p in points)


@pytest.mark.unit
def test_snapshot_is_independent_of_later_inserts():
    point_set = PointSet()
    point_set.add(Point(0, 0, 0))
    snapshot = point_set.snapshot()
    point_set.add(Point(1, 0, 0))

    assert len(snapshot) == 1
    assert len(point_set) == 2
