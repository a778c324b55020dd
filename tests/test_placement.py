"""Tests for star placement."""

import itertools
import math
import random

import pytest

from twinkle_sky.placement import (
    ExclusionZone,
    PlacementConstraints,
    is_far_enough,
    place_point,
    scatter,
)


def _pairwise_distances(points):
    return [math.dist(a, b) for a, b in itertools.combinations(points, 2)]


def test_scatter_keeps_minimum_separation():
    """With a generous attempt budget every star satisfies the spacing constraint."""
    constraints = PlacementConstraints(min_distance=70, margin=50, max_attempts=1000)
    results = scatter(20, 1280, 720, constraints, random.Random(42))

    assert len(results) == 20
    assert all(result.satisfied for result in results)
    assert min(_pairwise_distances([r.point for r in results])) >= 70


def test_scatter_respects_margin():
    constraints = PlacementConstraints(min_distance=0, margin=50, max_attempts=10)
    results = scatter(100, 400, 300, constraints, random.Random(0))

    for result in results:
        assert 50 <= result.x <= 350
        assert 50 <= result.y <= 250


def test_scatter_keeps_exclusion_zone_clear():
    zone = ExclusionZone(640, 360, 150)
    constraints = PlacementConstraints(min_distance=40, margin=50, max_attempts=1000, exclusion=zone)
    results = scatter(30, 1280, 720, constraints, random.Random(7))

    assert all(result.satisfied for result in results)
    for result in results:
        assert math.hypot(result.x - 640, result.y - 360) >= 150


def test_exhausted_budget_accepts_last_candidate():
    """Impossible constraints still terminate, flagging the relaxed placements."""
    constraints = PlacementConstraints(min_distance=1000, margin=0, max_attempts=5)
    results = scatter(3, 100, 100, constraints, random.Random(3))

    assert len(results) == 3
    assert results[0].satisfied
    assert results[0].attempts == 1
    for result in results[1:]:
        assert not result.satisfied
        assert result.attempts == 5
        assert 0 <= result.x <= 100
        assert 0 <= result.y <= 100


def test_scatter_counts_existing_points():
    constraints = PlacementConstraints(min_distance=1000, margin=0, max_attempts=3)
    results = scatter(1, 100, 100, constraints, random.Random(3), placed=[(50, 50)])

    assert not results[0].satisfied


def test_place_point_shrinks_margin_on_tiny_canvas():
    constraints = PlacementConstraints(min_distance=0, margin=50, max_attempts=1)
    result = place_point(60, 40, [], constraints, random.Random(0))

    assert result.x == pytest.approx(30)
    assert result.y == pytest.approx(20)


def test_is_far_enough_boundary():
    assert is_far_enough(70, 0, [(0, 0)], 70)
    assert not is_far_enough(69.9, 0, [(0, 0)], 70)
    assert is_far_enough(5, 5, [], 70)


def test_exclusion_zone_contains():
    zone = ExclusionZone(0, 0, 10)
    assert zone.contains(5, 5)
    assert not zone.contains(10, 0)


def test_invalid_constraints():
    with pytest.raises(ValueError):
        PlacementConstraints(max_attempts=0)
    with pytest.raises(ValueError):
        PlacementConstraints(min_distance=-1)
