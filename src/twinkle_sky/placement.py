"""Scatter stars across the canvas under spacing and exclusion constraints."""

import logging
import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .constants import MIN_STAR_DISTANCE, PLACEMENT_MARGIN, PLACEMENT_MAX_ATTEMPTS

logger = logging.getLogger(__name__)

Point = tuple[float, float]


@dataclass(frozen=True)
class ExclusionZone:
    """Circle kept clear of stars, e.g. around a title overlay."""

    x: float
    y: float
    radius: float

    def contains(self, x: float, y: float) -> bool:
        return math.hypot(x - self.x, y - self.y) < self.radius


@dataclass(frozen=True)
class PlacementConstraints:
    min_distance: float = MIN_STAR_DISTANCE
    margin: float = PLACEMENT_MARGIN
    max_attempts: int = PLACEMENT_MAX_ATTEMPTS
    exclusion: ExclusionZone | None = None

    def __post_init__(self) -> None:
        if self.min_distance < 0:
            raise ValueError("min_distance must not be negative")
        if self.margin < 0:
            raise ValueError("margin must not be negative")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")


@dataclass(frozen=True)
class PlacementResult:
    x: float
    y: float
    attempts: int
    satisfied: bool

    @property
    def point(self) -> Point:
        return (self.x, self.y)


def is_far_enough(x: float, y: float, placed: Iterable[Point], min_distance: float) -> bool:
    """Check that (x, y) is at least ``min_distance`` from every placed point."""
    return all(math.hypot(px - x, py - y) >= min_distance for px, py in placed)


def _satisfies(x: float, y: float, placed: Sequence[Point], constraints: PlacementConstraints) -> bool:
    if constraints.exclusion is not None and constraints.exclusion.contains(x, y):
        return False
    return is_far_enough(x, y, placed, constraints.min_distance)


def _sample_range(extent: float, margin: float) -> tuple[float, float]:
    # Shrink the margin on canvases too small to honour it
    margin = min(margin, extent / 2)
    return margin, extent - margin


def place_point(
    width: float,
    height: float,
    placed: Sequence[Point],
    constraints: PlacementConstraints,
    rng: random.Random,
) -> PlacementResult:
    """
    Pick one position that keeps clear of existing points and the exclusion zone.

    Candidates are drawn uniformly inside the canvas inset by the margin. The
    first candidate passing both checks wins. When the attempt budget runs out
    the last candidate is accepted anyway, so placement always terminates.

    Args:
        width: Canvas width
        height: Canvas height
        placed: Points already accepted
        constraints: Spacing, margin, attempt budget and exclusion zone
        rng: Random source (seed it for reproducible layouts)

    Returns:
        The accepted position and whether it satisfied the constraints
    """
    x_low, x_high = _sample_range(width, constraints.margin)
    y_low, y_high = _sample_range(height, constraints.margin)

    x = y = 0.0
    for attempt in range(1, constraints.max_attempts + 1):
        x = rng.uniform(x_low, x_high)
        y = rng.uniform(y_low, y_high)
        if _satisfies(x, y, placed, constraints):
            return PlacementResult(x=x, y=y, attempts=attempt, satisfied=True)

    logger.debug(
        "No position satisfied constraints after %d attempts; accepting (%.1f, %.1f)",
        constraints.max_attempts,
        x,
        y,
    )
    return PlacementResult(x=x, y=y, attempts=constraints.max_attempts, satisfied=False)


def scatter(
    count: int,
    width: float,
    height: float,
    constraints: PlacementConstraints,
    rng: random.Random,
    placed: Iterable[Point] = (),
) -> list[PlacementResult]:
    """Place ``count`` points one at a time against the growing accepted set."""
    accepted: list[Point] = list(placed)
    results: list[PlacementResult] = []
    for _ in range(count):
        result = place_point(width, height, accepted, constraints, rng)
        accepted.append(result.point)
        results.append(result)
    return results
