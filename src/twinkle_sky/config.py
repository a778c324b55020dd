"""Starfield configuration with documented defaults."""

import dataclasses
from dataclasses import dataclass

from .constants import (
    BACKGROUND_STAR_COUNT,
    BACKGROUND_STYLES,
    BURST_PARTICLE_COUNT,
    CLICK_RADIUS,
    CONSTELLATION_DISTANCE,
    CONSTELLATION_MEMBERS,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    EXCLUSION_RADIUS,
    IMAGE_COUNT,
    INITIAL_SHOOTING_STARS,
    MAX_VOLUME,
    MIN_STAR_DISTANCE,
    PARTICLE_LIFE,
    PLACEMENT_MARGIN,
    PLACEMENT_MAX_ATTEMPTS,
    SHOOTING_STAR_LIFESPAN,
    SHOOTING_STAR_POLICIES,
    SHOOTING_STAR_SPAWN_PROBABILITY,
    TWINKLE_FLOOR,
    VOLUME_FADE_RATE,
)
from .placement import ExclusionZone, PlacementConstraints


@dataclass(frozen=True)
class StarfieldConfig:
    """Every tunable of the starfield in one place."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    image_count: int = IMAGE_COUNT
    background_star_count: int = BACKGROUND_STAR_COUNT
    min_star_distance: float = MIN_STAR_DISTANCE
    placement_margin: float = PLACEMENT_MARGIN
    placement_max_attempts: int = PLACEMENT_MAX_ATTEMPTS
    exclusion_radius: float = EXCLUSION_RADIUS  # 0 disables the exclusion zone
    click_radius: float = CLICK_RADIUS
    constellation_distance: float = CONSTELLATION_DISTANCE
    constellation_members: str = "all"
    spawn_probability: float = SHOOTING_STAR_SPAWN_PROBABILITY
    shooting_star_lifespan: int = SHOOTING_STAR_LIFESPAN
    shooting_star_policy: str = "burst"
    initial_shooting_stars: int = INITIAL_SHOOTING_STARS
    burst_size: int = BURST_PARTICLE_COUNT
    particle_life: int = PARTICLE_LIFE
    twinkle_floor: float = TWINKLE_FLOOR
    background: str = "solid"
    max_volume: float = MAX_VOLUME
    volume_fade_rate: float = VOLUME_FADE_RATE

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Canvas size must be positive")
        for name in (
            "image_count",
            "background_star_count",
            "initial_shooting_stars",
            "burst_size",
            "shooting_star_lifespan",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if self.particle_life < 1:
            raise ValueError("particle_life must be at least 1")
        if not 0.0 <= self.spawn_probability <= 1.0:
            raise ValueError("spawn_probability must be between 0 and 1")
        if not 0.0 <= self.max_volume <= 1.0:
            raise ValueError("max_volume must be between 0 and 1")
        if self.shooting_star_policy not in SHOOTING_STAR_POLICIES:
            available = ", ".join(SHOOTING_STAR_POLICIES)
            raise ValueError(
                f"Unknown shooting star policy '{self.shooting_star_policy}'. Available: {available}"
            )
        if self.constellation_members not in CONSTELLATION_MEMBERS:
            available = ", ".join(CONSTELLATION_MEMBERS)
            raise ValueError(
                f"Unknown constellation members '{self.constellation_members}'. Available: {available}"
            )
        if self.background not in BACKGROUND_STYLES:
            available = ", ".join(BACKGROUND_STYLES)
            raise ValueError(f"Unknown background '{self.background}'. Available: {available}")

    def replace(self, **changes: object) -> "StarfieldConfig":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def placement_constraints(self) -> PlacementConstraints:
        """Build placement constraints, centring the exclusion zone on the canvas."""
        exclusion = None
        if self.exclusion_radius > 0:
            exclusion = ExclusionZone(self.width / 2, self.height / 2, self.exclusion_radius)
        return PlacementConstraints(
            min_distance=self.min_star_distance,
            margin=self.placement_margin,
            max_attempts=self.placement_max_attempts,
            exclusion=exclusion,
        )
