"""Policies deciding how a shooting star ends its run."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..constants import SHOOTING_STAR_SPAWN_BAND, SHOOTING_STAR_WRAP_X

if TYPE_CHECKING:
    from .drawables.shooting_star import ShootingStar
    from .scene_state import Scene


class ShootingStarPolicy(ABC):
    """What a shooting star does after each move."""

    slope: float = 1.0
    # Whether the scene spawns new shooting stars while this policy runs
    spawns: bool = True

    @abstractmethod
    def after_move(self, star: "ShootingStar", scene: "Scene") -> None:
        """React to the star's new position and age."""


class BurstPolicy(ShootingStarPolicy):
    """Expire once the life counter passes the lifespan, bursting into particles."""

    slope = 1.0

    def __init__(self, lifespan: int):
        self.lifespan = lifespan

    def is_expired(self, star: "ShootingStar") -> bool:
        return star.life > self.lifespan

    def after_move(self, star: "ShootingStar", scene: "Scene") -> None:
        if self.is_expired(star):
            scene.expire_shooting_star(star)


class WrapPolicy(ShootingStarPolicy):
    """Never expire; jump back to the left edge near the top after leaving the canvas."""

    slope = 0.5
    # The initial stars recycle forever, so the population stays fixed
    spawns = False

    def after_move(self, star: "ShootingStar", scene: "Scene") -> None:
        if star.x > scene.width or star.y > scene.height:
            star.x = SHOOTING_STAR_WRAP_X
            star.y = scene.rng.uniform(0, min(SHOOTING_STAR_SPAWN_BAND, scene.height))


DEFAULT_POLICY_NAME = "burst"


def create_policy(name: str, lifespan: int) -> ShootingStarPolicy:
    """Create a shooting star policy by name."""
    if name == "burst":
        return BurstPolicy(lifespan)
    if name == "wrap":
        return WrapPolicy()
    raise ValueError(f"Unknown shooting star policy '{name}'. Available: burst, wrap")
