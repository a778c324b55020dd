"""Scene state: the stars, shooting stars and particles of one sky."""

import logging
import random
from collections.abc import Sequence

from ..assets import ImageAsset
from ..config import StarfieldConfig
from ..placement import PlacementResult, scatter
from .drawables import Constellation, Drawable, ImageStar, Particle, ShootingStar, Star
from .interaction import Popup
from .policies import create_policy

logger = logging.getLogger(__name__)


class Scene:
    """Owns every entity list and applies the per-tick update."""

    def __init__(
        self,
        config: StarfieldConfig,
        assets: Sequence[ImageAsset] = (),
        rng: random.Random | None = None,
        placement_rng: random.Random | None = None,
    ):
        """
        Build the sky once: background stars, placed image stars, initial shooting stars.

        Args:
            config: Starfield configuration
            assets: One image star is placed per asset, in order
            rng: Random source for the world (twinkle, spawns, bursts)
            placement_rng: Random source for image-star placement, defaults to ``rng``
        """
        self.config = config
        self.width = config.width
        self.height = config.height
        self.rng = rng or random.Random()
        self.policy = create_policy(config.shooting_star_policy, config.shooting_star_lifespan)

        self.background_stars: list[Star] = [
            Star.background(self.width, self.height, self.rng, floor=config.twinkle_floor)
            for _ in range(config.background_star_count)
        ]
        self.placements: list[PlacementResult] = []
        self.image_stars: list[ImageStar] = self._place_image_stars(assets, placement_rng or self.rng)
        self.constellation = Constellation(self.constellation_members, config.constellation_distance)
        self.shooting_stars: list[ShootingStar] = []
        self.particles: list[Particle] = []
        self.popup = Popup()
        self.tick_count = 0

        for _ in range(config.initial_shooting_stars):
            self.spawn_shooting_star()

    def _place_image_stars(self, assets: Sequence[ImageAsset], rng: random.Random) -> list[ImageStar]:
        self.placements = scatter(
            len(assets), self.width, self.height, self.config.placement_constraints(), rng
        )
        relaxed = sum(1 for result in self.placements if not result.satisfied)
        if relaxed:
            logger.debug("%d of %d image stars placed without satisfying constraints", relaxed, len(assets))
        return [
            ImageStar.placed(result.x, result.y, asset, rng, floor=self.config.twinkle_floor)
            for result, asset in zip(self.placements, assets)
        ]

    def constellation_members(self) -> list[Star]:
        """Stars joined by constellation lines: every star, or the image stars only."""
        if self.config.constellation_members == "image":
            return list(self.image_stars)
        return [*self.background_stars, *self.image_stars]

    def spawn_shooting_star(self) -> ShootingStar:
        shooting_star = ShootingStar.spawn(self.policy, self, self.rng)
        self.shooting_stars.append(shooting_star)
        return shooting_star

    def expire_shooting_star(self, shooting_star: ShootingStar) -> None:
        """Remove an expired shooting star and burst it into particles where it ended."""
        if shooting_star not in self.shooting_stars:
            return
        self.shooting_stars.remove(shooting_star)
        for _ in range(self.config.burst_size):
            self.particles.append(
                Particle.spark(
                    shooting_star.x,
                    shooting_star.y,
                    self.config.particle_life,
                    self.rng,
                    scene=self,
                )
            )

    def remove_particle(self, particle: Particle) -> None:
        """Remove particle if still active in the scene."""
        if particle in self.particles:
            self.particles.remove(particle)

    def resize(self, width: int, height: int) -> None:
        """Change the canvas size. Placed stars keep their positions."""
        self.width = width
        self.height = height

    def animate(self, elapsed_time: float) -> None:
        """Advance one tick.

        Args:
            elapsed_time: Seconds on the animation clock, drives the twinkle phase.
        """
        for star in self.background_stars:
            star.animate(elapsed_time)
        for star in self.image_stars:
            star.animate(elapsed_time)

        if self.policy.spawns and self.rng.random() < self.config.spawn_probability:
            self.spawn_shooting_star()

        self._animate_entities(self.shooting_stars, elapsed_time)
        self._animate_entities(self.particles, elapsed_time)
        self.tick_count += 1

    def _animate_entities(self, entities: Sequence[Drawable], elapsed_time: float) -> None:
        """Animate against a stable snapshot to tolerate self-removal during updates."""
        for entity in list(entities):
            entity.animate(elapsed_time)
