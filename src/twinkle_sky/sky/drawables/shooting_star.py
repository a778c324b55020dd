"""Shooting stars streaking across the sky."""

import random
from typing import TYPE_CHECKING

from PIL import ImageDraw

from ...constants import (
    SHOOTING_STAR_LENGTH_MAX,
    SHOOTING_STAR_LENGTH_MIN,
    SHOOTING_STAR_SPAWN_BAND,
    SHOOTING_STAR_SPEED_MAX,
    SHOOTING_STAR_SPEED_MIN,
)
from .drawable import Drawable

if TYPE_CHECKING:
    from ..policies import ShootingStarPolicy
    from ..render_context import RenderContext
    from ..scene_state import Scene

TRAIL_SEGMENTS = 5


class ShootingStar(Drawable):
    """A streak moving a fixed distance per tick; what happens at the end is up to its policy."""

    def __init__(
        self,
        x: float,
        y: float,
        length: float,
        speed: float,
        policy: "ShootingStarPolicy",
        scene: "Scene",
    ):
        self.x = x
        self.y = y
        self.length = length
        self.speed = speed
        self.policy = policy
        self.scene = scene
        self.life = 0

    @classmethod
    def spawn(cls, policy: "ShootingStarPolicy", scene: "Scene", rng: random.Random) -> "ShootingStar":
        """A new shooting star somewhere along the top band of the canvas."""
        return cls(
            x=rng.uniform(0, scene.width),
            y=rng.uniform(0, min(SHOOTING_STAR_SPAWN_BAND, scene.height)),
            length=rng.uniform(SHOOTING_STAR_LENGTH_MIN, SHOOTING_STAR_LENGTH_MAX),
            speed=rng.uniform(SHOOTING_STAR_SPEED_MIN, SHOOTING_STAR_SPEED_MAX),
            policy=policy,
            scene=scene,
        )

    @property
    def slope(self) -> float:
        return self.policy.slope

    def animate(self, elapsed_time: float) -> None:
        """Advance by (speed, speed * slope) and let the policy decide expiry or wrap."""
        self.x += self.speed
        self.y += self.speed * self.slope
        self.life += 1
        self.policy.after_move(self, self.scene)

    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        """Draw the head bright and the tail fading towards where it came from."""
        tail_dx = self.length / TRAIL_SEGMENTS
        tail_dy = tail_dx * self.slope
        for i in range(TRAIL_SEGMENTS):
            start = (self.x - tail_dx * i, self.y - tail_dy * i)
            end = (self.x - tail_dx * (i + 1), self.y - tail_dy * (i + 1))
            alpha = int(255 * (TRAIL_SEGMENTS - i) / TRAIL_SEGMENTS)
            draw.line(
                [start, end],
                fill=(*context.shooting_star_color, alpha),
                width=context.shooting_star_width,
            )
