"""Short-lived sparks from a shooting star burst."""

import math
import random
from typing import TYPE_CHECKING

from PIL import ImageDraw

from ...constants import PARTICLE_RADIUS_MAX, PARTICLE_RADIUS_MIN, PARTICLE_SPEED_MAX
from .drawable import Drawable

if TYPE_CHECKING:
    from ..render_context import RenderContext
    from ..scene_state import Scene


class Particle(Drawable):
    """Moves by a fixed velocity each tick and fades out as its life runs down."""

    def __init__(
        self,
        x: float,
        y: float,
        radius: float,
        vx: float,
        vy: float,
        life: int,
        scene: "Scene | None" = None,
    ):
        if life < 1:
            raise ValueError("life must be at least 1")
        self.x = x
        self.y = y
        self.radius = radius
        self.vx = vx
        self.vy = vy
        self.life = life
        self.max_life = life
        self.scene = scene

    @classmethod
    def spark(cls, x: float, y: float, life: int, rng: random.Random, scene: "Scene | None" = None) -> "Particle":
        """A particle flying off in a random direction."""
        angle = rng.uniform(0, math.tau)
        speed = rng.uniform(0.5, PARTICLE_SPEED_MAX)
        return cls(
            x=x,
            y=y,
            radius=rng.uniform(PARTICLE_RADIUS_MIN, PARTICLE_RADIUS_MAX),
            vx=math.cos(angle) * speed,
            vy=math.sin(angle) * speed,
            life=life,
            scene=scene,
        )

    @property
    def is_alive(self) -> bool:
        return self.life > 0

    @property
    def opacity(self) -> float:
        return max(0.0, self.life / self.max_life)

    def animate(self, elapsed_time: float) -> None:
        self.x += self.vx
        self.y += self.vy
        self.life -= 1
        if not self.is_alive and self.scene is not None:
            self.scene.remove_particle(self)

    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        r = self.radius
        draw.ellipse(
            [self.x - r, self.y - r, self.x + r, self.y + r],
            fill=(*context.particle_color, int(255 * self.opacity)),
        )
