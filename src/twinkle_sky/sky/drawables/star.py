"""Twinkling stars, plain and image-bound."""

import math
import random
from typing import TYPE_CHECKING

from PIL import ImageDraw

from ...constants import (
    BACKGROUND_STAR_COLORS,
    BACKGROUND_STAR_SIZE_MAX,
    BACKGROUND_STAR_SIZE_MIN,
    IMAGE_STAR_GLOW,
    IMAGE_STAR_SIZE_MAX,
    IMAGE_STAR_SIZE_MIN,
    TWINKLE_AMPLITUDE_MAX,
    TWINKLE_AMPLITUDE_MIN,
    TWINKLE_FLOOR,
    TWINKLE_SPEED_MAX,
    TWINKLE_SPEED_MIN,
)
from .drawable import Drawable

if TYPE_CHECKING:
    from ...assets import ImageAsset
    from ..render_context import RenderContext

GLOW_STEPS = 4


class Star(Drawable):
    """A fixed star whose radius oscillates with the animation clock."""

    def __init__(
        self,
        x: float,
        y: float,
        base_radius: float,
        twinkle_speed: float = 0.0,
        twinkle_amplitude: float = 0.0,
        twinkle_phase: float = 0.0,
        color: tuple[int, int, int] = (255, 255, 255),
        floor: float = TWINKLE_FLOOR,
    ):
        self.x = x
        self.y = y
        self.base_radius = base_radius
        self.twinkle_speed = twinkle_speed
        self.twinkle_amplitude = twinkle_amplitude
        self.twinkle_phase = twinkle_phase
        self.color = color
        self.floor = floor
        self.radius = max(floor, base_radius)

    @classmethod
    def random_twinkle(cls, rng: random.Random) -> dict[str, float]:
        """Per-star twinkle constants, fixed at creation."""
        return {
            "twinkle_speed": rng.uniform(TWINKLE_SPEED_MIN, TWINKLE_SPEED_MAX),
            "twinkle_amplitude": rng.uniform(TWINKLE_AMPLITUDE_MIN, TWINKLE_AMPLITUDE_MAX),
            "twinkle_phase": rng.uniform(0, math.tau),
        }

    @classmethod
    def background(
        cls, width: float, height: float, rng: random.Random, floor: float = TWINKLE_FLOOR
    ) -> "Star":
        """A faint grey star anywhere on the canvas."""
        return cls(
            x=rng.uniform(0, width),
            y=rng.uniform(0, height),
            base_radius=rng.uniform(BACKGROUND_STAR_SIZE_MIN, BACKGROUND_STAR_SIZE_MAX),
            color=rng.choice(BACKGROUND_STAR_COLORS),
            floor=floor,
            **cls.random_twinkle(rng),
        )

    @property
    def max_radius(self) -> float:
        return max(self.floor, self.base_radius + self.twinkle_amplitude)

    @property
    def is_visible(self) -> bool:
        return True

    def twinkle(self, elapsed_time: float) -> float:
        """Recompute the radius from the animation clock and return it."""
        wave = math.sin(elapsed_time * self.twinkle_speed + self.twinkle_phase)
        self.radius = max(self.floor, self.base_radius + self.twinkle_amplitude * wave)
        return self.radius

    def animate(self, elapsed_time: float) -> None:
        self.twinkle(elapsed_time)

    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        r = self.radius
        draw.ellipse([self.x - r, self.y - r, self.x + r, self.y + r], fill=self.color)


class ImageStar(Star):
    """A clickable star bound to an image; hidden until the image is ready."""

    def __init__(self, x: float, y: float, base_radius: float, asset: "ImageAsset", **kwargs):
        super().__init__(x, y, base_radius, **kwargs)
        self._asset = asset

    @classmethod
    def placed(
        cls,
        x: float,
        y: float,
        asset: "ImageAsset",
        rng: random.Random,
        floor: float = TWINKLE_FLOOR,
    ) -> "ImageStar":
        return cls(
            x=x,
            y=y,
            base_radius=rng.uniform(IMAGE_STAR_SIZE_MIN, IMAGE_STAR_SIZE_MAX),
            asset=asset,
            floor=floor,
            **cls.random_twinkle(rng),
        )

    @property
    def asset(self) -> "ImageAsset":
        return self._asset

    @property
    def image_id(self) -> int:
        return self._asset.image_id

    @property
    def is_visible(self) -> bool:
        return self._asset.is_ready

    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        if not self.is_visible:
            return

        # Soft glow: concentric rings fading outwards
        glow_r, glow_g, glow_b, glow_a = context.glow_color
        for step in range(GLOW_STEPS, 0, -1):
            r = self.radius + IMAGE_STAR_GLOW * step / GLOW_STEPS
            alpha = int(glow_a * (GLOW_STEPS - step + 1) / GLOW_STEPS)
            draw.ellipse(
                [self.x - r, self.y - r, self.x + r, self.y + r],
                fill=(glow_r, glow_g, glow_b, alpha),
            )

        r = self.radius
        draw.ellipse([self.x - r, self.y - r, self.x + r, self.y + r], fill=context.star_color)
