"""Click handling: hit-testing image stars and the image popup."""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .drawables import ImageStar

if TYPE_CHECKING:
    from ..audio import AudioFader
    from .scene_state import Scene

logger = logging.getLogger(__name__)

Box = tuple[float, float, float, float]


def hit_test(stars: Iterable[ImageStar], x: float, y: float, radius: float) -> ImageStar | None:
    """Return the first visible star in scan order within ``radius`` of (x, y)."""
    for star in stars:
        if not star.is_visible:
            continue
        if math.hypot(star.x - x, star.y - y) < radius:
            return star
    return None


class Popup:
    """Modal overlay showing the image bound to a clicked star."""

    def __init__(self, padding: int = 40, close_size: int = 28):
        self.padding = padding
        self.close_size = close_size
        self.star: ImageStar | None = None

    @property
    def is_open(self) -> bool:
        return self.star is not None

    def show(self, star: ImageStar) -> None:
        self.star = star

    def hide(self) -> None:
        self.star = None

    def image_box(self, width: int, height: int) -> Box | None:
        """Where the image goes: scaled to fit inside the padded canvas, centred."""
        if self.star is None or self.star.asset.image is None:
            return None
        img_w, img_h = self.star.asset.image.size
        avail_w = max(1, width - 2 * self.padding)
        avail_h = max(1, height - 2 * self.padding)
        scale = min(avail_w / img_w, avail_h / img_h)
        box_w, box_h = img_w * scale, img_h * scale
        left = (width - box_w) / 2
        top = (height - box_h) / 2
        return (left, top, left + box_w, top + box_h)

    def close_box(self, width: int, height: int) -> Box | None:
        """Close control in the top-right corner of the image."""
        image_box = self.image_box(width, height)
        if image_box is None:
            return None
        _, top, right, _ = image_box
        return (right - self.close_size, top, right, top + self.close_size)

    def contains_close(self, x: float, y: float, width: int, height: int) -> bool:
        box = self.close_box(width, height)
        if box is None:
            return False
        left, top, right, bottom = box
        return left <= x <= right and top <= y <= bottom


@dataclass(frozen=True)
class ScheduledClick:
    """A click delivered to the canvas just before the given frame is ticked."""

    frame: int
    x: float
    y: float

    @classmethod
    def parse(cls, text: str) -> "ScheduledClick":
        """Parse ``"x,y@frame"`` (``@frame`` optional, defaults to 0)."""
        point, _, frame = text.partition("@")
        try:
            x_text, y_text = point.split(",")
            return cls(frame=int(frame) if frame else 0, x=float(x_text), y=float(y_text))
        except ValueError:
            raise ValueError(f"Invalid click '{text}'. Expected x,y@frame")


class InteractionController:
    """Routes pointer clicks to the popup and wakes the music on first contact."""

    def __init__(self, scene: "Scene", fader: "AudioFader | None" = None):
        self.scene = scene
        self.fader = fader

    def click(self, x: float, y: float) -> ImageStar | None:
        """
        Handle a click at canvas coordinates.

        While the popup is open only its close control reacts. Otherwise the
        first image star within the click radius opens the popup.

        Returns:
            The star whose popup was opened, if any
        """
        if self.fader is not None:
            self.fader.on_interaction()

        popup = self.scene.popup
        if popup.is_open:
            if popup.contains_close(x, y, self.scene.width, self.scene.height):
                popup.hide()
            return None

        star = hit_test(self.scene.image_stars, x, y, self.scene.config.click_radius)
        if star is not None:
            logger.debug("Opening popup for image %d at (%.1f, %.1f)", star.image_id, star.x, star.y)
            popup.show(star)
        return star

    def advance(self, delta_time: float) -> None:
        if self.fader is not None:
            self.fader.advance(delta_time)
