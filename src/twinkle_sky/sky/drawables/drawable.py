"""Base class for everything drawn on the sky canvas."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from PIL import ImageDraw

if TYPE_CHECKING:
    from ..render_context import RenderContext


class Drawable(ABC):
    """An object that updates once per tick and draws itself."""

    @abstractmethod
    def animate(self, elapsed_time: float) -> None:
        """Advance one tick.

        Args:
            elapsed_time: Seconds on the animation clock since the scene started.
        """

    @abstractmethod
    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        """Draw onto the frame overlay."""
