"""Faint lines joining stars that sit close together."""

import math
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from PIL import ImageDraw

from .drawable import Drawable

if TYPE_CHECKING:
    from ..render_context import RenderContext
    from .star import Star


def constellation_edges(
    points: Sequence[tuple[float, float]], threshold: float
) -> list[tuple[int, int]]:
    """Index pairs (i < j) of points closer than ``threshold``; checks every pair."""
    edges = []
    for i, (x1, y1) in enumerate(points):
        for j in range(i + 1, len(points)):
            x2, y2 = points[j]
            if math.hypot(x2 - x1, y2 - y1) < threshold:
                edges.append((i, j))
    return edges


class Constellation(Drawable):
    """Connects visible member stars; recomputed every frame as images finish loading.

    ``members`` is called on every frame so the lines follow the current star lists.
    """

    def __init__(self, members: Callable[[], Sequence["Star"]], threshold: float):
        self.members = members
        self.threshold = threshold

    def visible_edges(self) -> list[tuple["Star", "Star"]]:
        visible = [star for star in self.members() if star.is_visible]
        points = [(star.x, star.y) for star in visible]
        return [(visible[i], visible[j]) for i, j in constellation_edges(points, self.threshold)]

    def animate(self, elapsed_time: float) -> None:
        pass

    def draw(self, draw: ImageDraw.ImageDraw, context: "RenderContext") -> None:
        for a, b in self.visible_edges():
            draw.line([(a.x, a.y), (b.x, b.y)], fill=context.constellation_color, width=1)
