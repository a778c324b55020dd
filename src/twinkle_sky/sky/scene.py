"""Scene composition helpers for rendering sky state."""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from .drawables import Drawable
from .scene_state import Scene

if TYPE_CHECKING:
    from .render_context import RenderContext


def iter_scene_drawables(scene: Scene) -> Iterator[Drawable]:
    """Yield drawables in painter order from back to front."""
    yield from scene.background_stars
    yield scene.constellation
    yield from scene.image_stars
    yield from scene.shooting_stars
    yield from scene.particles


def draw_scene(scene: Scene, draw: Any, context: "RenderContext") -> None:
    """Render the scene using the provided draw target/context."""
    for drawable in iter_scene_drawables(scene):
        drawable.draw(draw, context)
