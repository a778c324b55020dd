"""Sky animation: stars, shooting stars, particles and the popup."""

from .animator import Animator
from .drawables import Constellation, Drawable, ImageStar, Particle, ShootingStar, Star
from .interaction import InteractionController, Popup, ScheduledClick, hit_test
from .policies import BurstPolicy, ShootingStarPolicy, WrapPolicy, create_policy
from .raster_animation import generate_raster_frames
from .render_context import RenderContext
from .renderer import Renderer
from .scene_state import Scene

__all__ = [
    "Animator",
    "BurstPolicy",
    "Constellation",
    "create_policy",
    "Drawable",
    "generate_raster_frames",
    "hit_test",
    "ImageStar",
    "InteractionController",
    "Particle",
    "Popup",
    "RenderContext",
    "Renderer",
    "ScheduledClick",
    "Scene",
    "ShootingStar",
    "ShootingStarPolicy",
    "Star",
    "WrapPolicy",
]
