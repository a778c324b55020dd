"""Drawable sky objects."""

from .constellation import Constellation, constellation_edges
from .drawable import Drawable
from .particle import Particle
from .shooting_star import ShootingStar
from .star import ImageStar, Star

__all__ = [
    "Constellation",
    "constellation_edges",
    "Drawable",
    "ImageStar",
    "Particle",
    "ShootingStar",
    "Star",
]
