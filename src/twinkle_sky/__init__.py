"""Animated starfield with clickable image stars."""

from .config import StarfieldConfig

__all__ = ["StarfieldConfig"]

__version__ = "0.1.0"
