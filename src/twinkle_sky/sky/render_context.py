"""Rendering configuration and theming."""

from dataclasses import dataclass

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class RenderContext:
    background_color: RGB
    gradient_inner_color: RGB
    gradient_outer_color: RGB
    star_color: RGB
    glow_color: RGBA
    constellation_color: RGBA
    shooting_star_color: RGB
    shooting_star_width: int
    particle_color: RGB
    popup_backdrop_color: RGBA
    popup_border_color: RGB
    popup_close_color: RGB

    @staticmethod
    def night() -> "RenderContext":
        return RenderContext(
            background_color=(0, 0, 0),
            gradient_inner_color=(20, 24, 58),
            gradient_outer_color=(0, 0, 0),
            star_color=(255, 255, 255),
            glow_color=(136, 136, 255, 38),
            constellation_color=(255, 255, 255, 38),
            shooting_star_color=(255, 255, 255),
            shooting_star_width=2,
            particle_color=(255, 244, 214),
            popup_backdrop_color=(0, 0, 0, 190),
            popup_border_color=(220, 220, 255),
            popup_close_color=(255, 255, 255),
        )
