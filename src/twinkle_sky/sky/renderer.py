"""Renderer for drawing sky frames using Pillow."""

from PIL import Image, ImageDraw, ImageOps

from .render_context import RenderContext
from .scene import draw_scene
from .scene_state import Scene


class Renderer:
    """Renders scene state as PIL Images."""

    def __init__(self, scene: Scene, render_context: RenderContext):
        """
        Initialize renderer.

        Args:
            scene: The scene to render
            render_context: Rendering configuration and theming
        """
        self.scene = scene
        self.context = render_context
        self._gradient: Image.Image | None = None

    @property
    def size(self) -> tuple[int, int]:
        return (self.scene.width, self.scene.height)

    def render_frame(self) -> Image.Image:
        """
        Render the current scene as an image.

        Returns:
            PIL Image of the current frame
        """
        img = self._background().convert("RGBA")

        overlay = Image.new("RGBA", self.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay, "RGBA")
        draw_scene(self.scene, draw, self.context)
        combined = Image.alpha_composite(img, overlay)

        if self.scene.popup.is_open:
            combined = self._draw_popup(combined)

        return combined.convert("RGB").convert("P", palette=Image.Palette.ADAPTIVE)

    def _background(self) -> Image.Image:
        if self.scene.config.background == "gradient":
            return self._radial_gradient()
        return Image.new("RGB", self.size, self.context.background_color)

    def _radial_gradient(self) -> Image.Image:
        """Radial gradient from the inner colour at the centre to the outer colour at the edges."""
        if self._gradient is None or self._gradient.size != self.size:
            mask = Image.radial_gradient("L").resize(self.size)
            self._gradient = ImageOps.colorize(
                mask,
                black=self.context.gradient_inner_color,
                white=self.context.gradient_outer_color,
            )
        return self._gradient

    def _draw_popup(self, frame: Image.Image) -> Image.Image:
        """Dim the sky and show the clicked star's image with a close control."""
        popup = self.scene.popup
        width, height = self.size
        image_box = popup.image_box(width, height)
        close_box = popup.close_box(width, height)
        if image_box is None or close_box is None:
            return frame

        backdrop = Image.new("RGBA", self.size, self.context.popup_backdrop_color)
        frame = Image.alpha_composite(frame, backdrop)

        left, top, right, bottom = (round(v) for v in image_box)
        picture = popup.star.asset.image.resize((max(1, right - left), max(1, bottom - top)))
        frame.paste(picture, (left, top))

        draw = ImageDraw.Draw(frame, "RGBA")
        draw.rectangle([left, top, right, bottom], outline=self.context.popup_border_color, width=2)

        c_left, c_top, c_right, c_bottom = close_box
        inset = (c_right - c_left) * 0.25
        draw.rectangle([c_left, c_top, c_right, c_bottom], fill=(0, 0, 0, 160))
        draw.line(
            [(c_left + inset, c_top + inset), (c_right - inset, c_bottom - inset)],
            fill=self.context.popup_close_color,
            width=2,
        )
        draw.line(
            [(c_left + inset, c_bottom - inset), (c_right - inset, c_top + inset)],
            fill=self.context.popup_close_color,
            width=2,
        )
        return frame
