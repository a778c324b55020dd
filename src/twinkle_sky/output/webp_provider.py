"""WebP output provider."""

from PIL import Image

from .base import OutputProvider


class WebPOutputProvider(OutputProvider):
    """Lossless true-colour frames with millisecond delays."""

    @property
    def output_format(self) -> str:
        return "webp"

    @property
    def save_options(self) -> dict[str, object]:
        return {"lossless": True, "quality": 100, "method": 4}

    def prepare_frame(self, frame: Image.Image) -> Image.Image:
        # The encoder has no palette mode
        if frame.mode not in ("RGB", "RGBA"):
            return frame.convert("RGB")
        return frame
