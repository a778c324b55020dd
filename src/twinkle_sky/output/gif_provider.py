"""GIF output provider."""

from .base import OutputProvider

# GIF stores delays in hundredths of a second
GIF_DELAY_STEP = 10
# Browsers replace shorter delays with 100 ms
GIF_MIN_DELAY = 20


class GifOutputProvider(OutputProvider):
    """Palette frames with delays snapped to what GIF viewers honour."""

    @property
    def output_format(self) -> str:
        return "gif"

    @property
    def save_options(self) -> dict[str, object]:
        # Every frame repaints the whole sky
        return {"optimize": False, "disposal": 1}

    def frame_delay(self, frame_duration: int) -> int:
        snapped = round(frame_duration / GIF_DELAY_STEP) * GIF_DELAY_STEP
        return max(GIF_MIN_DELAY, snapped)
