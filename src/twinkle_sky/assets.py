"""Image assets bound to clickable stars."""

import enum
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


class AssetState(enum.Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


def image_filename(image_id: int) -> str:
    """Name of the n-th image file (1-indexed)."""
    return f"Image{image_id}.jpeg"


class ImageAsset:
    """An image file that may or may not have finished loading."""

    def __init__(self, path: str | Path, image_id: int):
        self.path = Path(path)
        self.image_id = image_id
        self.state = AssetState.PENDING
        self._image: Image.Image | None = None

    def __repr__(self) -> str:
        return f"ImageAsset({self.path.name!r}, {self.state.value})"

    @property
    def is_ready(self) -> bool:
        return self.state is AssetState.READY

    @property
    def image(self) -> Image.Image | None:
        return self._image

    def load(self) -> bool:
        """
        Open and decode the image file.

        Failures are logged and recorded; they never propagate. Stars bound to
        a failed asset are simply not drawn.

        Returns:
            True when the image is ready
        """
        if self.state is not AssetState.PENDING:
            return self.is_ready
        try:
            with Image.open(self.path) as img:
                img.load()
                self._image = img.convert("RGB")
        except (OSError, UnidentifiedImageError) as e:
            self.state = AssetState.FAILED
            logger.warning("Failed to load %s: %s", self.path.name, e)
            return False
        self.state = AssetState.READY
        logger.debug("Loaded %s (%dx%d)", self.path.name, *self._image.size)
        return True

    @classmethod
    def from_image(cls, image: Image.Image, image_id: int, name: str | None = None) -> "ImageAsset":
        """Wrap an already decoded image."""
        asset = cls(name or image_filename(image_id), image_id)
        asset._image = image.convert("RGB")
        asset.state = AssetState.READY
        return asset


def discover_assets(folder: str | Path, count: int) -> list[ImageAsset]:
    """Build assets for Image1.jpeg .. Image<count>.jpeg inside ``folder``."""
    base = Path(folder)
    return [ImageAsset(base / image_filename(i), i) for i in range(1, count + 1)]


def load_all(assets: list[ImageAsset]) -> int:
    """Load every asset and return how many are ready."""
    return sum(1 for asset in assets if asset.load())
