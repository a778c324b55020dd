"""Base class for output format providers."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from io import BytesIO

from PIL import Image


class OutputProvider(ABC):
    """Abstract base class for output format providers."""

    def __init__(self, path: str = ""):
        """
        Initialize the provider with an output file path.

        Args:
            path: Path to the output file
        """
        self.path = path

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (for example, ``gif`` or ``webp``)."""
        raise NotImplementedError

    @property
    def save_options(self) -> dict[str, object]:
        """Additional Pillow ``save`` kwargs for this format."""
        return {}

    def frame_delay(self, frame_duration: int) -> int:
        """Delay written per frame for a requested duration in milliseconds."""
        return frame_duration

    def prepare_frame(self, frame: Image.Image) -> Image.Image:
        """Convert a rendered frame into what the encoder expects."""
        return frame

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        """
        Encode frames into an animated image that loops forever.

        Args:
            frames: Iterator of rendered frames
            frame_duration: Frame duration in milliseconds

        Returns:
            Encoded output as bytes
        """
        frame_list = [self.prepare_frame(frame) for frame in frames]
        if not frame_list:
            return b""

        buffer = BytesIO()
        frame_list[0].save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=frame_list[1:],
            duration=self.frame_delay(frame_duration),
            loop=0,
            **self.save_options,
        )
        return buffer.getvalue()

    def write(self, data: bytes) -> None:
        """
        Write encoded data to a file.

        Args:
            data: Encoded data to write
        """
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)
