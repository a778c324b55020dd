"""Background music that fades in after the first interaction."""

import logging
from typing import Protocol

from .constants import MAX_VOLUME, VOLUME_FADE_RATE

logger = logging.getLogger(__name__)


class MediaElement(Protocol):
    """The playback surface the fader drives (volume in [0, 1])."""

    volume: float
    loop: bool

    def play(self) -> None: ...


class AudioFader:
    """Start music on first interaction, then ramp volume linearly up to a cap."""

    def __init__(
        self,
        media: MediaElement,
        max_volume: float = MAX_VOLUME,
        fade_rate: float = VOLUME_FADE_RATE,
    ):
        """
        Initialize the fader.

        Args:
            media: Media element to play and whose volume is ramped
            max_volume: Volume ceiling for the ramp
            fade_rate: Volume units added per second
        """
        self.media = media
        self.max_volume = max_volume
        self.fade_rate = fade_rate
        self.started = False
        self.playing = False

    def on_interaction(self) -> None:
        """Start playback on the first call; later calls do nothing."""
        if self.started:
            return
        self.started = True
        self.media.loop = True
        self.media.volume = 0.0
        try:
            self.media.play()
        except Exception as e:
            logger.warning("Music blocked: %s", e)
            return
        self.playing = True

    def advance(self, delta_time: float) -> None:
        """Raise the volume by ``fade_rate * delta_time`` without passing the cap."""
        if not self.playing or self.media.volume >= self.max_volume:
            return
        self.media.volume = min(self.max_volume, self.media.volume + self.fade_rate * delta_time)
