"""Animator driving the sky one fixed tick at a time."""

import itertools
from collections import defaultdict
from collections.abc import Callable, Iterable, Iterator, Sequence

from ..assets import ImageAsset
from ..audio import AudioFader, MediaElement
from ..config import StarfieldConfig
from .interaction import InteractionController, ScheduledClick
from .scene_state import Scene
from .simulation_runtime import create_seeded_scene


class Animator:
    """Generates the frame timeline of a sky."""

    def __init__(
        self,
        config: StarfieldConfig,
        assets: Sequence[ImageAsset],
        fps: int,
        seed: int | None = None,
        clicks: Iterable[ScheduledClick] = (),
        media: MediaElement | None = None,
        scene_factory: Callable[[StarfieldConfig, Sequence[ImageAsset], int | None], Scene] = create_seeded_scene,
    ):
        """
        Initialize animator.

        Args:
            config: Starfield configuration
            assets: Image assets, one clickable star each
            fps: Frames per second for the animation
            seed: Optional deterministic seed; unseeded when omitted
            clicks: Clicks to deliver before given frames
            media: Optional background music element, faded in after the first click
            scene_factory: Runtime factory for Scene setup
        """
        if fps <= 0:
            raise ValueError("fps must be positive")
        self.config = config
        self.assets = assets
        self.fps = fps
        self.seed = seed
        self.media = media
        self.scene_factory = scene_factory
        self.frame_duration = 1000 // fps
        # Seconds per tick for the twinkle clock and the audio fade; motion is per tick
        self.delta_time = 1.0 / fps

        self.clicks: dict[int, list[ScheduledClick]] = defaultdict(list)
        for click in clicks:
            self.clicks[click.frame].append(click)

    def _create_scene(self) -> Scene:
        return self.scene_factory(self.config, self.assets, self.seed)

    def _create_controller(self, scene: Scene) -> InteractionController:
        fader = None
        if self.media is not None:
            fader = AudioFader(
                self.media,
                max_volume=self.config.max_volume,
                fade_rate=self.config.volume_fade_rate,
            )
        return InteractionController(scene, fader)

    def iter_state_timeline(self, max_frames: int | None = None) -> Iterator[tuple[Scene, int]]:
        """Yield the mutable scene after each tick with elapsed time in milliseconds.

        Without ``max_frames`` the timeline never ends.
        """
        scene = self._create_scene()
        controller = self._create_controller(scene)
        yield from self._iter_state_timeline(scene, controller, max_frames=max_frames)

    def _iter_state_timeline(
        self,
        scene: Scene,
        controller: InteractionController,
        max_frames: int | None = None,
    ) -> Iterator[tuple[Scene, int]]:
        frames = self._frame_steps(scene, controller)
        if max_frames is not None:
            frames = itertools.islice(frames, max_frames)
        for frame in frames:
            yield scene, frame * self.frame_duration

    def _frame_steps(self, scene: Scene, controller: InteractionController) -> Iterator[int]:
        """Tick the scene forever, delivering scheduled clicks first."""
        frame = 0
        while True:
            for click in self.clicks.get(frame, ()):
                controller.click(click.x, click.y)
            scene.animate(frame * self.delta_time)
            controller.advance(self.delta_time)
            yield frame
            frame += 1
