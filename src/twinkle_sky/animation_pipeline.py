"""Shared animation orchestration used by the CLI."""

from collections.abc import Callable, Iterable, Sequence

from .assets import ImageAsset
from .config import StarfieldConfig
from .output import resolve_output_provider
from .output.base import OutputProvider
from .sky.animator import Animator
from .sky.interaction import ScheduledClick
from .sky.raster_animation import generate_raster_frames
from .sky.scene_state import Scene
from .sky.simulation_runtime import create_seeded_scene


def encode_animation(
    config: StarfieldConfig,
    assets: Sequence[ImageAsset],
    output_path: str,
    *,
    fps: int,
    max_frames: int,
    seed: int | None = None,
    clicks: Iterable[ScheduledClick] = (),
    provider: OutputProvider | None = None,
    on_scene: Callable[[Scene], None] | None = None,
) -> bytes:
    """Encode animation bytes for the given configuration and output path.

    ``on_scene`` receives the freshly built scene before the first tick.
    """
    if max_frames <= 0:
        raise ValueError("max_frames must be positive")
    target_provider = provider or resolve_output_provider(output_path)

    def build_scene(config: StarfieldConfig, assets: Sequence[ImageAsset], seed: int | None) -> Scene:
        scene = create_seeded_scene(config, assets, seed)
        if on_scene is not None:
            on_scene(scene)
        return scene

    animator = Animator(config, assets, fps=fps, seed=seed, clicks=clicks, scene_factory=build_scene)
    frame_stream = generate_raster_frames(animator, max_frames)
    return target_provider.encode(frame_stream, frame_duration=1000 // fps)
