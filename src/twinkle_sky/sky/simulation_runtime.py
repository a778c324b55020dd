"""Simulation runtime helpers used by Animator."""

import random
from collections.abc import Sequence

from ..assets import ImageAsset
from ..config import StarfieldConfig
from .scene_state import Scene


def create_seeded_scene(
    config: StarfieldConfig,
    assets: Sequence[ImageAsset],
    seed: int | None = None,
) -> Scene:
    """Create a scene with independent RNG streams for placement and world state.

    With ``seed=None`` both streams are unseeded and every run lays out a new sky.
    """
    if seed is None:
        return Scene(config, assets, rng=random.Random(), placement_rng=random.Random())

    master_rng = random.Random(seed)
    placement_rng = random.Random(master_rng.getrandbits(64))
    world_rng = random.Random(master_rng.getrandbits(64))
    return Scene(config, assets, rng=world_rng, placement_rng=placement_rng)
