"""Shared fixtures."""

import random

import pytest
from PIL import Image

from twinkle_sky.assets import ImageAsset
from twinkle_sky.config import StarfieldConfig
from twinkle_sky.sky.scene_state import Scene


class FakeMedia:
    """Records what the fader does to it."""

    def __init__(self, blocked: bool = False):
        self.volume = 1.0
        self.loop = False
        self.play_calls = 0
        self.blocked = blocked

    def play(self) -> None:
        self.play_calls += 1
        if self.blocked:
            raise RuntimeError("autoplay not allowed")


@pytest.fixture
def quiet_config() -> StarfieldConfig:
    """A small sky with nothing spawning on its own."""
    return StarfieldConfig(
        width=400,
        height=300,
        image_count=0,
        background_star_count=0,
        exclusion_radius=0,
        spawn_probability=0.0,
    )


@pytest.fixture
def make_asset():
    def _make(image_id: int = 1, color: str = "red", size: tuple[int, int] = (40, 30)) -> ImageAsset:
        return ImageAsset.from_image(Image.new("RGB", size, color), image_id)

    return _make


@pytest.fixture
def quiet_scene(quiet_config: StarfieldConfig) -> Scene:
    return Scene(quiet_config, rng=random.Random(1))


@pytest.fixture
def fake_media() -> FakeMedia:
    return FakeMedia()


@pytest.fixture
def blocked_media() -> FakeMedia:
    return FakeMedia(blocked=True)
