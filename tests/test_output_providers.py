"""Tests for output providers."""

from io import BytesIO

from PIL import Image
import pytest

from twinkle_sky.animation_pipeline import encode_animation
from twinkle_sky.output import (
    GifOutputProvider,
    WebPOutputProvider,
    resolve_output_provider,
    supported_output_formats,
)


def create_test_frame(color="red"):
    """Helper to create a test frame."""
    return Image.new("RGB", (10, 10), color)


def test_gif_provider_encodes_frames():
    provider = GifOutputProvider("test_output.gif")
    frames = [create_test_frame("red"), create_test_frame("blue")]

    result = provider.encode(iter(frames), frame_duration=100)

    assert result.startswith(b"GIF89")


def test_gif_provider_empty_frames():
    provider = GifOutputProvider("test_output.gif")

    assert provider.encode(iter([]), frame_duration=100) == b""


def test_webp_provider_encodes_frames():
    provider = WebPOutputProvider("test_output.webp")
    frames = [create_test_frame("red"), create_test_frame("green")]

    result = provider.encode(iter(frames), frame_duration=40)

    assert result[:4] == b"RIFF"
    assert result[8:12] == b"WEBP"


@pytest.mark.parametrize(
    "requested, written",
    [(33, 30), (40, 40), (16, 20), (1, 20), (100, 100)],
)
def test_gif_delay_snaps_to_centiseconds(requested, written):
    assert GifOutputProvider().frame_delay(requested) == written


def test_gif_frames_carry_snapped_delay():
    frames = [create_test_frame("red"), create_test_frame("blue")]

    data = GifOutputProvider().encode(iter(frames), frame_duration=33)

    with Image.open(BytesIO(data)) as image:
        assert image.n_frames == 2
        assert image.info["duration"] == 30


def test_webp_keeps_millisecond_delay_and_true_colour():
    provider = WebPOutputProvider()
    palette_frame = create_test_frame("green").convert("P")

    assert provider.frame_delay(33) == 33
    assert provider.prepare_frame(palette_frame).mode == "RGB"
    rgb_frame = create_test_frame()
    assert provider.prepare_frame(rgb_frame) is rgb_frame


def test_write_requires_path():
    with pytest.raises(ValueError):
        GifOutputProvider().write(b"data")


def test_write_saves_bytes(tmp_path):
    path = tmp_path / "out.gif"
    GifOutputProvider(str(path)).write(b"GIF89a")

    assert path.read_bytes() == b"GIF89a"


@pytest.mark.parametrize(
    "path, provider_class",
    [("sky.gif", GifOutputProvider), ("SKY.WEBP", WebPOutputProvider)],
)
def test_resolve_output_provider(path, provider_class):
    provider = resolve_output_provider(path)

    assert isinstance(provider, provider_class)
    assert provider.path == path


def test_resolve_output_provider_rejects_unknown_extension():
    with pytest.raises(ValueError, match="Unsupported output format"):
        resolve_output_provider("sky.mp4")


def test_supported_output_formats():
    assert supported_output_formats() == ("gif", "webp")


def test_encode_animation_reports_the_animated_scene(quiet_config, make_asset):
    config = quiet_config.replace(image_count=1)
    seen = []

    data = encode_animation(
        config,
        [make_asset()],
        "sky.gif",
        fps=30,
        max_frames=3,
        on_scene=seen.append,
    )

    assert data.startswith(b"GIF89")
    assert len(seen) == 1
    assert seen[0].tick_count == 3
    assert len(seen[0].image_stars) == 1
