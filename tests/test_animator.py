"""Tests for Animator."""

import itertools

import pytest

from twinkle_sky.config import StarfieldConfig
from twinkle_sky.sky.animator import Animator
from twinkle_sky.sky.interaction import ScheduledClick
from twinkle_sky.sky.raster_animation import generate_raster_frames
from twinkle_sky.sky.simulation_runtime import create_seeded_scene


@pytest.fixture
def single_star_config(quiet_config: StarfieldConfig) -> StarfieldConfig:
    return quiet_config.replace(image_count=1)


def test_image_star_stays_put_without_spawns(single_star_config, make_asset):
    """With spawning disabled the sky only twinkles."""
    animator = Animator(single_star_config, [make_asset()], fps=30, seed=11)

    positions = []
    last_scene = None
    for scene, _elapsed_ms in animator.iter_state_timeline(max_frames=120):
        star = scene.image_stars[0]
        positions.append((star.x, star.y))
        last_scene = scene

    assert len(positions) == 120
    assert len(set(positions)) == 1
    assert last_scene.shooting_stars == []
    assert last_scene.particles == []
    assert last_scene.tick_count == 120


def test_timeline_never_ends_on_its_own(quiet_config):
    animator = Animator(quiet_config, [], fps=25)

    ticks = list(itertools.islice(animator.iter_state_timeline(), 500))
    assert len(ticks) == 500
    assert [elapsed for _, elapsed in ticks[:3]] == [0, 40, 80]


def test_seed_reproduces_layout(make_asset):
    config = StarfieldConfig(image_count=5, background_star_count=10)
    assets = [make_asset(i) for i in range(1, 6)]

    scene_a = create_seeded_scene(config, assets, seed=123)
    scene_b = create_seeded_scene(config, assets, seed=123)

    assert [(s.x, s.y) for s in scene_a.image_stars] == [(s.x, s.y) for s in scene_b.image_stars]
    assert [(s.x, s.y) for s in scene_a.background_stars] == [(s.x, s.y) for s in scene_b.background_stars]


def test_shooting_stars_spawn_and_burst(quiet_config):
    config = quiet_config.replace(spawn_probability=1.0, shooting_star_lifespan=5, burst_size=3)
    animator = Animator(config, [], fps=30, seed=2)

    scene, _ = next(itertools.islice(animator.iter_state_timeline(), 5, None))
    # One spawn per tick; the first star has now lived six ticks and burst
    assert len(scene.shooting_stars) == 5
    assert len(scene.particles) == 3


def test_scheduled_click_opens_popup(single_star_config, make_asset):
    assets = [make_asset()]
    star = create_seeded_scene(single_star_config, assets, seed=4).image_stars[0]
    click = ScheduledClick(frame=2, x=star.x + 3, y=star.y)
    animator = Animator(single_star_config, assets, fps=30, seed=4, clicks=[click])

    opened = [scene.popup.is_open for scene, _ in animator.iter_state_timeline(max_frames=4)]
    assert opened == [False, False, True, True]


def test_music_fades_in_after_first_click(quiet_config, fake_media):
    animator = Animator(
        quiet_config,
        [],
        fps=30,
        clicks=[ScheduledClick(frame=0, x=1, y=1)],
        media=fake_media,
    )

    for _ in animator.iter_state_timeline(max_frames=30):
        pass
    assert fake_media.play_calls == 1
    assert fake_media.volume == pytest.approx(0.1)


def test_bounded_timeline_stops_before_the_next_frame(single_star_config, make_asset, fake_media):
    assets = [make_asset()]
    star = create_seeded_scene(single_star_config, assets, seed=4).image_stars[0]
    late_click = ScheduledClick(frame=3, x=star.x, y=star.y)
    animator = Animator(single_star_config, assets, fps=30, seed=4, clicks=[late_click], media=fake_media)

    timeline = list(animator.iter_state_timeline(max_frames=3))
    scene = timeline[-1][0]

    assert [elapsed for _, elapsed in timeline] == [0, 33, 66]
    assert scene.tick_count == 3
    # The click belongs to a frame that was never rendered
    assert not scene.popup.is_open
    assert fake_media.play_calls == 0


def test_zero_frames_never_ticks(quiet_config):
    animator = Animator(quiet_config, [], fps=30)

    assert list(animator.iter_state_timeline(max_frames=0)) == []


def test_generate_raster_frames(quiet_config, make_asset):
    config = quiet_config.replace(image_count=2, background_star_count=20)
    animator = Animator(config, [make_asset(1), make_asset(2)], fps=30, seed=5)

    frames = list(generate_raster_frames(animator, max_frames=4))

    assert len(frames) == 4
    assert all(frame.size == (400, 300) for frame in frames)


def test_invalid_fps(quiet_config):
    with pytest.raises(ValueError):
        Animator(quiet_config, [], fps=0)
