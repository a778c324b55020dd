"""Tests for the Pillow renderer."""

import random

from twinkle_sky.sky.render_context import RenderContext
from twinkle_sky.sky.renderer import Renderer
from twinkle_sky.sky.scene_state import Scene


def _rgb(scene: Scene):
    return Renderer(scene, RenderContext.night()).render_frame().convert("RGB")


def test_frame_matches_canvas_size(quiet_scene):
    frame = _rgb(quiet_scene)

    assert frame.size == (400, 300)
    assert frame.getpixel((0, 0)) == (0, 0, 0)


def test_gradient_background_is_brighter_in_the_middle(quiet_config):
    scene = Scene(quiet_config.replace(background="gradient"), rng=random.Random(0))
    frame = _rgb(scene)

    assert sum(frame.getpixel((200, 150))) > sum(frame.getpixel((0, 0)))


def test_frame_follows_resize(quiet_scene):
    renderer = Renderer(quiet_scene, RenderContext.night())
    quiet_scene.resize(200, 100)

    assert renderer.render_frame().size == (200, 100)


def test_open_popup_shows_image(quiet_config, make_asset):
    scene = Scene(quiet_config.replace(image_count=1), [make_asset(color="red")], rng=random.Random(3))
    scene.popup.show(scene.image_stars[0])

    red, green, blue = _rgb(scene).getpixel((200, 150))
    assert red > 200
    assert green < 60
    assert blue < 60


def test_shooting_stars_and_particles_are_drawn(quiet_scene):
    star = quiet_scene.spawn_shooting_star()
    star.x, star.y = 200, 150
    quiet_scene.expire_shooting_star(star)
    quiet_scene.spawn_shooting_star()

    frame = _rgb(quiet_scene)
    assert frame.getbbox() is not None
