"""Tests for StarfieldConfig."""

import pytest

from twinkle_sky.config import StarfieldConfig
from twinkle_sky.constants import CLICK_RADIUS, CONSTELLATION_DISTANCE, IMAGE_COUNT, MIN_STAR_DISTANCE


def test_defaults():
    config = StarfieldConfig()

    assert config.image_count == IMAGE_COUNT
    assert config.min_star_distance == MIN_STAR_DISTANCE
    assert config.click_radius == CLICK_RADIUS
    assert config.constellation_distance == CONSTELLATION_DISTANCE
    assert config.shooting_star_policy == "burst"
    assert config.background == "solid"
    assert config.constellation_members == "all"


def test_exclusion_zone_is_centred():
    constraints = StarfieldConfig(width=800, height=600, exclusion_radius=100).placement_constraints()

    assert constraints.exclusion is not None
    assert (constraints.exclusion.x, constraints.exclusion.y) == (400, 300)
    assert constraints.exclusion.radius == 100


def test_zero_exclusion_radius_disables_zone():
    assert StarfieldConfig(exclusion_radius=0).placement_constraints().exclusion is None


def test_replace_returns_modified_copy():
    config = StarfieldConfig()
    other = config.replace(spawn_probability=0.0)

    assert other.spawn_probability == 0.0
    assert config.spawn_probability != 0.0


@pytest.mark.parametrize(
    "changes",
    [
        {"shooting_star_policy": "bounce"},
        {"background": "plaid"},
        {"constellation_members": "nearest"},
        {"spawn_probability": 1.5},
        {"background_star_count": -1},
        {"width": 0},
        {"particle_life": 0},
        {"max_volume": 2.0},
    ],
)
def test_invalid_values_rejected(changes):
    with pytest.raises(ValueError):
        StarfieldConfig(**changes)
