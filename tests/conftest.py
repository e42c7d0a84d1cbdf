"""Pytest fixtures for takecmd tests."""

import pytest

from takecmd.core.config import PersonnelSettings, ResourceSettings, ScenarioSettings, Settings
from takecmd.core.sampler import Sampler


@pytest.fixture
def default_seed() -> int:
    """Default random seed for reproducible tests."""
    return 42


@pytest.fixture
def sampler(default_seed) -> Sampler:
    """Sampler over a fixed-seed generator."""
    return Sampler.from_seed(default_seed)


@pytest.fixture
def settings_dict() -> dict:
    """A complete settings document."""
    return {
        "scenario": {
            "types": ["tsunami", "earthquake", "volcanic eruption", "ice storm"],
            "distance": {"min": 0.1, "max": 5.0},
        },
        "personnel": {
            "numbers": {"min": 3, "max": 7},
            "skills": ["cooking", "carpentry", "welding", "fishing", "sewing"],
        },
        "resources": {
            "items": [
                "blankets", "flashlights", "bottles of water", "tarps", "ropes",
                "shovels", "axes", "tents", "buckets", "crowbars", "whistles",
                "lighters", "hard hats", "road flares", "sleeping bags",
                "pocket knives", "camp stoves", "water filters", "gas cans",
                "dust masks", "rain ponchos", "first aid kits",
            ],
        },
    }


@pytest.fixture
def settings(settings_dict) -> Settings:
    """Validated settings built from settings_dict."""
    return Settings.from_dict(settings_dict)


@pytest.fixture
def make_settings():
    """Factory building settings directly, overriding only what a test cares about."""
    return _make_settings


def _make_settings(
    types=("tsunami",),
    distance=(0.1, 5.0),
    numbers=(3, 7),
    skills=("cooking", "carpentry", "welding"),
    items=("blankets", "flashlights", "tarps", "ropes", "shovels"),
) -> Settings:
    return Settings(
        scenario=ScenarioSettings(types=tuple(types), distance_min=distance[0], distance_max=distance[1]),
        personnel=PersonnelSettings(min_count=numbers[0], max_count=numbers[1], skills=tuple(skills)),
        resources=ResourceSettings(items=tuple(items)),
    )
