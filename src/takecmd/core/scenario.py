"""Scenario generation: the disaster premise of a briefing."""

from dataclasses import dataclass

from takecmd.core.config import Settings
from takecmd.core.pools import HOUSE_NUMBER_RANGE, STREET_NAMES, STREET_SUFFIXES
from takecmd.core.sampler import Sampler

# How long ago the disaster happened, in minutes
MINUTES_AGO_RANGE = (5, 45)

# Decimal places kept on the subject distance
DISTANCE_DECIMALS = 2


@dataclass(frozen=True)
class Scenario:
    """A generated disaster premise.

    Attributes:
        type: Disaster type, one of the configured scenario types.
        occurred_time: 24-hour clock time as four zero-padded digits ("0745").
        occurred_minutes_ago: Minutes since the disaster (5-45).
        subject_location: Street address where the user and personnel are.
        subject_distance: Miles from the disaster site, two decimal places.
        emergency_called: Whether 911 has already been called.
    """
    type: str
    occurred_time: str
    occurred_minutes_ago: int
    subject_location: str
    subject_distance: float
    emergency_called: bool


def generate_clock_time(sampler: Sampler) -> str:
    """Random 24-hour clock time as four digits."""
    hour = sampler.uniform_int(0, 23)
    minute = sampler.uniform_int(0, 59)
    return f"{hour:02d}{minute:02d}"


def generate_address(sampler: Sampler) -> str:
    """Random short-form street address, e.g. "5447 Maple Ave"."""
    number = sampler.uniform_int(*HOUSE_NUMBER_RANGE)
    street = sampler.pick_one(STREET_NAMES)
    suffix = sampler.pick_one(STREET_SUFFIXES)
    return f"{number} {street} {suffix}"


def generate_scenario(settings: Settings, sampler: Sampler) -> Scenario:
    """Generate a scenario from the configured disaster types and distances.

    Args:
        settings: Exercise settings.
        sampler: Randomness source.

    Returns:
        A new Scenario.
    """
    config = settings.scenario
    return Scenario(
        type=sampler.pick_one(config.types),
        occurred_time=generate_clock_time(sampler),
        occurred_minutes_ago=sampler.uniform_int(*MINUTES_AGO_RANGE),
        subject_location=generate_address(sampler),
        subject_distance=sampler.uniform_float(
            config.distance_min, config.distance_max, DISTANCE_DECIMALS
        ),
        emergency_called=sampler.coin_flip(),
    )
