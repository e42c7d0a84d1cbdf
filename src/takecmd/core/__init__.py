"""Core layer: settings, sampling, and the scenario/personnel/resource generators."""

from takecmd.core.config import Settings, load_settings, load_default_settings
from takecmd.core.personnel import Person, generate_personnel
from takecmd.core.resources import ResourceSet, generate_resources
from takecmd.core.sampler import Sampler
from takecmd.core.scenario import Scenario, generate_scenario

__all__ = [
    "Settings",
    "load_settings",
    "load_default_settings",
    "Sampler",
    "Scenario",
    "generate_scenario",
    "Person",
    "generate_personnel",
    "ResourceSet",
    "generate_resources",
]
