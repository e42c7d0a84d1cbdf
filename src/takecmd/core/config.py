"""Exercise settings: value pools and numeric ranges.

Settings are loaded once at startup and passed explicitly to each
generator. They come from a human-edited YAML or JSON document:

    scenario:
      types: [tsunami, earthquake, ...]
      distance: {min: 0.1, max: 5.0}
    personnel:
      numbers: {min: 3, max: 7}
      skills: [cooking, carpentry, ...]
    resources:
      items: [blankets, flashlights, ...]

Configuration is located in order:
1. TAKECMD_CONFIG environment variable
2. ./config/takecmd.yaml in the working directory
3. Package default (default_config/takecmd.yaml)

Example usage:
    from takecmd.core.config import load_settings

    settings = load_settings(Path("config/flood_drill.yaml"))
"""

import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Tuple

import yaml

from takecmd.core.entities import secondary_skill_pool
from takecmd.core.errors import InvalidConfiguration

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TAKECMD_CONFIG"
DEFAULT_CONFIG_NAME = "takecmd.yaml"

_MISSING = object()


def _check_pool(name: str, pool: Tuple[str, ...], min_size: int = 1) -> None:
    if any(not isinstance(item, str) or not item.strip() for item in pool):
        raise InvalidConfiguration(f"{name} must contain only non-empty strings")
    if len(pool) < min_size:
        raise InvalidConfiguration(
            f"{name} needs at least {min_size} entries, got {len(pool)}"
        )
    if len(set(pool)) != len(pool):
        raise InvalidConfiguration(f"{name} contains duplicate entries")


@dataclass(frozen=True)
class ScenarioSettings:
    """Disaster types and how far away the subject can be.

    Attributes:
        types: Disaster types a scenario is drawn from.
        distance_min: Minimum distance (mi) from the disaster site, > 0.
        distance_max: Maximum distance (mi) from the disaster site.
    """
    types: Tuple[str, ...]
    distance_min: float
    distance_max: float

    def __post_init__(self):
        _check_pool("scenario.types", self.types)
        for key, value in (("min", self.distance_min), ("max", self.distance_max)):
            if not math.isfinite(value):
                raise InvalidConfiguration(f"scenario.distance.{key} must be a finite number")
        if self.distance_min <= 0:
            raise InvalidConfiguration("scenario.distance.min must be positive")
        if self.distance_min > self.distance_max:
            raise InvalidConfiguration(
                "scenario.distance.min must not exceed scenario.distance.max"
            )


@dataclass(frozen=True)
class PersonnelSettings:
    """Roster size bounds and the pool of secondary skills.

    Attributes:
        min_count: Fewest personnel generated, >= 1.
        max_count: Most personnel generated.
        skills: Secondary skills; each person lists three of them.
    """
    min_count: int
    max_count: int
    skills: Tuple[str, ...]

    def __post_init__(self):
        for key, value in (("min", self.min_count), ("max", self.max_count)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"personnel.numbers.{key} must be an integer")
        if self.min_count < 1:
            raise InvalidConfiguration("personnel.numbers.min must be at least 1")
        if self.min_count > self.max_count:
            raise InvalidConfiguration(
                "personnel.numbers.min must not exceed personnel.numbers.max"
            )
        _check_pool("personnel.skills", self.skills, min_size=3)
        if len(secondary_skill_pool(self.skills)) < 3:
            raise InvalidConfiguration(
                "personnel.skills needs at least 3 entries besides First Aid, CPR "
                "and Search and Rescue"
            )


@dataclass(frozen=True)
class ResourceSettings:
    """Pool of item names a resource set is drawn from."""
    items: Tuple[str, ...]

    def __post_init__(self):
        _check_pool("resources.items", self.items)


@dataclass(frozen=True)
class Settings:
    """Complete exercise configuration."""
    scenario: ScenarioSettings
    personnel: PersonnelSettings
    resources: ResourceSettings

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        """Build settings from a parsed settings document.

        Raises:
            InvalidConfiguration: If a key is missing or has the wrong type.
        """
        return cls(
            scenario=ScenarioSettings(
                types=_string_list(data, "scenario.types"),
                distance_min=_number(data, "scenario.distance.min"),
                distance_max=_number(data, "scenario.distance.max"),
            ),
            personnel=PersonnelSettings(
                min_count=_lookup(data, "personnel.numbers.min"),
                max_count=_lookup(data, "personnel.numbers.max"),
                skills=_string_list(data, "personnel.skills"),
            ),
            resources=ResourceSettings(
                items=_string_list(data, "resources.items"),
            ),
        )

    def to_dict(self) -> dict:
        """Convert to the settings document layout."""
        return {
            "scenario": {
                "types": list(self.scenario.types),
                "distance": {
                    "min": self.scenario.distance_min,
                    "max": self.scenario.distance_max,
                },
            },
            "personnel": {
                "numbers": {
                    "min": self.personnel.min_count,
                    "max": self.personnel.max_count,
                },
                "skills": list(self.personnel.skills),
            },
            "resources": {
                "items": list(self.resources.items),
            },
        }


def _lookup(data: Mapping[str, Any], dotted_key: str) -> Any:
    """Walk a nested mapping by dotted key."""
    node: Any = data
    for part in dotted_key.split("."):
        if not isinstance(node, Mapping):
            raise InvalidConfiguration(f"missing setting: {dotted_key}")
        node = node.get(part, _MISSING)
        if node is _MISSING:
            raise InvalidConfiguration(f"missing setting: {dotted_key}")
    return node


def _string_list(data: Mapping[str, Any], dotted_key: str) -> Tuple[str, ...]:
    value = _lookup(data, dotted_key)
    if not isinstance(value, (list, tuple)):
        raise InvalidConfiguration(f"{dotted_key} must be a list of strings")
    return tuple(value)


def _number(data: Mapping[str, Any], dotted_key: str) -> float:
    value = _lookup(data, dotted_key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfiguration(f"{dotted_key} must be a number")
    return float(value)


def load_settings(config_path: Path) -> Settings:
    """Load settings from a YAML or JSON file.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json)

    Returns:
        Validated Settings instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        InvalidConfiguration: If the format is unsupported or the
            document is malformed or not valid UTF-8
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        try:
            if config_path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            elif config_path.suffix == ".json":
                data = json.load(f)
            else:
                raise InvalidConfiguration(
                    f"Unsupported config format: {config_path.suffix}. "
                    "Use .yaml, .yml, or .json"
                )
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidConfiguration(f"Cannot parse {config_path}: {exc}") from exc

    if not isinstance(data, Mapping):
        raise InvalidConfiguration(f"{config_path} does not contain a settings mapping")

    logger.debug(f"Loaded settings from {config_path}")
    return Settings.from_dict(data)


def save_settings(settings: Settings, config_path: Path) -> None:
    """Save settings to a YAML or JSON file.

    Raises:
        InvalidConfiguration: If the format is not supported
    """
    config_path = Path(config_path)
    if config_path.suffix not in (".yaml", ".yml", ".json"):
        raise InvalidConfiguration(
            f"Unsupported config format: {config_path.suffix}. "
            "Use .yaml, .yml, or .json"
        )

    data = settings.to_dict()

    # Ensure parent directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        if config_path.suffix == ".json":
            json.dump(data, f, indent=2)
        else:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Wrote settings to {config_path}")


def get_default_config_path() -> Path:
    """Get the settings document used when none is given.

    Checks in order:
    1. TAKECMD_CONFIG environment variable
    2. ./config/takecmd.yaml in the working directory
    3. Package data directory (fallback)
    """
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return Path(env_path)

    cwd_config = Path.cwd() / "config" / DEFAULT_CONFIG_NAME
    if cwd_config.exists():
        return cwd_config

    return Path(__file__).parent / "default_config" / DEFAULT_CONFIG_NAME


def load_default_settings() -> Settings:
    """Load settings from the default location."""
    return load_settings(get_default_config_path())
