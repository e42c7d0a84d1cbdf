"""Personnel generation: the roster of people available to the user."""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from takecmd.core.config import Settings
from takecmd.core.entities import TRAINING_LIKELIHOOD, Gender, Training, secondary_skill_pool
from takecmd.core.pools import ADULT_AGE_RANGE, FIRST_NAMES, JOB_AREAS, JOB_TYPES, LAST_NAMES
from takecmd.core.sampler import Sampler

logger = logging.getLogger(__name__)

# Secondary skills listed for each person
SKILLS_PER_PERSON = 3


@dataclass(frozen=True)
class Person:
    """A generated member of the roster.

    Attributes:
        age: Age in years (adult range).
        gender: Gender, which also selects name pool and pronouns.
        name: "First Last", first name consistent with gender.
        occupation: Two-word job title, e.g. "Marketing Coordinator".
        first_aid_trained: Holds First Aid training (~30%).
        cpr_trained: Holds CPR training (~30%).
        sar_trained: Holds Search and Rescue training (~10%).
        skills: Three distinct secondary skills from the configured pool.
    """
    age: int
    gender: Gender
    name: str
    occupation: str
    first_aid_trained: bool
    cpr_trained: bool
    sar_trained: bool
    skills: Tuple[str, ...]

    def has_training(self, training: Training) -> bool:
        """Check whether this person holds a tracked training."""
        return {
            Training.FIRST_AID: self.first_aid_trained,
            Training.CPR: self.cpr_trained,
            Training.SAR: self.sar_trained,
        }[training]


def generate_person(settings: Settings, sampler: Sampler) -> Person:
    """Generate a single person.

    Args:
        settings: Exercise settings (supplies the skills pool).
        sampler: Randomness source.

    Returns:
        A new Person.
    """
    gender = sampler.pick_one(list(Gender))
    name = f"{sampler.pick_one(FIRST_NAMES[gender])} {sampler.pick_one(LAST_NAMES)}"
    occupation = f"{sampler.pick_one(JOB_AREAS)} {sampler.pick_one(JOB_TYPES)}"

    return Person(
        age=sampler.uniform_int(*ADULT_AGE_RANGE),
        gender=gender,
        name=name,
        occupation=occupation,
        first_aid_trained=sampler.weighted_bool(TRAINING_LIKELIHOOD[Training.FIRST_AID]),
        cpr_trained=sampler.weighted_bool(TRAINING_LIKELIHOOD[Training.CPR]),
        sar_trained=sampler.weighted_bool(TRAINING_LIKELIHOOD[Training.SAR]),
        skills=tuple(
            sampler.pick_set(secondary_skill_pool(settings.personnel.skills), SKILLS_PER_PERSON)
        ),
    )


def generate_personnel(settings: Settings, sampler: Sampler) -> List[Person]:
    """Generate a roster sized within the configured bounds.

    Order is generation order and only affects display.

    Args:
        settings: Exercise settings.
        sampler: Randomness source.

    Returns:
        List of Person, length in [min_count, max_count].
    """
    config = settings.personnel
    count = sampler.uniform_int(config.min_count, config.max_count)
    logger.debug(f"Generating {count} personnel")
    return [generate_person(settings, sampler) for _ in range(count)]
