"""Core entity definitions shared across generators and the narrator.

Placed here to avoid circular imports between the record modules.
"""

from enum import Enum
from typing import Iterable, List


class Gender(Enum):
    """Gender of a generated person, with the pronouns used to describe them."""
    MALE = "male"
    FEMALE = "female"

    @property
    def subject_pronoun(self) -> str:
        return "He" if self is Gender.MALE else "She"

    @property
    def possessive_pronoun(self) -> str:
        return "His" if self is Gender.MALE else "Her"


class Training(Enum):
    """Trainings tracked individually on every person.

    Value is the display name used in briefings.
    """
    FIRST_AID = "First Aid"
    CPR = "CPR"
    SAR = "Search and Rescue"


# Likelihood (percent) that a person holds each tracked training
TRAINING_LIKELIHOOD = {
    Training.FIRST_AID: 30,
    Training.CPR: 30,
    Training.SAR: 10,
}


def secondary_skill_pool(skills: Iterable[str]) -> List[str]:
    """Drop skills that duplicate a tracked training (by name or abbreviation)."""
    tracked = {t.value.lower() for t in Training} | {t.name.lower() for t in Training}
    return [s for s in skills if s.strip().lower() not in tracked]
