"""Render generated records as a console briefing.

Every renderer is a pure function of its records; all randomness was
spent during generation. Templates take named fields only.
"""

from typing import List, Sequence

from takecmd.core.entities import Training
from takecmd.core.personnel import Person
from takecmd.core.resources import ResourceSet
from takecmd.core.scenario import Scenario
from takecmd.narration.text import INDENT, age_article, indefinite_article, join_list, wrap

SCENARIO_HEADING = "Scenario:"
PERSONNEL_HEADING = "Personnel:"
RESOURCES_HEADING = "Resources:"
COMMAND_PROMPT = "How would you command these personnel and resources in this scenario?"

BULLET = "-"


def _has(flag: bool) -> str:
    return "has" if flag else "doesn't have"


def scenario_text(
    *,
    occurred_time: str,
    minutes_ago: int,
    disaster_type: str,
    headcount: int,
    location: str,
    distance: float,
    emergency_called: bool,
) -> str:
    """Scenario paragraph before wrapping."""
    others = "other" if headcount == 1 else "others"
    called = "has" if emergency_called else "hasn't"
    return (
        f"At approximately {occurred_time} hours ({minutes_ago} minutes ago) "
        f"{indefinite_article(disaster_type)} {disaster_type} occurred. "
        f"You and {headcount} {others} are located at {location}, "
        f"an estimated {distance:.2f} mi from the disaster site. "
        f"911 {called} been called."
    )


def person_text(
    *,
    name: str,
    age: int,
    gender: str,
    occupation: str,
    pronoun: str,
    possessive: str,
    trainings: Sequence[tuple],
    skills: Sequence[str],
) -> str:
    """Person paragraph before wrapping.

    Args:
        trainings: (training display name, held) pairs in display order.
    """
    sentences = [f"{name} is {age_article(age)} {age}-year-old {gender} {occupation}."]
    for training_name, held in trainings:
        sentences.append(f"{pronoun} {_has(held)} {training_name} training.")
    sentences.append(f"{possessive} other skills include {join_list(skills)}.")
    return " ".join(sentences)


def render_scenario(scenario: Scenario, headcount: int) -> str:
    """Render a scenario as one wrapped paragraph.

    Args:
        scenario: Generated scenario.
        headcount: Number of personnel with the user.
    """
    return wrap(scenario_text(
        occurred_time=scenario.occurred_time,
        minutes_ago=scenario.occurred_minutes_ago,
        disaster_type=scenario.type,
        headcount=headcount,
        location=scenario.subject_location,
        distance=scenario.subject_distance,
        emergency_called=scenario.emergency_called,
    ))


def render_person(person: Person) -> str:
    """Render a person as one wrapped paragraph."""
    return wrap(person_text(
        name=person.name,
        age=person.age,
        gender=person.gender.value,
        occupation=person.occupation,
        pronoun=person.gender.subject_pronoun,
        possessive=person.gender.possessive_pronoun,
        trainings=[(t.value, person.has_training(t)) for t in Training],
        skills=person.skills,
    ))


def render_resources(resources: ResourceSet) -> str:
    """Render a resource set as bullet lines, gas and cash last."""
    lines = [f"{INDENT}{BULLET} {item}" for item in resources.items]
    lines.append(f"{INDENT}{BULLET} {resources.gas_gallons:.1f} gallons of gas")
    lines.append(f"{INDENT}{BULLET} ${resources.cash_usd:.2f} in cash")
    return "\n".join(lines)


def render_briefing(
    scenario: Scenario,
    personnel: Sequence[Person],
    resources: ResourceSet,
) -> str:
    """Render the three labeled sections of a briefing.

    Each entry is followed by a blank line.
    """
    lines: List[str] = [SCENARIO_HEADING, render_scenario(scenario, len(personnel)), ""]

    lines.append(PERSONNEL_HEADING)
    for person in personnel:
        lines.append(render_person(person))
        lines.append("")

    lines.append(RESOURCES_HEADING)
    lines.append(render_resources(resources))
    lines.append("")
    return "\n".join(lines)
