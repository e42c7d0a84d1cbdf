"""Narration layer: renders generated records as wrapped console prose."""

from takecmd.narration.narrator import (
    COMMAND_PROMPT,
    render_briefing,
    render_person,
    render_resources,
    render_scenario,
)

__all__ = [
    "COMMAND_PROMPT",
    "render_briefing",
    "render_person",
    "render_resources",
    "render_scenario",
]
