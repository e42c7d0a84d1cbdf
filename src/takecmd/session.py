"""Interactive session: generate a briefing, show it, wait for a response.

A session moves through Generating -> Presenting -> AwaitingInput -> Done
exactly once. Nothing is printed until all three records exist, so a
generation error never leaves a partial briefing on screen.
"""

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO, Tuple

from takecmd.core.config import Settings
from takecmd.core.personnel import Person, generate_personnel
from takecmd.core.resources import ResourceSet, generate_resources
from takecmd.core.sampler import Sampler
from takecmd.core.scenario import Scenario, generate_scenario
from takecmd.narration.narrator import COMMAND_PROMPT, render_briefing

logger = logging.getLogger(__name__)

# Terminal reset sequence; clears the screen before the briefing
CLEAR_SCREEN = "\033c"


class SessionState(Enum):
    """Lifecycle of a single session."""
    GENERATING = "generating"
    PRESENTING = "presenting"
    AWAITING_INPUT = "awaiting_input"
    DONE = "done"


@dataclass
class SessionSeeds:
    """Independent sampler streams for each generator.

    Attributes:
        random_seed: Master seed for reproducibility. None draws fresh
            entropy for every stream.
    """

    random_seed: Optional[int] = None

    # Sampler streams (created in __post_init__)
    scenario: Optional[Sampler] = None
    personnel: Optional[Sampler] = None
    resources: Optional[Sampler] = None

    def __post_init__(self) -> None:
        """Initialize a separate stream per generator."""
        self.scenario = Sampler.from_seed(self._offset(0))
        self.personnel = Sampler.from_seed(self._offset(1))
        self.resources = Sampler.from_seed(self._offset(2))

    def _offset(self, n: int) -> Optional[int]:
        return None if self.random_seed is None else self.random_seed + n


@dataclass(frozen=True)
class Briefing:
    """The three records shown to the user in one session."""
    scenario: Scenario
    personnel: Tuple[Person, ...]
    resources: ResourceSet

    def render(self) -> str:
        return render_briefing(self.scenario, self.personnel, self.resources)


class Session:
    """Drives one interactive run.

    Args:
        settings: Exercise settings, loaded once at startup.
        seeds: Sampler streams. Defaults to unseeded streams.
        stdin: Stream the response is read from (default sys.stdin).
        stdout: Stream the briefing is written to (default sys.stdout).
        clear_screen: Clear the terminal before presenting.
    """

    def __init__(
        self,
        settings: Settings,
        seeds: Optional[SessionSeeds] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        clear_screen: bool = True,
    ) -> None:
        self.settings = settings
        self.seeds = seeds if seeds is not None else SessionSeeds()
        self.stdin = stdin
        self.stdout = stdout
        self.clear_screen = clear_screen
        self.state = SessionState.GENERATING
        self.briefing: Optional[Briefing] = None

    def _require(self, state: SessionState) -> None:
        if self.state is not state:
            raise RuntimeError(
                f"Session is {self.state.value}, expected {state.value}"
            )

    def generate(self) -> Briefing:
        """Generate scenario, personnel and resources, in that order."""
        self._require(SessionState.GENERATING)

        scenario = generate_scenario(self.settings, self.seeds.scenario)
        personnel = tuple(generate_personnel(self.settings, self.seeds.personnel))
        resources = generate_resources(self.settings, self.seeds.resources)
        logger.info(
            f"Generated {scenario.type} scenario with {len(personnel)} personnel "
            f"and {len(resources.items)} resource items"
        )

        self.briefing = Briefing(scenario=scenario, personnel=personnel, resources=resources)
        self.state = SessionState.PRESENTING
        return self.briefing

    def present(self) -> None:
        """Write the briefing and the command prompt."""
        self._require(SessionState.PRESENTING)
        out = self.stdout or sys.stdout

        text = self.briefing.render()
        if self.clear_screen:
            out.write(CLEAR_SCREEN)
        out.write(text)
        out.write(f"{COMMAND_PROMPT}\n")
        out.flush()

        self.state = SessionState.AWAITING_INPUT

    def await_input(self) -> None:
        """Block until the user submits one line; the content is discarded.

        End of input counts as an empty submission.
        """
        self._require(SessionState.AWAITING_INPUT)
        (self.stdin or sys.stdin).readline()
        logger.debug("Response received")
        self.state = SessionState.DONE

    def run(self) -> Briefing:
        """Run the full session and return what was shown."""
        briefing = self.generate()
        self.present()
        self.await_input()
        return briefing
