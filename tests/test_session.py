"""Tests for the interactive session driver."""

import io

import pytest

from takecmd.core.errors import InsufficientPool
from takecmd.narration.narrator import COMMAND_PROMPT, PERSONNEL_HEADING, RESOURCES_HEADING
from takecmd.session import CLEAR_SCREEN, Briefing, Session, SessionSeeds, SessionState


def make_session(settings, seed=42, response="Evacuate north.\n", clear_screen=True):
    stdin = io.StringIO(response)
    stdout = io.StringIO()
    session = Session(
        settings,
        seeds=SessionSeeds(random_seed=seed),
        stdin=stdin,
        stdout=stdout,
        clear_screen=clear_screen,
    )
    return session, stdin, stdout


class TestSessionSeeds:
    """Test per-generator sampler streams."""

    def test_streams_created(self):
        """A sampler stream exists for each generator."""
        seeds = SessionSeeds(random_seed=42)

        assert seeds.scenario is not None
        assert seeds.personnel is not None
        assert seeds.resources is not None

    def test_streams_are_independent(self):
        """Streams are seeded differently."""
        seeds = SessionSeeds(random_seed=42)
        draws = [
            [s.uniform_int(0, 10**9) for _ in range(3)]
            for s in (seeds.scenario, seeds.personnel, seeds.resources)
        ]
        assert draws[0] != draws[1] != draws[2]

    def test_unseeded(self):
        """No seed still yields working streams."""
        seeds = SessionSeeds()
        assert 0 <= seeds.scenario.uniform_int(0, 5) <= 5


class TestSessionLifecycle:
    """Test the Generating -> Presenting -> AwaitingInput -> Done sequence."""

    def test_run_walks_all_states(self, settings):
        """run() ends in DONE and returns the briefing."""
        session, _, _ = make_session(settings)
        assert session.state is SessionState.GENERATING

        briefing = session.run()

        assert session.state is SessionState.DONE
        assert isinstance(briefing, Briefing)
        assert session.briefing is briefing

    def test_step_by_step(self, settings):
        """Each step advances to the next state."""
        session, _, _ = make_session(settings)

        session.generate()
        assert session.state is SessionState.PRESENTING
        session.present()
        assert session.state is SessionState.AWAITING_INPUT
        session.await_input()
        assert session.state is SessionState.DONE

    def test_out_of_order_call(self, settings):
        """Presenting before generating is an error."""
        session, _, _ = make_session(settings)
        with pytest.raises(RuntimeError, match="generating"):
            session.present()

    def test_cannot_run_twice(self, settings):
        """A finished session cannot be rerun."""
        session, _, _ = make_session(settings)
        session.run()
        with pytest.raises(RuntimeError):
            session.run()


class TestSessionOutput:
    """Test what the user sees and what is read back."""

    def test_output_layout(self, settings):
        """Screen clear, three sections, then the prompt."""
        session, _, stdout = make_session(settings)
        briefing = session.run()
        output = stdout.getvalue()

        assert output.startswith(CLEAR_SCREEN + "Scenario:\n")
        assert briefing.render() in output
        assert output.endswith(COMMAND_PROMPT + "\n")

    def test_no_clear(self, settings):
        """clear_screen=False omits the reset sequence."""
        session, _, stdout = make_session(settings, clear_screen=False)
        session.run()
        assert CLEAR_SCREEN not in stdout.getvalue()

    def test_reads_exactly_one_line(self, settings):
        """Only the first line of input is consumed."""
        session, stdin, _ = make_session(settings, response="first\nsecond\n")
        session.run()
        assert stdin.read() == "second\n"

    def test_end_of_input(self, settings):
        """Closed input counts as a submitted line."""
        session, _, _ = make_session(settings, response="")
        session.run()
        assert session.state is SessionState.DONE

    def test_fixed_roster_paragraph_count(self, make_settings):
        """With min = max = 3 the briefing has exactly three personnel paragraphs."""
        settings = make_settings(numbers=(3, 3))
        for seed in range(20):
            session, _, stdout = make_session(settings, seed=seed, clear_screen=False)
            briefing = session.run()

            assert len(briefing.personnel) == 3
            section = stdout.getvalue().split(PERSONNEL_HEADING)[1].split(RESOURCES_HEADING)[0]
            assert len([p for p in section.split("\n\n") if p.strip()]) == 3

    def test_same_seed_same_briefing(self, settings):
        """Seeded sessions are reproducible."""
        first, _, _ = make_session(settings, seed=7)
        second, _, _ = make_session(settings, seed=7)
        assert first.run() == second.run()


class TestSessionErrors:
    """Test that failures leave no partial briefing."""

    def test_generation_error_prints_nothing(self, settings, monkeypatch):
        """A generator failure propagates before anything is written."""
        def fail(settings, sampler):
            raise InsufficientPool("requested 6 distinct values from a pool of 3")

        monkeypatch.setattr("takecmd.session.generate_resources", fail)
        session, _, stdout = make_session(settings)

        with pytest.raises(InsufficientPool):
            session.run()

        assert stdout.getvalue() == ""
        assert session.state is SessionState.GENERATING
