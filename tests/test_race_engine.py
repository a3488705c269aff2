import pytest

from helpers.builders import make_terminal, transcript_of
from termquest.core.scheduler import ManualScheduler, ManualTimer
from termquest.domain.race_state import RacePhase
from termquest.domain.session import Mode, PuzzlePhase, RaceMode
from termquest.services.content import CHALLENGE_BANNER
from termquest.services.puzzle_controller import LOADING_MESSAGE
from termquest.services.race_engine import compute_result


def _race_state(terminal):
    active = terminal.session.active
    assert isinstance(active, RaceMode)
    return active.state


def test_compute_result_scores_words_and_chars() -> None:
    result = compute_result("ls -la", 2.0)

    assert result.wpm == 60
    assert result.cpm == 180


def test_compute_result_clamps_tiny_elapsed_time() -> None:
    result = compute_result("ls -la", 0.0)

    assert result.elapsed_seconds == 0.0
    assert result.wpm == 1200
    assert result.cpm == 3600


def test_commandrace_shows_target_and_waits(terminal) -> None:
    result = terminal.submit("commandrace")

    assert terminal.mode is Mode.RACE
    assert "=== Command Race ===" in result.output
    assert "Your command: ls -la" in result.output
    assert terminal.prompt == "race> "
    assert _race_state(terminal).phase is RacePhase.WAITING
    assert "Type 'start' to begin" in terminal.submit("hello").output


def test_full_race_reports_speed(terminal, scheduler) -> None:
    terminal.submit("commandrace")

    start = terminal.submit("start")
    assert start.output == "Get ready...\n3"
    assert start.show_prompt is False
    assert terminal.session.prompt_visible is False

    scheduler.advance(3)
    lines = transcript_of(terminal).lines
    assert lines[-4:] == ["2", "1", "GO!", "Type: ls -la"]
    assert terminal.session.prompt_visible is True
    assert _race_state(terminal).phase is RacePhase.RACING

    scheduler.advance(2)
    result = terminal.submit("ls -la")

    assert "🏁 Finished!" in result.output
    assert "Time: 2.00s" in result.output
    assert "WPM: 60" in result.output
    assert "CPM: 180" in result.output
    assert _race_state(terminal).phase is RacePhase.FINISHED


def test_input_during_countdown_is_held(terminal, scheduler) -> None:
    terminal.submit("commandrace")
    terminal.submit("start")

    result = terminal.submit("ls -la")

    assert result.output == "Please wait for the countdown to finish..."
    assert result.show_prompt is False
    assert _race_state(terminal).phase is RacePhase.COUNTDOWN


def test_mistyped_command_keeps_racing(terminal, scheduler) -> None:
    terminal.submit("commandrace")
    terminal.submit("start")
    scheduler.advance(3)

    result = terminal.submit("ls -al")

    assert result.output.startswith("✗ Not quite!")
    assert "You typed: ls -al" in result.output
    assert _race_state(terminal).phase is RacePhase.RACING


def test_play_again_starts_a_fresh_race(terminal, scheduler) -> None:
    terminal.submit("commandrace")
    terminal.submit("start")
    scheduler.advance(3)
    terminal.submit("ls -la")
    finished = _race_state(terminal)

    result = terminal.submit("play again")

    state = _race_state(terminal)
    assert state is not finished
    assert state.phase is RacePhase.WAITING
    assert state.epoch > finished.epoch
    assert "Your command: ls -la" in result.output


def test_tick_after_quit_does_nothing(terminal, scheduler) -> None:
    terminal.submit("commandrace")
    terminal.submit("start")
    handle = _race_state(terminal).countdown_handle
    assert isinstance(handle, ManualTimer)

    terminal.submit("quit")
    assert scheduler.pending_timers == 0
    before = transcript_of(terminal).lines

    handle.callback()
    scheduler.advance(5)

    assert transcript_of(terminal).lines == before
    assert terminal.mode is Mode.NORMAL
    assert terminal.session.prompt_visible is True


def test_switching_to_rpg_mid_countdown_cancels_the_race(terminal, scheduler) -> None:
    terminal.submit("commandrace")
    terminal.submit("start")

    result = terminal.submit("rpg")

    assert result.output.startswith("Exiting command race...")
    assert "=== Terminal RPG ===" in result.output
    assert terminal.mode is Mode.RPG
    assert scheduler.pending_timers == 0

    scheduler.advance(5)
    assert "GO!" not in transcript_of(terminal).lines


def test_race_runs_without_an_output_sink() -> None:
    scheduler = ManualScheduler()
    terminal = make_terminal(scheduler, with_sink=False)

    terminal.submit("commandrace")
    terminal.submit("start")
    scheduler.advance(4)

    assert "WPM" in terminal.submit("ls -la").output


def test_empty_corpus_is_rejected() -> None:
    with pytest.raises(ValueError):
        make_terminal(corpus=())


def test_puzzle_during_countdown_cancels_race_and_loads(terminal, scheduler) -> None:
    terminal.submit("commandrace")
    terminal.submit("start")

    result = terminal.submit("puzzle")

    assert result.output.startswith("Exiting command race...")
    assert result.output.endswith(LOADING_MESSAGE)
    assert scheduler.pending_timers == 0
    scheduler.run_pending()
    assert terminal.mode is Mode.PUZZLE
    assert terminal.session.active.phase is PuzzlePhase.ACTIVE


def test_quit_while_waiting_shows_banner(terminal) -> None:
    terminal.submit("commandrace")

    result = terminal.submit("quit")

    assert result.output.startswith("Exiting command race...")
    assert CHALLENGE_BANNER in result.output
    assert result.show_prompt is False
    assert terminal.mode is Mode.NORMAL


def test_quit_after_finishing_shows_banner(terminal, scheduler) -> None:
    terminal.submit("commandrace")
    terminal.submit("start")
    scheduler.advance(3)
    terminal.submit("ls -la")

    result = terminal.submit("quit")

    assert result.output == f"Exiting command race...\n{CHALLENGE_BANNER}"
    assert terminal.mode is Mode.NORMAL
    assert scheduler.pending_timers == 0
