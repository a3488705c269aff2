import pytest

from termquest.core.rng import RNG
from termquest.domain.rpg_state import HOME_LOCATION, MAX_HEALTH, RPGState
from termquest.domain.session import Mode, PuzzlePhase
from termquest.services.puzzle_controller import LOADING_MESSAGE
from termquest.services.rpg_engine import (
    DUNGEON_LOCATION,
    RPG_HELP,
    UNKNOWN_ACTION_MESSAGE,
    RPGEngine,
)


@pytest.fixture
def engine() -> RPGEngine:
    return RPGEngine(RNG(7))


def test_new_state_starts_at_home_with_full_health(engine) -> None:
    state = engine.new_state()

    assert state.health == MAX_HEALTH
    assert state.level == 1
    assert state.xp == 0
    assert state.location == HOME_LOCATION


def test_actions_match_full_line_only(engine) -> None:
    state = engine.new_state()

    assert engine.handle(state, "cd nowhere").output == UNKNOWN_ACTION_MESSAGE
    assert engine.handle(state, "fight now").output == UNKNOWN_ACTION_MESSAGE
    assert engine.handle(state, "  HELP ").output == RPG_HELP
    assert state.xp == 0


def test_cd_moves_between_home_and_dungeon(engine) -> None:
    state = engine.new_state()

    engine.handle(state, "cd dungeon")
    assert state.location == DUNGEON_LOCATION
    assert state.xp == 10

    engine.handle(state, "cd ..")
    assert state.location == HOME_LOCATION
    assert state.xp == 15


@pytest.mark.parametrize("seed", range(10))
def test_heal_never_exceeds_max_health(seed: int) -> None:
    engine = RPGEngine(RNG(seed))
    state = RPGState(health=95)

    engine.handle(state, "heal")

    assert state.health == MAX_HEALTH
    assert state.xp == 5


@pytest.mark.parametrize("seed", range(10))
def test_fight_deals_damage_in_range(seed: int) -> None:
    engine = RPGEngine(RNG(seed))
    state = RPGState()

    engine.handle(state, "fight")

    assert 71 <= state.health <= 90
    assert state.xp == 15


def test_level_up_restores_health(engine) -> None:
    state = RPGState(health=40, xp=45)

    outcome = engine.handle(state, "look")

    assert outcome.leveled_up is True
    assert state.level == 2
    assert state.health == MAX_HEALTH
    assert "Level up!" in outcome.output


def test_level_up_happens_once_per_command(engine) -> None:
    state = RPGState(xp=180)

    engine.handle(state, "pwd")

    assert state.level == 2


def test_death_is_reported(engine) -> None:
    state = RPGState(health=1)

    outcome = engine.handle(state, "fight")

    assert outcome.died is True
    assert state.health == 0
    assert "GAME OVER" in outcome.output


def test_dying_in_the_terminal_returns_to_normal(terminal) -> None:
    terminal.submit("rpg")
    terminal.session.active.state.health = 1

    result = terminal.submit("fight")

    assert terminal.mode is Mode.NORMAL
    assert "GAME OVER" in result.output
    assert "=== Choose your next challenge ===" in result.output


def test_rpg_prompt_shows_health_and_location(terminal) -> None:
    terminal.submit("rpg")

    assert terminal.prompt == f"[HP 100] {HOME_LOCATION} > "
    terminal.submit("cd dungeon")
    assert terminal.prompt == f"[HP 100] {DUNGEON_LOCATION} > "


def test_quit_leaves_the_rpg(terminal) -> None:
    terminal.submit("rpg")

    result = terminal.submit("quit")

    assert result.output.startswith("Exiting RPG...")
    assert terminal.mode is Mode.NORMAL


def test_commandrace_from_the_rpg_switches_games(terminal) -> None:
    terminal.submit("rpg")

    result = terminal.submit("commandrace")

    assert result.output.startswith("Exiting RPG...")
    assert "=== Command Race ===" in result.output
    assert terminal.mode is Mode.RACE


def test_puzzle_from_the_rpg_starts_loading(terminal, scheduler) -> None:
    terminal.submit("rpg")

    result = terminal.submit("puzzle")

    assert result.output == f"Exiting RPG...\n{LOADING_MESSAGE}"
    assert terminal.mode is Mode.PUZZLE
    scheduler.run_pending()
    assert terminal.session.active.phase is PuzzlePhase.ACTIVE


def test_entering_and_quitting_the_rpg_redraws_the_screen(terminal) -> None:
    assert terminal.submit("rpg").show_prompt is False
    assert terminal.submit("look").show_prompt is True
    assert terminal.submit("quit").show_prompt is False
