"""Terminal RPG: an exact-phrase adventure driven by shell commands."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict

from termquest.core.rng import RNG
from termquest.domain.rpg_state import HOME_LOCATION, MAX_HEALTH, RPGState
from termquest.services.content import format_output

logger = logging.getLogger(__name__)

DUNGEON_LOCATION = f"{HOME_LOCATION}/dungeon"

FIGHT_DAMAGE_RANGE = (10, 29)
FIGHT_XP = 15
HEAL_RANGE = (10, 39)
HEAL_XP = 5
EXPLORE_XP_RANGE = (5, 20)
EXPLORE_DAMAGE_RANGE = (0, 15)

UNKNOWN_ACTION_MESSAGE = "Nothing happened... Type 'help' to see what you can do."

RPG_INTRO = format_output(
    [
        "=== Terminal RPG ===",
        "You wake up in a dark home directory. Only shell commands can save you.",
        "Type 'help' for actions and 'quit' to leave.",
    ]
)

RPG_HELP = format_output(
    [
        "Actions:",
        "  status             - Show your health, level and XP",
        "  look               - Look around",
        "  ls                 - List what is nearby",
        "  pwd                - Find out where you are",
        "  whoami             - Remember who you are",
        "  cd dungeon         - Enter the dungeon",
        "  cd ..              - Go back up",
        "  cat spellbook.txt  - Study the spellbook",
        "  explore            - Search for adventure",
        "  fight              - Fight whatever lurks here",
        "  heal               - Cast a healing spell",
        "  quit               - Leave the game",
    ]
)


@dataclass(slots=True)
class RpgOutcome:
    """What one RPG command produced."""

    output: str
    leveled_up: bool = False
    died: bool = False


RpgAction = Callable[[RPGState], str]


class RPGEngine:
    """Applies RPG actions looked up by their full, literal command line."""

    def __init__(self, rng: RNG) -> None:
        self._rng = rng
        self._actions: Dict[str, RpgAction] = {
            "help": self._help,
            "status": self._status,
            "look": self._look,
            "ls": self._ls,
            "pwd": self._pwd,
            "whoami": self._whoami,
            "cd dungeon": self._cd_dungeon,
            "cd ..": self._cd_up,
            "cat spellbook.txt": self._cat_spellbook,
            "explore": self._explore,
            "fight": self._fight,
            "heal": self._heal,
        }

    @staticmethod
    def new_state() -> RPGState:
        return RPGState()

    def handle(self, state: RPGState, line: str) -> RpgOutcome:
        """Apply one command, then the level-up and death checks in that order."""
        action = self._actions.get(line.strip().lower())
        if action is None:
            return RpgOutcome(output=UNKNOWN_ACTION_MESSAGE)
        lines = [action(state)]
        leveled_up = self._check_level_up(state)
        if leveled_up:
            lines.append(f"*** Level up! You are now level {state.level}. Health fully restored. ***")
        died = not state.is_alive
        if died:
            logger.debug("RPG hero died at level %d", state.level)
            lines.append("💀 You have been defeated. GAME OVER.")
        return RpgOutcome(output=format_output(lines), leveled_up=leveled_up, died=died)

    @staticmethod
    def _check_level_up(state: RPGState) -> bool:
        if state.xp < state.next_level_xp:
            return False
        state.level += 1
        state.health = MAX_HEALTH
        return True

    @staticmethod
    def _gain(state: RPGState, xp: int) -> str:
        state.xp += xp
        return f"(+{xp} XP)"

    def _help(self, state: RPGState) -> str:
        return RPG_HELP

    def _status(self, state: RPGState) -> str:
        return format_output(
            [
                f"Health: {state.health}/{MAX_HEALTH}",
                f"Level: {state.level}",
                f"XP: {state.xp}/{state.next_level_xp}",
                f"Location: {state.location}",
            ]
        )

    def _look(self, state: RPGState) -> str:
        if state.location == DUNGEON_LOCATION:
            text = "Torches flicker on damp stone. Something growls in the dark."
        else:
            text = "A quiet home directory. A staircase leads down to the dungeon."
        return f"{text} {self._gain(state, 5)}"

    def _ls(self, state: RPGState) -> str:
        if state.location == DUNGEON_LOCATION:
            listing = "goblin.sh  treasure.tar.gz  exit -> .."
        else:
            listing = "dungeon/  spellbook.txt"
        return f"{listing}\n{self._gain(state, 5)}"

    def _pwd(self, state: RPGState) -> str:
        return f"{state.location} {self._gain(state, 2)}"

    def _whoami(self, state: RPGState) -> str:
        return f"adventurer (level {state.level}) {self._gain(state, 2)}"

    def _cd_dungeon(self, state: RPGState) -> str:
        if state.location == DUNGEON_LOCATION:
            return "You are already in the dungeon."
        state.location = DUNGEON_LOCATION
        return f"You descend into the dungeon. {self._gain(state, 10)}"

    def _cd_up(self, state: RPGState) -> str:
        if state.location == HOME_LOCATION:
            return "You cannot go any higher than home."
        state.location = HOME_LOCATION
        return f"You climb back up to {HOME_LOCATION}. {self._gain(state, 5)}"

    def _cat_spellbook(self, state: RPGState) -> str:
        return format_output(
            [
                "📖 The spellbook reads: 'Those who read files gain wisdom.'",
                f"You learn a new spell. {self._gain(state, 20)}",
            ]
        )

    def _explore(self, state: RPGState) -> str:
        xp = self._rng.randint(*EXPLORE_XP_RANGE)
        damage = self._rng.randint(*EXPLORE_DAMAGE_RANGE)
        state.health = max(0, state.health - damage)
        if damage:
            found = f"You stumble into a trap and lose {damage} health."
        else:
            found = "You find a quiet corridor and a few coins."
        return f"{found} {self._gain(state, xp)}"

    def _fight(self, state: RPGState) -> str:
        damage = self._rng.randint(*FIGHT_DAMAGE_RANGE)
        state.health = max(0, state.health - damage)
        return format_output(
            [
                f"⚔️  You fight a wild process and take {damage} damage.",
                f"Health: {state.health}/{MAX_HEALTH} {self._gain(state, FIGHT_XP)}",
            ]
        )

    def _heal(self, state: RPGState) -> str:
        amount = self._rng.randint(*HEAL_RANGE)
        state.health = min(MAX_HEALTH, state.health + amount)
        return f"✨ You heal {amount} health. Health: {state.health}/{MAX_HEALTH} {self._gain(state, HEAL_XP)}"
