"""Service layer exports."""

from .command_table import CommandContext, CommandTable, parse_command_line
from .mode_machine import ModeStateMachine
from .puzzle_controller import PuzzleController
from .race_engine import CommandRaceEngine
from .results import LineResult
from .rpg_engine import RPGEngine
from .terminal import Terminal

__all__ = [
    "CommandContext",
    "CommandTable",
    "parse_command_line",
    "ModeStateMachine",
    "PuzzleController",
    "CommandRaceEngine",
    "LineResult",
    "RPGEngine",
    "Terminal",
]
