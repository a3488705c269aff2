"""Value objects returned from line handlers."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class LineResult:
    """Outcome of one submitted line.

    ``show_prompt`` is False when the handler owns the next redraw: commands
    that clear the screen (``clear``, entering or quitting the RPG or race)
    and the race countdown until the race begins.
    """

    output: str = ""
    show_prompt: bool = True
