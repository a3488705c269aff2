"""Reading puzzle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True, frozen=True)
class PuzzleFile:
    """A named clue file the player can `cat`."""

    name: str
    content: str


@dataclass(slots=True)
class Puzzle:
    """A loaded puzzle: clue files plus the ordered answer parts."""

    description: str
    files: List[PuzzleFile] = field(default_factory=list)
    solution: List[str] = field(default_factory=list)

    def find_file(self, name: str) -> PuzzleFile | None:
        for puzzle_file in self.files:
            if puzzle_file.name == name:
                return puzzle_file
        return None

    @property
    def answer(self) -> str:
        """Concatenated solution, normalised for comparison."""
        return "".join(self.solution).lower()
