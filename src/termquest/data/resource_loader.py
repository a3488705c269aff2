"""Asynchronous loading of puzzle clue files."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Sequence

from termquest.data import paths
from termquest.data.errors import ResourceLoadError
from termquest.domain.puzzle import Puzzle, PuzzleFile

logger = logging.getLogger(__name__)

READ_PUZZLE_FILES: tuple[str, ...] = ("clue1.txt", "clue2.txt", "clue3.txt")
READ_PUZZLE_SOLUTION: tuple[str, ...] = ("FIT", "3146", "SECRET")
READ_PUZZLE_DESCRIPTION = (
    "Read the files to find the secret code. Use 'ls' to list files and 'cat' to read them."
)

_STATUS_NOT_FOUND = 404
_STATUS_UNREADABLE = 500


class PuzzleResourceLoader:
    """Resolves named puzzle resources to files under a base directory."""

    def __init__(self, base_path: Path | str | None = None) -> None:
        self._base_path = paths.get_puzzles_path(base_path)

    @property
    def base_path(self) -> Path:
        return self._base_path

    async def load_file(self, name: str) -> PuzzleFile:
        """Read one resource; raise ResourceLoadError with an HTTP-like status."""
        path = self._base_path / name
        try:
            content = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError as exc:
            logger.debug("Puzzle resource not found: %s", path)
            raise ResourceLoadError(name, _STATUS_NOT_FOUND) from exc
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Unable to read puzzle resource %s: %s", path, exc)
            raise ResourceLoadError(name, _STATUS_UNREADABLE, str(exc)) from exc
        return PuzzleFile(name=name, content=content)

    async def load_files(self, names: Sequence[str]) -> list[PuzzleFile]:
        """Load every named resource; any single failure fails the whole batch."""
        return list(await asyncio.gather(*(self.load_file(name) for name in names)))


async def load_read_puzzle(loader: PuzzleResourceLoader) -> Puzzle:
    """Assemble the three-clue reading puzzle."""
    files = await loader.load_files(READ_PUZZLE_FILES)
    return Puzzle(
        description=READ_PUZZLE_DESCRIPTION,
        files=files,
        solution=list(READ_PUZZLE_SOLUTION),
    )
