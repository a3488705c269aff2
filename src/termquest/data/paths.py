"""Helpers for resolving bundled data file locations."""
from __future__ import annotations

from pathlib import Path


def get_package_root() -> Path:
    """Return the termquest package directory."""
    return Path(__file__).resolve().parents[1]


def get_puzzles_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing puzzle clue files."""
    if base_path is not None:
        return Path(base_path)
    return get_package_root() / "data" / "puzzles"
