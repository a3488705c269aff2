"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from termquest.domain.transcript import DEFAULT_CAPACITY

_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_MIN_CAPACITY = 50


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "TerminalQuest"
        return Path.home() / "TerminalQuest"
    return Path.home() / ".config" / "terminal_quest"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_default_notes_path() -> Path:
    return get_user_data_dir() / "notes.json"


def debug_enabled() -> bool:
    """Return True only when TERMQUEST_DEBUG is explicitly set to '1'."""
    return os.getenv("TERMQUEST_DEBUG") == "1"


def default_config() -> Dict[str, Any]:
    return {
        "transcript_capacity": DEFAULT_CAPACITY,
        "notes_path": str(get_default_notes_path()),
        "puzzles_path": None,
        "log_level": _DEFAULT_LOG_LEVEL,
    }


def _normalize(raw: Dict[str, Any]) -> Dict[str, Any]:
    config = default_config()
    capacity = raw.get("transcript_capacity")
    if isinstance(capacity, int) and not isinstance(capacity, bool) and capacity >= _MIN_CAPACITY:
        config["transcript_capacity"] = capacity
    notes_path = raw.get("notes_path")
    if isinstance(notes_path, str) and notes_path:
        config["notes_path"] = notes_path
    puzzles_path = raw.get("puzzles_path")
    if isinstance(puzzles_path, str) and puzzles_path:
        config["puzzles_path"] = puzzles_path
    log_level = raw.get("log_level")
    if isinstance(log_level, str) and log_level.upper() in _LOG_LEVELS:
        config["log_level"] = log_level.upper()
    return config


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except Exception:
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def resolve_log_level(config: Dict[str, Any]) -> int:
    """Map the configured level name to a logging level, honouring the debug flag."""
    if debug_enabled():
        return logging.DEBUG
    return getattr(logging, str(config.get("log_level", _DEFAULT_LOG_LEVEL)), logging.WARNING)
