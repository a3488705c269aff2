import json
import logging
from pathlib import Path

from termquest.presentation.cli import config


def test_missing_config_returns_defaults(tmp_path: Path) -> None:
    loaded = config.load_config(tmp_path / "missing.json")

    assert loaded == config.default_config()


def test_invalid_json_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")

    assert config.load_config(path) == config.default_config()


def test_round_trip_keeps_valid_values(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    settings = config.default_config()
    settings["transcript_capacity"] = 120
    settings["log_level"] = "debug"
    settings["notes_path"] = str(tmp_path / "notes.json")

    config.save_config(settings, path)
    loaded = config.load_config(path)

    assert loaded["transcript_capacity"] == 120
    assert loaded["log_level"] == "DEBUG"
    assert loaded["notes_path"] == str(tmp_path / "notes.json")


def test_out_of_range_values_fall_back(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"transcript_capacity": 3, "log_level": "LOUD", "puzzles_path": ""}),
        encoding="utf-8",
    )

    loaded = config.load_config(path)

    assert loaded["transcript_capacity"] == config.default_config()["transcript_capacity"]
    assert loaded["log_level"] == "WARNING"
    assert loaded["puzzles_path"] is None


def test_debug_env_overrides_log_level(monkeypatch) -> None:
    monkeypatch.setenv("TERMQUEST_DEBUG", "1")

    assert config.resolve_log_level({"log_level": "ERROR"}) == logging.DEBUG


def test_log_level_without_debug_env(monkeypatch) -> None:
    monkeypatch.delenv("TERMQUEST_DEBUG", raising=False)

    assert config.resolve_log_level({"log_level": "ERROR"}) == logging.ERROR


def test_main_runs_with_loaded_settings(monkeypatch) -> None:
    from termquest import main as entry

    settings = config.default_config()
    seen = []
    monkeypatch.setattr(config, "load_config", lambda: settings)
    monkeypatch.setattr(entry, "configure_logging", lambda loaded: seen.append(("log", loaded)))
    monkeypatch.setattr(entry, "run", lambda loaded: seen.append(("run", loaded)))

    entry.main()

    assert seen == [("log", settings), ("run", settings)]
