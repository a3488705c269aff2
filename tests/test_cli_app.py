import asyncio
import io
from pathlib import Path

from helpers.builders import make_terminal, transcript_of
from termquest.data.notes_store import InMemoryNotesStore, JsonNotesStore
from termquest.domain.transcript import Transcript
from termquest.presentation.cli import app
from termquest.presentation.cli.render import ConsoleView, render_highlight


def test_console_view_swallows_expected_echo_once() -> None:
    stream = io.StringIO()
    view = ConsoleView(stream, ansi=False)
    transcript = Transcript(listener=view)

    view.expect_echo("user@computer:~$ ls")
    transcript.append("user@computer:~$ ls")
    transcript.append("user@computer:~$ ls")

    assert stream.getvalue() == "user@computer:~$ ls\n"


def test_console_view_clear_writes_ansi_sequence() -> None:
    stream = io.StringIO()
    view = ConsoleView(stream)

    view.on_clear()

    assert stream.getvalue() == "\033[2J\033[H"


def test_render_highlight_follows_tab(terminal) -> None:
    terminal.submit("ls")
    assert render_highlight(terminal.session) is None

    terminal.press("Tab")

    assert render_highlight(terminal.session) == "  ▶ ls"


def test_feed_line_submits_typed_text() -> None:
    terminal = make_terminal()
    view = ConsoleView(io.StringIO())

    app.feed_line(terminal, view, "echo hello")

    assert transcript_of(terminal).lines[-1] == "hello"
    assert terminal.session.history == ["echo hello"]


def test_feed_line_maps_caret_escape_to_ctrl_key() -> None:
    terminal = make_terminal()
    view = ConsoleView(io.StringIO())
    terminal.submit("echo hi")

    app.feed_line(terminal, view, "^L")

    assert transcript_of(terminal).lines == []
    assert terminal.session.history == ["echo hi"]


def test_notes_store_falls_back_to_memory_on_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "notes.json"
    path.write_text("[]", encoding="utf-8")

    store = app._build_notes_store({"notes_path": str(path)})

    assert isinstance(store, InMemoryNotesStore)
    assert not isinstance(store, JsonNotesStore)


def test_notes_store_uses_json_file(tmp_path: Path) -> None:
    store = app._build_notes_store({"notes_path": str(tmp_path / "notes.json")})

    assert isinstance(store, JsonNotesStore)


def test_stdin_reader_delivers_lines_then_eof(monkeypatch) -> None:
    answers = iter(["ls", "pwd"])
    prompts = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)

    async def scenario():
        reader = app.StdinReader(asyncio.get_running_loop())
        assert reader.thread.daemon is True
        return [await reader.readline(prompt) for prompt in ("a> ", "b> ", "c> ")]

    assert asyncio.run(scenario()) == ["ls", "pwd", None]
    assert prompts == ["a> ", "b> ", "c> "]


def test_run_says_goodbye_after_ctrl_c(monkeypatch, capsys) -> None:
    async def interrupted(settings) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(app, "_run", interrupted)

    app.run({})

    assert capsys.readouterr().out.endswith("Goodbye!\n")
