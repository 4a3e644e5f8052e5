from __future__ import annotations

import os
from pathlib import Path

import pytest

from bloc import app
from bloc.app import Editor
from bloc.terminal import TerminalError
from bloc.view.render import HIDE_CURSOR, SHOW_CURSOR
from virtual_terminal import VirtualTerminal

QUIT = b"\x05"
SAVE = b"\x13"


def run_session(keys: bytes, path: str | None = None, **size: int) -> Editor:
    terminal = VirtualTerminal(keys=keys, **size)
    editor = Editor.open(terminal, path)
    editor.run()
    return editor


def test_type_then_quit() -> None:
    editor = run_session(b"hi" + QUIT)
    terminal = editor.terminal

    assert list(editor.state.buffer.lines()) == [b"hi"]
    assert terminal.clear_count == 1
    assert terminal.frames
    assert all(frame.startswith(HIDE_CURSOR) for frame in terminal.frames)
    assert all(frame.endswith(SHOW_CURSOR) for frame in terminal.frames)


def test_each_key_produces_one_frame() -> None:
    editor = run_session(b"abc" + QUIT)

    # one frame before every key read, the last one before the exit key
    assert len(editor.terminal.frames) == 4


def test_open_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hello\nworld\n")

    editor = run_session(QUIT, str(path))

    assert list(editor.state.buffer.lines()) == [b"hello", b"world"]
    assert b" - 2 lines" in editor.terminal.last_frame


def test_open_missing_file_starts_empty(tmp_path: Path) -> None:
    path = tmp_path / "fresh.txt"

    editor = run_session(QUIT, str(path))

    assert editor.state.buffer.row_count == 0
    assert editor.state.filename == str(path)
    assert b"New file" in editor.terminal.last_frame
    assert not path.exists()


def test_help_message_shown_without_file() -> None:
    editor = run_session(QUIT)

    assert b"HELP: Ctrl-S = save" in editor.terminal.last_frame


def test_arrow_sequence_moves_cursor() -> None:
    editor = run_session(b"ab\x1b[DX" + QUIT)

    assert list(editor.state.buffer.lines()) == [b"aXb"]


def test_save_as_through_prompt(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    keys = b"abc" + SAVE + str(path).encode() + b"\r" + QUIT

    editor = run_session(keys)

    assert path.read_bytes() == b"abc\n"
    assert editor.state.filename == str(path)
    assert editor.state.message.text.startswith("File saved!")
    assert any(b"Save as: " in frame for frame in editor.terminal.frames)


def test_prompt_backspace_edits_answer(tmp_path: Path) -> None:
    path = tmp_path / "x.txt"
    keys = b"a" + SAVE + str(path).encode() + b"Z\x7f\r" + QUIT

    run_session(keys)

    assert path.read_bytes() == b"a\n"


def test_prompt_ignores_enter_on_empty_answer(tmp_path: Path) -> None:
    path = tmp_path / "y.txt"
    keys = b"a" + SAVE + b"\r" + str(path).encode() + b"\r" + QUIT

    run_session(keys)

    assert path.exists()


def test_prompt_cancelled_by_escape_sequence() -> None:
    editor = run_session(b"a" + SAVE + b"\x1b[X" + QUIT)

    assert editor.state.filename is None
    assert editor.state.message.text == "Save aborted"


def test_goto_line_through_prompt() -> None:
    text = b"\r".join(b"line" for _ in range(30))
    editor = run_session(text + b"\x0c" + b"12\r" + QUIT, rows=10)

    assert editor.state.cursor.cy == 11
    assert editor.state.viewport.rowoff == 11


def test_exhausted_input_raises_input_error() -> None:
    terminal = VirtualTerminal(keys=b"abc")
    editor = Editor.open(terminal)

    with pytest.raises(TerminalError):
        editor.run()


class FailingTerminal:
    def __init__(self) -> None:
        self.cleared = False

    def __enter__(self) -> "FailingTerminal":
        raise TerminalError("not a terminal")

    def __exit__(self, *exc_info: object) -> None:
        return None

    def clear_screen(self) -> None:
        self.cleared = True


def test_main_reports_terminal_failure(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(app, "RawTerminal", FailingTerminal)

    status = app.main([])

    assert status == 1
    assert "bloc: not a terminal" in capsys.readouterr().err


def test_save_as_keeps_non_ascii_name(tmp_path: Path) -> None:
    path = tmp_path / "café.txt"
    keys = b"abc" + SAVE + os.fsencode(str(path)) + b"\r" + QUIT

    editor = run_session(keys)

    assert editor.state.filename == str(path)
    assert path.read_bytes() == b"abc\n"


class ManagedVirtualTerminal(VirtualTerminal):
    def __init__(self) -> None:
        super().__init__(keys=QUIT)

    def __enter__(self) -> "ManagedVirtualTerminal":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


def test_main_reports_unreadable_path(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    monkeypatch.setattr(app, "RawTerminal", ManagedVirtualTerminal)

    status = app.main([str(tmp_path)])

    assert status == 1
    assert f"bloc: {tmp_path}:" in capsys.readouterr().err
