from __future__ import annotations

from pathlib import Path
from typing import List

from awildtxt.buffer import Buffer
from awildtxt.modes import KeyInput
from awildtxt.session import EditorSession


def make_session(text: str = "") -> EditorSession:
    return EditorSession(Buffer.from_text(text))


def press(session: EditorSession, *keys: str) -> None:
    for key in keys:
        text = key if len(key) == 1 else None
        session.handle_key(KeyInput(key=key, text=text))


def type_text(session: EditorSession, text: str) -> None:
    for char in text:
        session.handle_key(KeyInput(key=char, text=char))


def test_session_starts_in_normal_mode() -> None:
    session = make_session()

    assert session.mode_name == "normal"
    assert session.cursor.index == 0


def test_normal_mode_does_not_insert_text() -> None:
    session = make_session("abc")

    result = session.handle_key(KeyInput(key="q", text="q"))

    assert result.consumed is True
    assert session.text == "abc"


def test_insert_mode_typing() -> None:
    session = make_session("World")

    press(session, "i")
    type_text(session, "Hello ")

    assert session.mode_name == "insert"
    assert session.text == "Hello World"
    assert session.cursor.index == 6


def test_escape_returns_to_normal() -> None:
    session = make_session()

    press(session, "i", "ESC")

    assert session.mode_name == "normal"


def test_enter_inserts_newline() -> None:
    session = make_session("ab")

    press(session, "l", "i", "ENTER")

    assert session.text == "a\nb"
    assert session.cursor_position() == (1, 0)


def test_backspace_in_insert_mode_deletes_before_cursor() -> None:
    session = make_session("Hello")
    session.cursor.index = 3

    press(session, "i", "BACKSPACE")

    assert session.text == "Helo"
    assert session.cursor.index == 2


def test_backspace_at_start_is_noop() -> None:
    session = make_session("Hello")

    press(session, "i", "BACKSPACE")

    assert session.text == "Hello"
    assert session.cursor.index == 0


def test_backspace_in_normal_mode_moves_left() -> None:
    session = make_session("Hello")
    session.cursor.index = 3

    press(session, "BACKSPACE")

    assert session.text == "Hello"
    assert session.cursor.index == 2


def test_x_deletes_under_cursor() -> None:
    session = make_session("Hello")
    session.cursor.index = 4

    press(session, "x")
    assert session.text == "Hell"
    assert session.cursor.index == 4

    press(session, "x")
    assert session.text == "Hell"


def test_delete_key_across_pieces() -> None:
    session = make_session("Hello")
    session.buffer.append("World")
    session.cursor.index = 4

    press(session, "DELETE", "DELETE", "DELETE")

    assert session.text == "Hellrld"


def test_motions() -> None:
    session = make_session("alpha\nbe\ngamma")

    press(session, "l", "l", "l", "j")
    assert session.cursor_position() == (1, 2)

    press(session, "j")
    assert session.cursor_position() == (2, 2)

    press(session, "UP", "UP", "h")
    assert session.cursor_position() == (0, 1)

    press(session, "k")
    assert session.cursor_position() == (0, 1)


def test_right_motion_stops_at_end() -> None:
    session = make_session("ab")

    press(session, "RIGHT", "RIGHT", "RIGHT")

    assert session.cursor.index == 2


def test_prompt_collects_path_in_its_own_table() -> None:
    session = make_session("doc")

    session.handle_key(KeyInput(key="o", modifiers=("ctrl",)))
    type_text(session, "abcd")
    press(session, "BACKSPACE")

    assert session.mode_name == "prompt"
    assert session.prompt_text == "abc"
    assert session.text == "doc"


def test_prompt_enter_opens_file(tmp_path: Path) -> None:
    target = tmp_path / "opened.txt"
    target.write_text("fresh content", encoding="utf-8")
    session = make_session("old")
    old_buffer = session.buffer
    session.cursor.index = 2
    opened: List[object] = []
    session.bus.subscribe("document.open", opened.append)

    session.handle_key(KeyInput(key="o", modifiers=("ctrl",)))
    type_text(session, str(target))
    result = session.handle_key(KeyInput(key="ENTER"))

    assert result.status == "opened"
    assert session.mode_name == "normal"
    assert session.buffer is not old_buffer
    assert session.text == "fresh content"
    assert session.cursor.index == 0
    assert opened == [str(target)]


def test_prompt_open_failure_keeps_document(tmp_path: Path) -> None:
    session = make_session("keep me")
    failures: List[object] = []
    session.bus.subscribe("document.open_failed", failures.append)

    session.handle_key(KeyInput(key="o", modifiers=("ctrl",)))
    type_text(session, str(tmp_path / "nope.txt"))
    result = session.handle_key(KeyInput(key="ENTER"))

    assert result.status == "open_failed"
    assert session.text == "keep me"
    assert len(failures) == 1


def test_prompt_escape_returns_to_previous_mode() -> None:
    session = make_session()

    press(session, "i")
    session.handle_key(KeyInput(key="o", modifiers=("ctrl",)))
    type_text(session, "path")
    press(session, "ESC")

    assert session.mode_name == "insert"
    assert session.text == ""


def test_reopening_prompt_starts_empty() -> None:
    session = make_session()

    session.handle_key(KeyInput(key="o", modifiers=("ctrl",)))
    type_text(session, "first")
    press(session, "ESC")
    session.handle_key(KeyInput(key="o", modifiers=("ctrl",)))

    assert session.prompt_text == ""


def test_mode_switch_events() -> None:
    session = make_session()
    switches: List[object] = []
    session.bus.subscribe("mode.switch", switches.append)

    press(session, "i", "ESC")

    assert switches == ["insert", "normal"]


def test_mirror_includes_mode() -> None:
    session = make_session("abc")
    session.cursor.index = 1

    mirror = session.mirror()

    assert mirror.text == "abc"
    assert mirror.cursor == 1
    assert mirror.attributes["mode"] == "normal"
