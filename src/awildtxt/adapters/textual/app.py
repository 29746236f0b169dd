"""Executable Textual app hosting an editor session."""

from __future__ import annotations

import argparse
import os
from typing import Any, Optional, Sequence, Tuple

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from awildtxt.buffer import BufferMirror, DocumentLoadError
from awildtxt.runtime import telemetry
from awildtxt.session import EditorSession

from .controller import TextualEditorAdapter, TextualUIHooks

NamedKey = Tuple[str, Optional[str], Tuple[str, ...]]

_NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "delete": "DELETE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
}

_QUIT_KEYS = {"ctrl+c", "ctrl+q"}


def render_document(mirror: BufferMirror) -> Text:
    """Document text with the cursor cell shown in reverse video."""

    text = mirror.text
    cursor = max(0, min(mirror.cursor, len(text)))
    rendered = Text(text[:cursor])
    if cursor < len(text) and text[cursor] != "\n":
        rendered.append(text[cursor], style="reverse")
        rendered.append(text[cursor + 1 :])
    else:
        rendered.append(" ", style="reverse")
        rendered.append(text[cursor:])
    return rendered


def normalize_key(event: events.Key) -> Optional[NamedKey]:
    """Map a Textual key event to ``(key, text, modifiers)``."""

    key = event.key
    if key in _QUIT_KEYS:
        return None
    if key in _NAMED_KEYS:
        return (_NAMED_KEYS[key], None, ())
    if key == "tab":
        return ("TAB", "\t", ())
    if key.startswith("ctrl+"):
        *modifiers, name = key.split("+")
        return (name, None, tuple(modifiers))
    if event.is_printable and event.character:
        return (event.character, event.character, ())
    return (key.upper(), None, ())


class EditorApp(App[None]):
    """Document view, mode indicator and open-file prompt."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#document {
		height: 1fr;
		padding: 0 1;
	}

	#prompt-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
		content-align: right middle;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: Optional[EditorSession] = None) -> None:
        super().__init__()
        self.session = session or EditorSession()
        self.adapter: TextualEditorAdapter | None = None
        self._logger = telemetry.get_logger("awildtxt.adapters.textual")
        self._document_widget = Static("", id="document-text")
        self._prompt_widget = Static("", id="prompt-line")
        self._status_widget = Static("", id="status-line")

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="document"):
            yield self._document_widget
        yield self._prompt_widget
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_prompt=self._show_prompt,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)

    def on_key(self, event: events.Key) -> None:
        if self.adapter is None:
            return
        normalized = normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        self._document_widget.update(render_document(mirror))
        self.sub_title = mirror.path or "[scratch]"

    def _update_status(self, mode: str) -> None:
        self._status_widget.update(mode)

    def _show_prompt(self, line: str) -> None:
        self._prompt_widget.update(line)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "document.open_failed" and isinstance(payload, dict):
            self.notify(str(payload.get("reason", "")), severity="error")

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Piece-table text editor.")
    parser.add_argument("file", nargs="?", help="File to open")
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("AWILDTXT_LOG_PRESET") or None,
        help="Telemetry preset (default: configured from AWILDTXT_* variables)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    session = EditorSession()
    if args.file:
        try:
            session = EditorSession.from_file(args.file)
        except DocumentLoadError as exc:
            raise SystemExit(str(exc)) from exc
    EditorApp(session).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
