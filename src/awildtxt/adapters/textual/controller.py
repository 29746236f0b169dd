"""Textual adapter that wires an EditorSession into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from awildtxt.buffer import BufferMirror
from awildtxt.modes import KeyInput, ModeResult
from awildtxt.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    show_prompt: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


_FORWARDED_EVENTS = (
    "mode.switch",
    "prompt.start",
    "prompt.edit",
    "prompt.end",
    "document.open",
    "document.open_failed",
    "edit.rejected",
)


class TextualEditorAdapter:
    """Translates host key events into session keys and refreshes the host."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        for event in _FORWARDED_EVENTS:
            session.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )
        self._refresh_buffer()
        self._refresh_prompt()
        self.hooks.update_status(session.mode_name)

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Dispatch one key and push the resulting state to the host."""

        normalized = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized)
        result = self.session.handle_key(KeyInput(key=key, text=text, modifiers=normalized))
        self.hooks.update_status(self.session.mode_name)
        self._refresh_buffer()
        self._refresh_prompt()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name.startswith("prompt"):
            self._refresh_prompt()
        elif name == "document.open":
            self._refresh_buffer()

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.session.mirror())

    def _refresh_prompt(self) -> None:
        session = self.session
        if session.prompt_active:
            self.hooks.show_prompt(f"{session.prompt_label} {session.prompt_text}")
        else:
            self.hooks.show_prompt("")

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        return {
            "mode": session.mode_name,
            "cursor": session.cursor.index,
            "buffer": session.buffer.name,
            "buffer_version": session.buffer.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
