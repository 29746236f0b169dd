"""Editor session: the active document, cursor, prompt and mode manager."""

from __future__ import annotations

from typing import Optional

from awildtxt.buffer import Buffer, BufferMirror, Cursor, DocumentLoadError, PieceTable
from awildtxt.buffer import cursor as cursor_ops
from awildtxt.buffer.loader import PathLike
from awildtxt.keymaps import KeymapRegistry
from awildtxt.keymaps.defaults import load_default_keymaps
from awildtxt.modes import (
    InsertMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeManager,
    ModeResult,
    NormalMode,
    PromptMode,
)
from awildtxt.runtime import telemetry

PROMPT_LABEL = "Open file:"


class EditorSession:
    """Everything one editor window edits.

    Hosts feed keys to ``handle_key`` and render from ``text``/``mirror``.
    Opening a file swaps in a new ``Buffer``; the previous one is dropped.
    """

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        keymaps: Optional[KeymapRegistry] = None,
    ) -> None:
        self.buffer = buffer if buffer is not None else Buffer()
        self.cursor = Cursor()
        self.prompt = PieceTable()
        self.prompt_label = PROMPT_LABEL
        self.bus = ModeBus()
        if keymaps is None:
            keymaps = KeymapRegistry(logger_name="awildtxt.keymaps")
            load_default_keymaps(keymaps)
        self.context = ModeContext(session=self, keymaps=keymaps, bus=self.bus)
        self.modes = ModeManager(self.context)
        self.modes.register_mode(NormalMode)
        self.modes.register_mode(InsertMode)
        self.modes.register_mode(PromptMode)

    @classmethod
    def from_file(cls, path: PathLike) -> "EditorSession":
        return cls(Buffer.from_file(path))

    @property
    def text(self) -> str:
        return self.buffer.text

    @property
    def mode_name(self) -> str:
        mode = self.modes.active_mode
        return mode.name if mode else "?"

    @property
    def prompt_text(self) -> str:
        return self.prompt.read()

    @property
    def prompt_active(self) -> bool:
        return self.mode_name == PromptMode.name

    def handle_key(self, key: KeyInput) -> ModeResult:
        return self.modes.handle_key(key)

    def mirror(self) -> BufferMirror:
        attributes = {"mode": self.mode_name}
        if self.prompt_active:
            attributes["prompt"] = self.prompt_text
        return self.buffer.mirror(cursor=self.cursor.index, attributes=attributes)

    def insert_text(self, text: str) -> bool:
        """Insert at the cursor and move the cursor past the new text."""

        if not self.buffer.insert(text, self.cursor.index):
            self._rejected("write_denied", offset=self.cursor.index, text=text)
            return False
        self.cursor.index += len(text)
        self.bus.emit("buffer.changed", self.buffer.version)
        return True

    def delete_backward(self) -> bool:
        """Delete the character before the cursor (backspace)."""

        if self.cursor.index == 0:
            return False
        offset = self.cursor.index - 1
        if not self.buffer.delete(offset, 1):
            self._rejected("delete_failed", offset=offset)
            return False
        self.cursor.index = offset
        self.bus.emit("buffer.changed", self.buffer.version)
        return True

    def delete_forward(self) -> bool:
        """Delete the character under the cursor."""

        offset = self.cursor.index
        if not self.buffer.delete(offset, 1):
            self._rejected("delete_failed", offset=offset)
            return False
        self.cursor.index = cursor_ops.clamp_index(self.text, offset)
        self.bus.emit("buffer.changed", self.buffer.version)
        return True

    def move_cursor(self, delta: int) -> int:
        self.cursor.index = cursor_ops.move_horizontal(self.text, self.cursor.index, delta)
        return self.cursor.index

    def move_lines(self, delta: int) -> int:
        self.cursor.index = cursor_ops.move_vertical(self.text, self.cursor.index, delta)
        return self.cursor.index

    def cursor_position(self) -> tuple[int, int]:
        """``(line, column)`` of the cursor."""

        text = self.text
        return (
            cursor_ops.line_of(text, self.cursor.index),
            cursor_ops.column_of(text, self.cursor.index),
        )

    def reset_prompt(self) -> None:
        self.prompt = PieceTable()

    def open_document(self, path: PathLike) -> bool:
        """Replace the active buffer with the contents of ``path``.

        On failure the current buffer stays active and ``False`` is returned.
        """

        try:
            buffer = Buffer.from_file(path)
        except DocumentLoadError as exc:
            telemetry.record_event(
                "document.open_failed",
                level="warning",
                data={"path": exc.path, "reason": str(exc)},
            )
            self.bus.emit("document.open_failed", {"path": exc.path, "reason": str(exc)})
            return False
        self.buffer = buffer
        self.cursor.reset()
        telemetry.record_event("document.open", data={"path": buffer.path})
        self.bus.emit("document.open", buffer.path)
        return True

    def _rejected(self, reason: str, **data: object) -> None:
        telemetry.record_event(
            "edit.rejected", level="debug", data={"reason": reason, **data}
        )
        self.bus.emit("edit.rejected", {"reason": reason, **data})


__all__ = ["EditorSession", "PROMPT_LABEL"]
