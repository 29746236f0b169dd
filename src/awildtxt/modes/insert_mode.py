"""Insert mode: unbound printable input goes into the document."""

from __future__ import annotations

from typing import Optional

from .base_mode import KeyInput, Mode, ModeResult


class InsertMode(Mode):
    name = "insert"

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self.context.bus.emit("insert.start", self.context.session.cursor.index)

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        if not key.text:
            return ModeResult(consumed=False, status="miss")
        if self.context.session.insert_text(key.text):
            return ModeResult(consumed=True, status="inserted")
        return ModeResult(consumed=True, status="rejected", message="write_denied")
