"""Normal mode: motions and single-key edits."""

from __future__ import annotations

from .base_mode import KeyInput, Mode, ModeResult


class NormalMode(Mode):
    name = "normal"

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        # printable keys without a binding are swallowed, never inserted
        if key.text:
            return ModeResult(consumed=True, status="ignored")
        return ModeResult(consumed=False, status="miss")
