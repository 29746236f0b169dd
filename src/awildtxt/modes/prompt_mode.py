"""Open-file prompt typed into its own piece table."""

from __future__ import annotations

from typing import Optional

from .base_mode import KeyInput, Mode, ModeResult


class PromptMode(Mode):
    name = "prompt"

    def on_enter(self, previous: Optional[str]) -> None:
        session = self.context.session
        self.context.extras["prompt_return_mode"] = previous or "normal"
        session.reset_prompt()
        self.context.bus.emit("prompt.start", session.prompt_label)

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self.context.bus.emit("prompt.end", self.context.session.prompt_text)

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        if not key.text:
            return ModeResult(consumed=False, status="miss")
        self.context.session.prompt.append(key.text)
        self.context.bus.emit("prompt.edit", self.context.session.prompt_text)
        return ModeResult(consumed=True, status="editing")
