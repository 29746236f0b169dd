"""Actions for the open-file prompt."""

from __future__ import annotations

from awildtxt.keymaps import ResolutionMatch
from awildtxt.modes.base_mode import ModeContext, ModeResult


def submit_prompt(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    session = context.session
    path = session.prompt_text
    opened = bool(path) and session.open_document(path)
    return ModeResult(
        consumed=True,
        switch_to="normal",
        status="opened" if opened else "open_failed",
        message=path,
    )


def cancel_prompt(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    previous = context.extras.get("prompt_return_mode", "normal")
    return ModeResult(
        consumed=True, switch_to=str(previous), message="prompt_cancel"
    )


def prompt_backspace(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    prompt = context.session.prompt
    if len(prompt) == 0:
        return ModeResult(consumed=True, status="noop")
    prompt.delete(len(prompt) - 1, 1)
    context.bus.emit("prompt.edit", context.session.prompt_text)
    return ModeResult(consumed=True, status="editing")


__all__ = ["submit_prompt", "cancel_prompt", "prompt_backspace"]
