"""Mode-switching actions."""

from __future__ import annotations

from awildtxt.keymaps import ResolutionMatch
from awildtxt.modes.base_mode import ModeContext, ModeResult


def enter_insert_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def exit_to_normal_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="normal", message="exit_insert")


def open_file_prompt(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="prompt", message="open_prompt")


__all__ = ["enter_insert_mode", "exit_to_normal_mode", "open_file_prompt"]
