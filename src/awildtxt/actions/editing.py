"""Document edits bound to keys."""

from __future__ import annotations

from awildtxt.keymaps import ResolutionMatch
from awildtxt.modes.base_mode import ModeContext, ModeResult


def _outcome(applied: bool) -> ModeResult:
    if applied:
        return ModeResult(consumed=True, status="edited")
    return ModeResult(consumed=True, status="rejected", message="edit_rejected")


def insert_newline(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _outcome(context.session.insert_text("\n"))


def delete_before_cursor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    if context.session.cursor.index == 0:
        return ModeResult(consumed=True, status="noop")
    return _outcome(context.session.delete_backward())


def delete_under_cursor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    session = context.session
    if session.cursor.index >= len(session.buffer):
        return ModeResult(consumed=True, status="noop")
    return _outcome(session.delete_forward())


__all__ = ["insert_newline", "delete_before_cursor", "delete_under_cursor"]
