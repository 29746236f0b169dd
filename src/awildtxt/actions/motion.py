"""Cursor motions."""

from __future__ import annotations

from awildtxt.keymaps import ResolutionMatch
from awildtxt.modes.base_mode import ModeContext, ModeResult


def _moved(context: ModeContext, before: int) -> ModeResult:
    after = context.session.cursor.index
    if after == before:
        return ModeResult(consumed=True, status="noop")
    context.bus.emit("cursor.move", after)
    return ModeResult(consumed=True, status="moved")


def move_left(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    before = context.session.cursor.index
    context.session.move_cursor(-1)
    return _moved(context, before)


def move_right(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    before = context.session.cursor.index
    context.session.move_cursor(1)
    return _moved(context, before)


def move_up(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    before = context.session.cursor.index
    context.session.move_lines(-1)
    return _moved(context, before)


def move_down(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    before = context.session.cursor.index
    context.session.move_lines(1)
    return _moved(context, before)


__all__ = ["move_left", "move_right", "move_up", "move_down"]
