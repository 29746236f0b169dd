"""Cursor position helpers over the flat document text.

Positions are document offsets; lines are separated by ``"\n"``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Cursor:
    index: int = 0

    def reset(self) -> None:
        self.index = 0


def clamp_index(text: str, index: int) -> int:
    return max(0, min(index, len(text)))


def line_of(text: str, index: int) -> int:
    """Zero-based line number containing ``index``."""

    return text.count("\n", 0, clamp_index(text, index))


def line_start(text: str, line: int) -> int:
    """Offset of the first character of ``line``."""

    start = 0
    for _ in range(line):
        newline = text.find("\n", start)
        if newline == -1:
            return len(text)
        start = newline + 1
    return start


def line_length(text: str, line: int) -> int:
    start = line_start(text, line)
    end = text.find("\n", start)
    return (len(text) if end == -1 else end) - start


def column_of(text: str, index: int) -> int:
    index = clamp_index(text, index)
    return index - (text.rfind("\n", 0, index) + 1)


def line_count(text: str) -> int:
    return text.count("\n") + 1


def move_horizontal(text: str, index: int, delta: int) -> int:
    return clamp_index(text, index + delta)


def move_vertical(text: str, index: int, delta: int) -> int:
    """Move ``delta`` lines keeping the column where the target line allows.

    Returns ``index`` unchanged when the target line does not exist.
    """

    target = line_of(text, index) + delta
    if delta == 0 or target < 0 or target >= line_count(text):
        return clamp_index(text, index)
    column = min(column_of(text, index), line_length(text, target))
    return line_start(text, target) + column


__all__ = [
    "Cursor",
    "clamp_index",
    "column_of",
    "line_count",
    "line_length",
    "line_of",
    "line_start",
    "move_horizontal",
    "move_vertical",
]
