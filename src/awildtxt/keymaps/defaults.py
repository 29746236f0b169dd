"""Built-in actions and bindings for the normal, insert and prompt modes."""

from __future__ import annotations

from typing import Iterable, Sequence

from awildtxt.actions import core, editing, motion, prompt

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef("core.enter_insert", core.enter_insert_mode, "Enter insert mode"),
    ActionRef("core.exit_to_normal", core.exit_to_normal_mode, "Return to normal mode"),
    ActionRef("core.open_prompt", core.open_file_prompt, "Prompt for a file to open"),
    ActionRef("motion.left", motion.move_left, "Move cursor left"),
    ActionRef("motion.right", motion.move_right, "Move cursor right"),
    ActionRef("motion.up", motion.move_up, "Move cursor one line up"),
    ActionRef("motion.down", motion.move_down, "Move cursor one line down"),
    ActionRef("edit.newline", editing.insert_newline, "Insert a line break"),
    ActionRef("edit.backspace", editing.delete_before_cursor, "Delete before cursor"),
    ActionRef("edit.delete", editing.delete_under_cursor, "Delete under cursor"),
    ActionRef("prompt.submit", prompt.submit_prompt, "Open the typed path"),
    ActionRef("prompt.cancel", prompt.cancel_prompt, "Close the prompt"),
    ActionRef("prompt.backspace", prompt.prompt_backspace, "Drop last typed character"),
)

# (mode, key token, action id)
_DEFAULT_KEYS: tuple[tuple[str, str, str], ...] = (
    ("normal", "i", "core.enter_insert"),
    ("normal", "h", "motion.left"),
    ("normal", "l", "motion.right"),
    ("normal", "k", "motion.up"),
    ("normal", "j", "motion.down"),
    ("normal", "LEFT", "motion.left"),
    ("normal", "RIGHT", "motion.right"),
    ("normal", "UP", "motion.up"),
    ("normal", "DOWN", "motion.down"),
    ("normal", "BACKSPACE", "motion.left"),
    ("normal", "x", "edit.delete"),
    ("normal", "DELETE", "edit.delete"),
    ("normal", "ctrl+o", "core.open_prompt"),
    ("insert", "ESC", "core.exit_to_normal"),
    ("insert", "LEFT", "motion.left"),
    ("insert", "RIGHT", "motion.right"),
    ("insert", "UP", "motion.up"),
    ("insert", "DOWN", "motion.down"),
    ("insert", "ENTER", "edit.newline"),
    ("insert", "BACKSPACE", "edit.backspace"),
    ("insert", "DELETE", "edit.delete"),
    ("insert", "ctrl+o", "core.open_prompt"),
    ("prompt", "ESC", "prompt.cancel"),
    ("prompt", "ENTER", "prompt.submit"),
    ("prompt", "BACKSPACE", "prompt.backspace"),
)


def _binding_id(mode: str, token: str) -> str:
    return f"{mode}.{token.lower()}"


DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding(
        id=_binding_id(mode, token),
        mode=mode,
        stroke=KeyStroke.parse(token),
        action_id=action_id,
    )
    for mode, token, action_id in _DEFAULT_KEYS
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and bindings, then any extras."""

    excluded = set(exclude_bindings or ())
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)
    for binding in DEFAULT_BINDINGS:
        if binding.id not in excluded:
            registry.register_binding(binding, replace=replace)
    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
