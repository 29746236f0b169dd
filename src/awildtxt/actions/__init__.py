"""Editing verbs bound to keys."""

from .core import enter_insert_mode, exit_to_normal_mode, open_file_prompt
from .editing import delete_before_cursor, delete_under_cursor, insert_newline
from .motion import move_down, move_left, move_right, move_up
from .prompt import cancel_prompt, prompt_backspace, submit_prompt

__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "open_file_prompt",
    "insert_newline",
    "delete_before_cursor",
    "delete_under_cursor",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "submit_prompt",
    "cancel_prompt",
    "prompt_backspace",
]
