"""Textual host for the editor.

The app itself lives in ``awildtxt.adapters.textual.app`` so the adapter can
be imported without starting a UI.
"""

from .controller import TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
