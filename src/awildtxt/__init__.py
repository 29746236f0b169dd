"""Piece-table text editor."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "keymaps",
    "modes",
    "runtime",
    "session",
]

__version__ = "0.1.0"
