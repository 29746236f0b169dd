"""Document storage: piece table, buffer wrapper, loader and cursor helpers."""

from .buffer import Buffer, BufferMirror
from .cursor import Cursor
from .loader import DocumentLoadError, read_file
from .piece_table import Piece, PieceSearch, PieceSource, PieceTable

__all__ = [
    "Buffer",
    "BufferMirror",
    "Cursor",
    "DocumentLoadError",
    "Piece",
    "PieceSearch",
    "PieceSource",
    "PieceTable",
    "read_file",
]
