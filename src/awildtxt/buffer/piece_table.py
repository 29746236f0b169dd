"""Piece table text storage.

A document is an ordered list of pieces, each pointing at a run of one of
two backing buffers: the original content (fixed at construction) and the
added content (append-only). Edits only rewrite piece metadata; buffer
text that a piece refers to is never moved or changed, so offsets stored
in a piece stay valid for the lifetime of the table.

Offsets and lengths count code points of the Python ``str`` buffers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple


class PieceSource(Enum):
    ORIGINAL = "original"
    ADDED = "added"


@dataclass(frozen=True, slots=True)
class Piece:
    """A ``length``-long run of ``source`` starting at ``offset``."""

    source: PieceSource
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True, slots=True)
class PieceSearch:
    """Result of locating a document offset in the piece list."""

    piece: Piece
    index: int
    piece_start: int

    @property
    def piece_end(self) -> int:
        return self.piece_start + self.piece.length


class PieceTable:
    """Editable document over an original and an append-only added buffer."""

    __slots__ = ("_original", "_added", "_pieces")

    def __init__(self) -> None:
        self._original = ""
        self._added = ""
        self._pieces: List[Piece] = []

    @classmethod
    def from_text(cls, content: str) -> "PieceTable":
        """Seed a table whose original buffer is ``content``."""

        table = cls()
        table._original = content
        if content:
            table._pieces.append(Piece(PieceSource.ORIGINAL, 0, len(content)))
        return table

    @property
    def original_buffer(self) -> str:
        return self._original

    @property
    def added_buffer(self) -> str:
        return self._added

    @property
    def pieces(self) -> Tuple[Piece, ...]:
        return tuple(self._pieces)

    @property
    def piece_count(self) -> int:
        return len(self._pieces)

    def __len__(self) -> int:
        return sum(piece.length for piece in self._pieces)

    def __repr__(self) -> str:
        return f"PieceTable(length={len(self)}, pieces={len(self._pieces)})"

    def append(self, content: str) -> None:
        """Add ``content`` at the end of the document."""

        piece = self._add(content)
        if piece is not None:
            self._pieces.append(piece)

    def insert(self, content: str, offset: int) -> bool:
        """Insert ``content`` so that it starts at document ``offset``.

        Returns ``False`` without touching the table when ``offset`` is
        outside ``[0, len(self)]``. An offset sitting on a piece boundary
        lands after the piece that ends there.
        """

        if not self._offset_valid(offset):
            return False
        if not content:
            return True

        found = self.find_piece(offset)
        if found is None:
            # only reachable on an empty table at offset 0
            self._pieces.insert(0, self._add_piece(content))
            return True

        left, right = _split(found.piece, offset - found.piece_start)
        replacement = [p for p in (left, self._add_piece(content), right) if p]
        self._pieces[found.index : found.index + 1] = replacement
        return True

    def delete(self, offset: int, length: int) -> bool:
        """Remove ``length`` units starting at document ``offset``.

        The range must lie inside the document and the table must hold at
        least one piece; otherwise ``False`` is returned and nothing changes.
        """

        if length < 0 or not self._offset_valid(offset):
            return False
        total = len(self)
        if offset + length > total:
            return False

        span = self._find_span(offset, offset + length)
        if not span:
            return False
        if length == 0:
            return True

        first_index, first_start = span[0]
        last_index, last_start = span[-1]
        first = self._pieces[first_index]
        last = self._pieces[last_index]

        # Left remnant keeps whatever of the first piece precedes the range,
        # right remnant whatever of the last piece follows it. With a single
        # matched piece both come out of the same piece.
        left, _ = _split(first, offset - first_start)
        _, right = _split(last, offset + length - last_start)

        self._pieces[first_index : last_index + 1] = [p for p in (left, right) if p]
        return True

    def read(self) -> str:
        """Materialize the whole document."""

        return "".join(self.iter_text())

    def iter_text(self) -> Iterator[str]:
        """Yield the text of each piece in document order."""

        for piece in self._pieces:
            buffer = self._added if piece.source is PieceSource.ADDED else self._original
            yield buffer[piece.offset : piece.end]

    def find_piece(self, offset: int) -> Optional[PieceSearch]:
        """Locate the first piece whose cumulative end reaches ``offset``."""

        cursor = 0
        for index, piece in enumerate(self._pieces):
            if cursor + piece.length >= offset:
                return PieceSearch(piece=piece, index=index, piece_start=cursor)
            cursor += piece.length
        return None

    def _find_span(self, start: int, stop: int) -> List[Tuple[int, int]]:
        """Return ``(index, piece_start)`` for every piece touched by the range.

        Collection starts at the first piece whose cumulative end reaches
        ``start`` and stops at the first piece whose cumulative end reaches
        ``stop``.
        """

        matched: List[Tuple[int, int]] = []
        cursor = 0
        for index, piece in enumerate(self._pieces):
            piece_end = cursor + piece.length
            if matched or piece_end >= start:
                matched.append((index, cursor))
                if piece_end >= stop:
                    break
            cursor = piece_end
        return matched

    def _offset_valid(self, offset: int) -> bool:
        return 0 <= offset <= len(self)

    def _add(self, content: str) -> Optional[Piece]:
        if not content:
            return None
        return self._add_piece(content)

    def _add_piece(self, content: str) -> Piece:
        piece = Piece(PieceSource.ADDED, len(self._added), len(content))
        self._added += content
        return piece


def _split(piece: Piece, at: int) -> Tuple[Optional[Piece], Optional[Piece]]:
    """Cut ``piece`` ``at`` units in; empty halves come back as ``None``."""

    left = Piece(piece.source, piece.offset, at) if at > 0 else None
    rest = piece.length - at
    right = Piece(piece.source, piece.offset + at, rest) if rest > 0 else None
    return left, right


def new() -> PieceTable:
    """Return an empty table."""

    return PieceTable()


def init(content: str) -> PieceTable:
    """Return a table seeded with ``content`` as its original buffer."""

    return PieceTable.from_text(content)


__all__ = ["Piece", "PieceSearch", "PieceSource", "PieceTable", "init", "new"]
