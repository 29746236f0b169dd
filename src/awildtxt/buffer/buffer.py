"""Open-document wrapper around a piece table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from awildtxt.runtime import telemetry

from .loader import PathLike, read_file
from .piece_table import PieceTable


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of a buffer."""

    text: str
    cursor: int
    path: Optional[str]
    version: int
    attributes: dict[str, str] = field(default_factory=dict)


class Buffer:
    """One open document: its piece table, origin path and edit version.

    Every successful edit bumps ``version``; the materialized text is cached
    per version. Rejected edits are logged and leave the buffer untouched.
    """

    def __init__(
        self, *, table: Optional[PieceTable] = None, path: Optional[str] = None
    ) -> None:
        self.table = table if table is not None else PieceTable()
        self.path = path
        self.version = 0
        self.dirty = False
        self._cached: Optional[tuple[int, str]] = None

    @classmethod
    def from_text(cls, text: str, *, path: Optional[str] = None) -> "Buffer":
        return cls(table=PieceTable.from_text(text), path=path)

    @classmethod
    def from_file(cls, path: PathLike) -> "Buffer":
        with telemetry.span(
            "buffer::load", component="buffer", metadata={"path": str(path)}
        ):
            content = read_file(path)
        return cls.from_text(content, path=str(path))

    @property
    def name(self) -> str:
        return self.path or "[scratch]"

    @property
    def text(self) -> str:
        if self._cached is None or self._cached[0] != self.version:
            self._cached = (self.version, self.table.read())
        return self._cached[1]

    def __len__(self) -> int:
        return len(self.table)

    def append(self, text: str) -> None:
        with self._span("append", length=len(text)):
            self.table.append(text)
        if text:
            self._touch()

    def insert(self, text: str, offset: int) -> bool:
        with self._span("insert", offset=offset, length=len(text)):
            applied = self.table.insert(text, offset)
        if not applied:
            telemetry.record_event(
                "buffer.insert_rejected",
                level="warning",
                data={"buffer": self.name, "offset": offset, "text": text},
            )
            return False
        if text:
            self._touch()
        return True

    def delete(self, offset: int, length: int = 1) -> bool:
        with self._span("delete", offset=offset, length=length):
            applied = self.table.delete(offset, length)
        if not applied:
            telemetry.record_event(
                "buffer.delete_rejected",
                level="warning",
                data={"buffer": self.name, "offset": offset, "length": length},
            )
            return False
        if length:
            self._touch()
        return True

    def mirror(
        self, *, cursor: int = 0, attributes: Optional[dict[str, str]] = None
    ) -> BufferMirror:
        return BufferMirror(
            text=self.text,
            cursor=cursor,
            path=self.path,
            version=self.version,
            attributes=dict(attributes or {}),
        )

    def _span(self, operation: str, **metadata: object):
        return telemetry.span(
            f"buffer::{operation}",
            component="buffer",
            metadata={"buffer": self.name, **metadata},
        )

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True


__all__ = ["Buffer", "BufferMirror"]
