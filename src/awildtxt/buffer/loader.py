"""Document loading for the editor."""

from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class DocumentLoadError(RuntimeError):
    """Raised when a file cannot be read as UTF-8 text."""

    def __init__(self, message: str, *, path: PathLike) -> None:
        super().__init__(message)
        self.path = str(path)


def read_file(path: PathLike, *, encoding: str = "utf-8") -> str:
    """Return the decoded contents of ``path``."""

    target = Path(path).expanduser()
    try:
        return target.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise DocumentLoadError(f"No such file: {target}", path=target) from exc
    except IsADirectoryError as exc:
        raise DocumentLoadError(f"Is a directory: {target}", path=target) from exc
    except UnicodeDecodeError as exc:
        raise DocumentLoadError(
            f"Cannot decode {target} as {encoding}", path=target
        ) from exc
    except OSError as exc:
        raise DocumentLoadError(f"Cannot read {target}: {exc}", path=target) from exc
