"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from types import TracebackType
from typing import Protocol

from .contracts import SEPARATOR
from .errors import ValidationError


class ResourceConnection(Protocol):
    """
    Short-lived view of a resource, opened once per render.

    ``last_modified`` is in milliseconds since the epoch. ``None`` (or ``0``)
    from ``last_modified`` and ``None`` (or ``-1``) from ``length`` mean the
    value is not known.
    """

    def exists(self) -> bool: ...

    def last_modified(self) -> int | None: ...

    def length(self) -> int | None: ...

    def local_file(self) -> Path | None:
        """Raises ``FileNotFoundError`` when the resource is gone."""
        ...

    def close(self) -> None: ...

    def __enter__(self) -> ResourceConnection: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool | None: ...


class Resource(Protocol):
    def open(self) -> ResourceConnection: ...


class ResourceStore(Protocol):
    def get_resource(self, path: str) -> Resource | None: ...


# ============================
# Directory-backed store
# ============================


class FilesystemConnection:
    __slots__ = ("_closed", "_path", "_stat")

    def __init__(self, path: Path) -> None:
        self._path = path
        self._closed = False
        self._stat: os.stat_result | None = None

    def _lookup(self) -> os.stat_result | None:
        if self._closed:
            raise ValueError("Connection is closed")
        if self._stat is None:
            try:
                self._stat = self._path.stat()
            except FileNotFoundError:
                return None
        return self._stat

    def exists(self) -> bool:
        return self._lookup() is not None

    def last_modified(self) -> int | None:
        st = self._lookup()
        if st is None:
            return None
        return st.st_mtime_ns // 1_000_000

    def length(self) -> int | None:
        st = self._lookup()
        if st is None or stat.S_ISDIR(st.st_mode):
            return None
        return st.st_size

    def local_file(self) -> Path | None:
        if self._closed:
            raise ValueError("Connection is closed")
        if not self._path.exists():
            raise FileNotFoundError(str(self._path))
        return self._path

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> FilesystemConnection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class FilesystemResource:
    __slots__ = ("path",)

    def __init__(self, path: Path) -> None:
        self.path = path

    def open(self) -> FilesystemConnection:
        return FilesystemConnection(self.path)


class FilesystemResourceStore:
    """Serves the resources of one book from a local directory."""

    __slots__ = ("root",)

    def __init__(self, root: str | Path) -> None:
        try:
            rootp = Path(root).expanduser().resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise ValidationError(f"Invalid book root '{root}': {e}") from e
        if not rootp.is_dir():
            raise ValidationError(f"Book root must be a directory: {root}")
        self.root = rootp

    def get_resource(self, path: str) -> FilesystemResource:
        if not path.startswith(SEPARATOR):
            raise ValidationError(
                f"Resource path must start with {SEPARATOR!r}: {path}"
            )
        candidate = self.root.joinpath(*[p for p in path.split(SEPARATOR) if p])
        # Verify path is actually under root (symlinks and ".." segments)
        try:
            candidate.resolve().relative_to(self.root)
        except ValueError as e:
            raise ValidationError(f"Resource path escapes book root: {path}") from e
        return FilesystemResource(candidate)
