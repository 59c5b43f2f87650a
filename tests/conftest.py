from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

import pytest

from filelink.model import BookRef, FileElement, ResourceRef


@dataclass(slots=True)
class FakeConnection:
    present: bool = True
    modified: int | None = None
    size: int | None = None
    file: Path | None = None
    vanish: bool = False
    fail_local_file: Exception | None = None
    closed: bool = False
    calls: list[str] = field(default_factory=list)

    def exists(self) -> bool:
        self.calls.append("exists")
        return self.present

    def last_modified(self) -> int | None:
        self.calls.append("last_modified")
        return self.modified

    def length(self) -> int | None:
        self.calls.append("length")
        return self.size

    def local_file(self) -> Path | None:
        self.calls.append("local_file")
        if self.fail_local_file is not None:
            raise self.fail_local_file
        if self.vanish:
            raise FileNotFoundError("gone")
        return self.file

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> FakeConnection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: object | None,
    ) -> Literal[False]:
        self.close()
        return False


@dataclass(slots=True)
class FakeResource:
    conn: FakeConnection
    opened: int = 0

    def open(self) -> FakeConnection:
        self.opened += 1
        return self.conn


@dataclass(slots=True)
class FakeStore:
    resources: dict[str, FakeResource] = field(default_factory=dict)

    def get_resource(self, path: str) -> FakeResource | None:
        return self.resources.get(path)


ElementFactory = Callable[..., tuple[FileElement, FakeResource]]


@pytest.fixture
def book() -> BookRef:
    return BookRef("example.com", "/manual")


@pytest.fixture
def make_element(book: BookRef) -> ElementFactory:
    def _make(
        path: str,
        *,
        body: str = "",
        element_id: str | None = None,
        **conn_fields: Any,
    ) -> tuple[FileElement, FakeResource]:
        resource = FakeResource(FakeConnection(**conn_fields))
        store = FakeStore({path: resource})
        ref = ResourceRef(book, path)
        element = FileElement(resource=(store, ref), body=body, id=element_id)
        return element, resource

    return _make
