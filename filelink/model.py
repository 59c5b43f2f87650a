"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .contracts import SEPARATOR
from .errors import ValidationError

if TYPE_CHECKING:
    from .resources import ResourceStore


def _check_path(kind: str, path: str) -> None:
    if not path.startswith(SEPARATOR):
        raise ValidationError(f"{kind} must start with {SEPARATOR!r}: {path!r}")


@dataclass(frozen=True, slots=True)
class BookRef:
    """A book is addressed by its domain and its path within that domain."""

    domain: str
    path: str

    def __post_init__(self) -> None:
        _check_path("Book path", self.path)
        if self.path != SEPARATOR and self.path.endswith(SEPARATOR):
            raise ValidationError(
                f"Book path may not end in {SEPARATOR!r}: {self.path!r}"
            )

    @property
    def prefix(self) -> str:
        # The root book contributes nothing in front of its resource paths.
        return "" if self.path == SEPARATOR else self.path

    def __str__(self) -> str:
        return f"{self.domain}:{self.path}"


@dataclass(frozen=True, slots=True)
class ResourceRef:
    book_ref: BookRef
    path: str

    def __post_init__(self) -> None:
        _check_path("Resource path", self.path)

    @property
    def is_directory_path(self) -> bool:
        return self.path.endswith(SEPARATOR)

    def __str__(self) -> str:
        return f"{self.book_ref}:{self.path}"


@dataclass(frozen=True, slots=True)
class PageRef:
    book_ref: BookRef
    path: str

    def __post_init__(self) -> None:
        _check_path("Page path", self.path)

    def __str__(self) -> str:
        return f"{self.book_ref}:{self.path}"


@dataclass(slots=True)
class FileElement:
    """
    A "file" element placed on a page.

    ``resource`` pairs the store that serves the book (``None`` when the book
    is not accessible from here) with the reference itself. ``body`` holds
    already-rendered markup shown in place of the file name; an empty body
    means the name and size are shown instead.
    """

    resource: tuple[ResourceStore | None, ResourceRef] | None
    body: str = ""
    id: str | None = None
    page: PageRef | None = None

    @property
    def has_body(self) -> bool:
        return len(self.body) != 0

    def __str__(self) -> str:
        if self.resource is None:
            return "file(<unset>)"
        return f"file({self.resource[1]})"
