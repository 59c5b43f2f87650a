"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from .contracts import EXPORTING_HEADER_NAME
from .model import PageRef


@dataclass(slots=True)
class PageIndex:
    """Numbers the pages when several of them are rendered into one document."""

    pages: tuple[PageRef, ...] = ()

    def index_of(self, page: PageRef) -> int | None:
        try:
            return self.pages.index(page)
        except ValueError:
            return None


@dataclass(slots=True)
class Request:
    context_path: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    remote_addr: str = "127.0.0.1"
    page_index: PageIndex | None = None
    _lower_headers: dict[str, str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._lower_headers = {k.lower(): v for k, v in self.headers.items()}

    def get_header(self, name: str) -> str | None:
        return self._lower_headers.get(name.lower())


@dataclass(slots=True)
class Response:
    url_rewriter: Callable[[str], str] | None = None
    character_encoding: str = "utf-8"

    def encode_url(self, url: str) -> str:
        if self.url_rewriter is None:
            return url
        return self.url_rewriter(url)


def is_exporting(request: Request) -> bool:
    value = request.get_header(EXPORTING_HEADER_NAME)
    return value is not None and value.lower() == "true"


def ref_id_in_page(request: Request, page: PageRef | None, element_id: str) -> str:
    """
    Id of an element as it appears in the rendered document.

    Ids are only unique within a page, so when a page index is present the
    page number is folded into the id.
    """
    if request.page_index is None or page is None:
        return element_id
    index = request.page_index.index_of(page)
    if index is None:
        return element_id
    return f"p{index}-{element_id}"
