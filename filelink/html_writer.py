"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from __future__ import annotations

from typing import Any, Protocol

from ._html_escape import _escape_attr, _escape_html


class TextSink(Protocol):
    def write(self, s: str, /) -> Any: ...


class HtmlWriter:
    """Writes markup to a text sink, escaping everything that is not ``raw``."""

    __slots__ = ("_sink",)

    def __init__(self, sink: TextSink) -> None:
        self._sink = sink

    def raw(self, markup: str) -> HtmlWriter:
        self._sink.write(markup)
        return self

    def text(self, value: Any) -> HtmlWriter:
        self._sink.write(_escape_html(value))
        return self

    def start(self, tag: str) -> HtmlWriter:
        self._sink.write(f"<{tag}")
        return self

    def attr(self, name: str, value: Any) -> HtmlWriter:
        self._sink.write(f' {name}="{_escape_attr(value)}"')
        return self

    def close_start(self) -> HtmlWriter:
        self._sink.write(">")
        return self

    def end(self, tag: str) -> HtmlWriter:
        self._sink.write(f"</{tag}>")
        return self
