"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from __future__ import annotations

import html
import json
import re
from typing import Any
from urllib.parse import quote

# Reserved and unreserved URI characters, plus "%" so existing escapes survive.
_URI_SAFE = ";/?:@&=+$,-_.!~*'()#[]%"
_BARE_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _escape_html(v: Any) -> str:
    text = html.escape("" if v is None else str(v), quote=False)
    text = text.replace("`", "&#96;")
    text = text.replace("\u2028", "&#8232;").replace("\u2029", "&#8233;")
    return text


def _escape_attr(v: Any) -> str:
    text = html.escape("" if v is None else str(v), quote=True)
    text = text.replace("`", "&#96;")
    text = text.replace("\u2028", "&#8232;").replace("\u2029", "&#8233;")
    return text


def _escape_js_string(v: Any) -> str:
    """
    Double-quoted JavaScript string literal for ``v``.

    Markup-significant characters are emitted as ``\\uXXXX`` so the literal
    cannot close a ``<script>`` element; the result still needs
    ``_escape_attr`` when it is placed in an attribute.
    """
    text = json.dumps("" if v is None else str(v), ensure_ascii=False)
    return (
        text.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def encode_uri(url: str) -> str:
    return quote(_BARE_PERCENT_RE.sub("%25", url), safe=_URI_SAFE)
