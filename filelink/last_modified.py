"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from __future__ import annotations

from .context import Request
from .contracts import LAST_MODIFIED_HEADER_NAME, LAST_MODIFIED_PARAMETER_NAME

_DIGITS = "0123456789abcdefghijklmnopqrstuv"


def encode_last_modified(last_modified_ms: int) -> str:
    """
    Encode a modification time for the ``lastModified`` query parameter.

    Resolution is whole seconds, matching HTTP ``Last-Modified``, so that
    sub-second changes of the same file do not produce different URLs.
    """
    if last_modified_ms < 0:
        raise ValueError(f"Negative last modified: {last_modified_ms}")
    seconds = last_modified_ms // 1000
    if seconds == 0:
        return "0"
    out: list[str] = []
    while seconds:
        seconds, rem = divmod(seconds, 32)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def is_auto_last_modified_disabled(request: Request) -> bool:
    value = request.get_header(LAST_MODIFIED_HEADER_NAME)
    return value is not None and value.lower() == "false"


def last_modified_query(last_modified_ms: int) -> str:
    return f"{LAST_MODIFIED_PARAMETER_NAME}={encode_last_modified(last_modified_ms)}"
