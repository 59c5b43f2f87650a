"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from __future__ import annotations

_UNITS = (" KB", " MB", " GB", " TB", " PB", " EB")


def approximate_size(length: int) -> str:
    """Convert a byte count into a friendly string such as ``4.2 KB``."""
    if length < 0:
        raise ValueError(f"Negative length: {length}")
    if length < 1024:
        return "1 byte" if length == 1 else f"{length} bytes"

    unit_size = 1024
    index = 0
    while index < len(_UNITS) - 1 and length >= unit_size * 1024:
        unit_size *= 1024
        index += 1
    unit = _UNITS[index]

    if length // unit_size < 100:
        # one decimal, half-up; 99.95 and above falls through to whole units
        tenths = (length * 10 + (unit_size >> 1)) // unit_size
        if tenths < 1000:
            return f"{tenths // 10}.{tenths % 10}{unit}"
    whole = (length + (unit_size >> 1)) // unit_size
    if whole >= 1024 and index < len(_UNITS) - 1:
        return f"1.0{_UNITS[index + 1]}"
    return f"{whole}{unit}"
