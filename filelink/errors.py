"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""


class FileLinkError(Exception):
    """Base exception for FileLink."""


class InvalidStateError(FileLinkError):
    """Element content is inconsistent with the resource it references."""


class ValidationError(FileLinkError):
    """Input validation failed."""
