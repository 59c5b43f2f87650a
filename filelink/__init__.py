"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("filelink")
except PackageNotFoundError:
    __version__ = "dev"
