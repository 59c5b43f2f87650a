"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from __future__ import annotations

import ipaddress
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .context import Request
from .contracts import DIRECTORY_LINK_CLASS, FILE_LINK_CLASS, OPEN_FILE_FUNCTION

ENV_OPEN_FILE = "FILELINK_OPEN_FILE"
ENV_DIRECTORY_LINK_CLASS = "FILELINK_DIRECTORY_LINK_CLASS"
ENV_FILE_LINK_CLASS = "FILELINK_FILE_LINK_CLASS"


@dataclass(frozen=True, slots=True)
class RendererSettings:
    """Site-wide knobs shared by every request."""

    open_file_enabled: bool = False
    directory_link_class: str = DIRECTORY_LINK_CLASS
    file_link_class: str = FILE_LINK_CLASS
    open_file_function: str = OPEN_FILE_FUNCTION

    def link_css_class(self, is_directory: bool) -> str:
        return self.directory_link_class if is_directory else self.file_link_class


def settings_from_env(environ: Mapping[str, str] | None = None) -> RendererSettings:
    env = os.environ if environ is None else environ
    return RendererSettings(
        open_file_enabled=env.get(ENV_OPEN_FILE) == "1",
        directory_link_class=env.get(ENV_DIRECTORY_LINK_CLASS) or DIRECTORY_LINK_CLASS,
        file_link_class=env.get(ENV_FILE_LINK_CLASS) or FILE_LINK_CLASS,
    )


def _is_loopback(addr: str) -> bool:
    try:
        return ipaddress.ip_address(addr).is_loopback
    except ValueError:
        return False


def is_open_file_allowed(settings: RendererSettings, request: Request) -> bool:
    """Local files may only be opened by a browser running on the server itself."""
    return settings.open_file_enabled and _is_loopback(request.remote_addr)
