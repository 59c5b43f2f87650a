"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

SEPARATOR: Final = "/"

LAST_MODIFIED_PARAMETER_NAME: Final = "lastModified"
LAST_MODIFIED_HEADER_NAME: Final = "X-FileLink-Last-Modified"
EXPORTING_HEADER_NAME: Final = "X-FileLink-Exporting"

DIRECTORY_LINK_CLASS: Final = "filelink-directory-link"
FILE_LINK_CLASS: Final = "filelink-file-link"
OPEN_FILE_FUNCTION: Final = "filelink_openfile.openFile"


class ExitCode(IntEnum):
    SUCCESS = 0
    CONTRACT_ERROR = 2
    INTERNAL_ERROR = 5


EXIT_CODE_DESCRIPTIONS: Final[tuple[tuple[ExitCode, str], ...]] = (
    (ExitCode.SUCCESS, "success"),
    (
        ExitCode.CONTRACT_ERROR,
        (
            "contract error (invalid reference, directory/path mismatch, "
            "invalid output extension)"
        ),
    ),
    (
        ExitCode.INTERNAL_ERROR,
        "internal error (unexpected exception; please report)",
    ),
)


def cli_help_epilog() -> str:
    lines = ["Exit codes"]
    for code, description in EXIT_CODE_DESCRIPTIONS:
        lines.append(f"  - {int(code)} - {description}")
    return "\n".join(lines)
