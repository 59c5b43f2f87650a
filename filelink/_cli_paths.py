"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from .contracts import ExitCode
from .ui_messages import fmt_contract_error


def _validate_output_path(
    path: str,
    *,
    expected_suffix: str,
    label: str,
    console: Console,
    invalid_message: Callable[..., str],
    invalid_path_message: Callable[..., str],
) -> Path:
    out = Path(path).expanduser()
    if out.suffix.lower() != expected_suffix:
        console.print(
            fmt_contract_error(
                invalid_message(label=label, path=out, expected_suffix=expected_suffix)
            )
        )
        sys.exit(ExitCode.CONTRACT_ERROR)
    try:
        return out.resolve()
    except OSError as e:
        console.print(
            fmt_contract_error(invalid_path_message(label=label, path=out, error=e))
        )
        sys.exit(ExitCode.CONTRACT_ERROR)
