"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from __future__ import annotations

import argparse

from . import ui_messages as ui
from .contracts import cli_help_epilog


def build_parser(version: str) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="filelink",
        description="Render the HTML link for a file or directory of a book.",
        epilog=cli_help_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument(
        "--version",
        action="version",
        version=ui.version_output(version),
        help=ui.HELP_VERSION,
    )

    target_group = ap.add_argument_group("Target")
    target_group.add_argument("path", help=ui.HELP_PATH)
    root_group = target_group.add_mutually_exclusive_group(required=True)
    root_group.add_argument("--root", metavar="DIR", help=ui.HELP_ROOT)
    root_group.add_argument("--no-root", action="store_true", help=ui.HELP_NO_ROOT)
    target_group.add_argument("--domain", default="localhost", help=ui.HELP_DOMAIN)
    target_group.add_argument("--book", default="/", help=ui.HELP_BOOK)

    element_group = ap.add_argument_group("Element")
    element_group.add_argument("--id", dest="element_id", help=ui.HELP_ID)
    element_group.add_argument("--body", default="", help=ui.HELP_BODY)

    request_group = ap.add_argument_group("Request")
    request_group.add_argument("--context-path", default="", help=ui.HELP_CONTEXT_PATH)
    request_group.add_argument(
        "--open-file", action="store_true", help=ui.HELP_OPEN_FILE
    )
    request_group.add_argument(
        "--remote-addr", default="127.0.0.1", help=ui.HELP_REMOTE_ADDR
    )
    request_group.add_argument("--export", action="store_true", help=ui.HELP_EXPORT)
    request_group.add_argument(
        "--no-last-modified", action="store_true", help=ui.HELP_NO_LAST_MODIFIED
    )

    out_group = ap.add_argument_group("Output")
    out_group.add_argument("--check", action="store_true", help=ui.HELP_CHECK)
    out_group.add_argument(
        "--html",
        dest="html_out",
        metavar="FILE",
        help=ui.HELP_HTML,
    )
    out_group.add_argument("--no-color", action="store_true", help=ui.HELP_NO_COLOR)
    out_group.add_argument("--quiet", action="store_true", help=ui.HELP_QUIET)
    out_group.add_argument("--verbose", action="store_true", help=ui.HELP_VERBOSE)
    out_group.add_argument("--debug", action="store_true", help=ui.HELP_DEBUG)
    return ap
