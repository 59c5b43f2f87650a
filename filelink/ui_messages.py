from __future__ import annotations

import platform
import shlex
import sys
import traceback
from pathlib import Path

from rich.markup import escape

from . import __version__

BANNER_SUBTITLE = "[italic]File and directory links for content pages[/italic]"

MARKER_CONTRACT_ERROR = "[error]CONTRACT ERROR:[/error]"
MARKER_INTERNAL_ERROR = "[error]INTERNAL ERROR:[/error]"

HELP_VERSION = "Print the FileLink version and exit."
HELP_PATH = "Path of the file or directory within the book (directories end in /)."
HELP_ROOT = "Directory holding the book's resources."
HELP_NO_ROOT = "Render as if the book were not accessible from here."
HELP_DOMAIN = "Domain of the book."
HELP_BOOK = "Path of the book within its domain."
HELP_CONTEXT_PATH = "Context path the site is served under."
HELP_ID = "Element id to place on the anchor."
HELP_BODY = "Markup to show instead of the file name and size."
HELP_OPEN_FILE = "Allow links that open the local file directly."
HELP_REMOTE_ADDR = "Address of the client the link is rendered for."
HELP_EXPORT = "Render for a static export (no local file links)."
HELP_NO_LAST_MODIFIED = "Do not add the lastModified parameter to links."
HELP_CHECK = "Only check the reference, do not render anything."
HELP_HTML = "Write the anchor HTML to FILE."
HELP_NO_COLOR = "Disable ANSI colors in output."
HELP_QUIET = "Minimize output (still shows warnings and errors)."
HELP_VERBOSE = "Log debug details while rendering."
HELP_DEBUG = "Print debug details (traceback and environment) on internal errors."

INFO_RESOURCE = "[info]Resource:[/info] {ref}"
INFO_HTML_SAVED = "[info]HTML saved:[/info] {path}"
SUCCESS_CHECK_PASSED = "✔ Reference is valid: {ref}"

ERR_INVALID_OUTPUT_EXT = (
    "[error]Invalid {label} output extension: {path} "
    "(expected {expected_suffix}).[/error]"
)
ERR_INVALID_OUTPUT_PATH = (
    "[error]Invalid {label} output path: {path} ({error}).[/error]"
)
ERR_HTML_WRITE_FAILED = "[error]Failed to write HTML: {path} ({error}).[/error]"
ERR_INVALID_REFERENCE = "[error]Invalid reference.[/error]\n{error}"


def version_output(version: str) -> str:
    return f"FileLink {version}"


def banner_title(version: str) -> str:
    return (
        f"[bold white]FileLink[/bold white] [dim]v{version}[/dim]\n{BANNER_SUBTITLE}"
    )


def fmt_invalid_output_extension(
    *, label: str, path: Path, expected_suffix: str
) -> str:
    return ERR_INVALID_OUTPUT_EXT.format(
        label=label, path=escape(str(path)), expected_suffix=expected_suffix
    )


def fmt_invalid_output_path(*, label: str, path: Path, error: object) -> str:
    return ERR_INVALID_OUTPUT_PATH.format(
        label=label, path=escape(str(path)), error=escape(str(error))
    )


def fmt_html_write_failed(*, path: Path, error: object) -> str:
    return ERR_HTML_WRITE_FAILED.format(
        path=escape(str(path)), error=escape(str(error))
    )


def fmt_invalid_reference(error: object) -> str:
    return ERR_INVALID_REFERENCE.format(error=escape(str(error)))


def fmt_resource(ref: object) -> str:
    return INFO_RESOURCE.format(ref=escape(str(ref)))


def fmt_check_passed(ref: object) -> str:
    return SUCCESS_CHECK_PASSED.format(ref=escape(str(ref)))


def fmt_html_saved(path: Path) -> str:
    return INFO_HTML_SAVED.format(path=escape(str(path)))


def fmt_contract_error(message: str) -> str:
    return f"{MARKER_CONTRACT_ERROR}\n{message}"


def fmt_internal_error(error: BaseException, *, debug: bool = False) -> str:
    error_name = type(error).__name__
    error_text = escape(str(error).strip() or "<no message>")
    lines = [
        MARKER_INTERNAL_ERROR,
        "Unexpected exception.",
        f"Reason: {error_name}: {error_text}",
        "",
        "Next steps:",
        "- Re-run with --debug to include a traceback.",
        "- If this is reproducible, report it with the --debug output.",
    ]
    if not debug:
        return "\n".join(lines)

    traceback_lines = traceback.format_exception(
        type(error), error, error.__traceback__
    )
    command_line = shlex.join(sys.argv)
    lines.extend(
        [
            "",
            "DEBUG DETAILS",
            f"Platform: {platform.platform()}",
            f"Python: {sys.version.split()[0]}",
            f"FileLink: {__version__}",
            f"Command: {escape(command_line)}",
            f"CWD: {escape(str(Path.cwd()))}",
            "Traceback:",
            escape("".join(traceback_lines).rstrip()),
        ]
    )
    return "\n".join(lines)
