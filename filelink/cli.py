from __future__ import annotations

import dataclasses
import io
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import NoReturn

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.theme import Theme

from . import __version__
from . import ui_messages as ui
from ._cli_args import build_parser
from ._cli_paths import _validate_output_path
from .config import settings_from_env
from .context import Request, Response
from .contracts import (
    EXPORTING_HEADER_NAME,
    LAST_MODIFIED_HEADER_NAME,
    ExitCode,
)
from .errors import FileLinkError
from .model import BookRef, FileElement, ResourceRef
from .renderer import write_file_link
from .resources import FilesystemResourceStore

# Custom theme for Rich
custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "dim": "dim",
    }
)

CLI_LAYOUT_WIDTH = 60


def _make_console(*, no_color: bool) -> Console:
    return Console(theme=custom_theme, width=100, no_color=no_color)


console = _make_console(no_color=False)


def print_banner() -> None:
    console.print(
        Panel(
            ui.banner_title(__version__),
            border_style="blue",
            padding=(0, 2),
            width=CLI_LAYOUT_WIDTH,
            expand=False,
        )
    )


def _is_debug_enabled(
    *,
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> bool:
    args = list(sys.argv[1:] if argv is None else argv)
    debug_from_flag = any(arg == "--debug" for arg in args)
    env = os.environ if environ is None else environ
    debug_from_env = env.get("FILELINK_DEBUG") == "1"
    return debug_from_flag or debug_from_env


def _configure_logging(*, verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _contract_error(message: str) -> NoReturn:
    console.print(ui.fmt_contract_error(message))
    sys.exit(ExitCode.CONTRACT_ERROR)


def _main_impl() -> None:
    ap = build_parser(__version__)
    args = ap.parse_args()

    global console
    console = _make_console(no_color=args.no_color)
    _configure_logging(verbose=args.verbose)

    if not args.quiet:
        print_banner()

    html_out_path: Path | None = None
    if args.html_out:
        html_out_path = _validate_output_path(
            args.html_out,
            expected_suffix=".html",
            label="HTML",
            console=console,
            invalid_message=ui.fmt_invalid_output_extension,
            invalid_path_message=ui.fmt_invalid_output_path,
        )

    headers: dict[str, str] = {}
    if args.export:
        headers[EXPORTING_HEADER_NAME] = "true"
    if args.no_last_modified:
        headers[LAST_MODIFIED_HEADER_NAME] = "false"

    settings = settings_from_env()
    if args.open_file:
        settings = dataclasses.replace(settings, open_file_enabled=True)
    request = Request(
        context_path=args.context_path,
        headers=headers,
        remote_addr=args.remote_addr,
    )
    response = Response()

    try:
        store = None if args.no_root else FilesystemResourceStore(args.root)
        ref = ResourceRef(BookRef(args.domain, args.book), args.path)
        element = FileElement(
            resource=(store, ref), body=args.body, id=args.element_id
        )

        if not args.quiet:
            console.print(ui.fmt_resource(ref))

        if args.check:
            write_file_link(settings, request, response, None, element)
            if not args.quiet:
                console.print(f"[success]{ui.fmt_check_passed(ref)}[/success]")
            return

        buf = io.StringIO()
        write_file_link(settings, request, response, buf, element)
    except FileLinkError as e:
        _contract_error(ui.fmt_invalid_reference(e))

    html = buf.getvalue()
    if html_out_path is None:
        console.print(html, markup=False, highlight=False, emoji=False, soft_wrap=True)
        return

    try:
        html_out_path.parent.mkdir(parents=True, exist_ok=True)
        html_out_path.write_text(html + "\n", "utf-8")
    except OSError as e:
        _contract_error(ui.fmt_html_write_failed(path=html_out_path, error=e))
    if not args.quiet:
        console.print(ui.fmt_html_saved(html_out_path))


def main() -> None:
    try:
        _main_impl()
    except SystemExit:
        raise
    except Exception as e:
        console.print(ui.fmt_internal_error(e, debug=_is_debug_enabled()))
        sys.exit(ExitCode.INTERNAL_ERROR)


if __name__ == "__main__":
    main()
