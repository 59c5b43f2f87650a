"""
FileLink — file and directory links for book-based content pages.

Copyright (c) 2026 Den Rozhnovskiy
Licensed under the MIT License.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack
from pathlib import Path

from ._html_escape import _escape_js_string, encode_uri
from .config import RendererSettings, is_open_file_allowed
from .context import Request, Response, is_exporting, ref_id_in_page
from .contracts import SEPARATOR
from .errors import InvalidStateError
from .html_writer import HtmlWriter, TextSink
from .last_modified import is_auto_last_modified_disabled, last_modified_query
from .model import FileElement, ResourceRef
from .resources import ResourceConnection
from .sizes import approximate_size

logger = logging.getLogger(__name__)


def _find_local_file(
    conn: ResourceConnection | None, ref: ResourceRef
) -> Path | None:
    if conn is None or not conn.exists():
        return None
    try:
        return conn.local_file()
    except FileNotFoundError:
        # Resource removed between exists() and local_file()
        logger.debug("Resource vanished before it could be opened: %s", ref)
        return None


def _is_directory(local_file: Path | None, ref: ResourceRef) -> bool:
    if local_file is None:
        # In another book and not available, assume directory when ends in separator
        return ref.is_directory_path
    is_directory = local_file.is_dir()
    if is_directory and not ref.is_directory_path:
        raise InvalidStateError(
            f"References to directories must end in slash ({SEPARATOR}): {ref}"
        )
    if not is_directory and ref.is_directory_path:
        raise InvalidStateError(
            f"References to files may not end in slash ({SEPARATOR}): {ref}"
        )
    return is_directory


def _derived_filename(ref: ResourceRef) -> str:
    path = ref.path
    if path.endswith(SEPARATOR):
        slash_before = path.rfind(SEPARATOR, 0, len(path) - 1)
    else:
        slash_before = path.rfind(SEPARATOR)
    filename = path[slash_before + 1 :]
    if not filename:
        raise InvalidStateError(f"Invalid filename for file: {path}")
    return filename


def _known(value: int | None, unknown: int) -> int | None:
    if value is None or value == unknown:
        return None
    return value


def _href(
    *,
    request: Request,
    response: Response,
    conn: ResourceConnection | None,
    ref: ResourceRef,
    is_directory: bool,
) -> str:
    url_path = request.context_path + ref.book_ref.prefix + ref.path
    if (
        conn is not None
        and not is_directory
        and not is_auto_last_modified_disabled(request)
        and conn.exists()
    ):
        last_modified = _known(conn.last_modified(), 0)
        if last_modified is not None:
            url_path += "?" + last_modified_query(last_modified)
    return response.encode_url(encode_uri(url_path))


def _file_uri(local_file: Path, is_directory: bool) -> str:
    uri = local_file.as_uri()
    if is_directory and not uri.endswith(SEPARATOR):
        uri += SEPARATOR
    return uri


def _onclick(settings: RendererSettings, ref: ResourceRef) -> str:
    book_ref = ref.book_ref
    args = ", ".join(
        _escape_js_string(v) for v in (book_ref.domain, book_ref.path, ref.path)
    )
    return f"{settings.open_file_function}({args}); return false;"


def write_file_link(
    settings: RendererSettings,
    request: Request,
    response: Response,
    out: TextSink | None,
    element: FileElement,
) -> None:
    """
    Write the anchor for a file element.

    When ``out`` is ``None`` the reference is only checked and nothing is
    written, so callers can validate before any output has been started.

    Raises:
        InvalidStateError: the element has no resource, the reference and the
            filesystem disagree about being a directory, or no file name can
            be derived from the reference.
    """
    if element.resource is None:
        raise InvalidStateError(f"Resource not set on file: {element}")
    store, ref = element.resource

    resource = None if store is None else store.get_resource(ref.path)
    with ExitStack() as stack:
        conn: ResourceConnection | None = None
        if resource is not None:
            conn = stack.enter_context(resource.open())

        local_file = _find_local_file(conn, ref)
        is_directory = _is_directory(local_file, ref)
        if out is None:
            return

        w = HtmlWriter(out)
        has_body = element.has_body
        open_file = (
            is_open_file_allowed(settings, request)
            and local_file is not None
            and not is_exporting(request)
        )

        w.start("a")
        if element.id is not None:
            w.attr("id", ref_id_in_page(request, element.page, element.id))
        if not has_body:
            w.attr("class", settings.link_css_class(is_directory))
        if open_file:
            assert local_file is not None
            w.attr("href", response.encode_url(_file_uri(local_file, is_directory)))
            w.attr("onclick", _onclick(settings, ref))
        else:
            w.attr(
                "href",
                _href(
                    request=request,
                    response=response,
                    conn=conn,
                    ref=ref,
                    is_directory=is_directory,
                ),
            )
        w.close_start()

        if has_body:
            w.raw(element.body)
        elif local_file is None:
            w.text(_derived_filename(ref))
        else:
            w.text(local_file.name)
            if is_directory:
                w.text(SEPARATOR)
        w.end("a")

        if not has_body and conn is not None and not is_directory and conn.exists():
            length = _known(conn.length(), -1)
            if length is not None:
                w.text(f" ({approximate_size(length)})")
