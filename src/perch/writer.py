"""Static page writer with write-failure fallback.

Owns the page registry (loaded once at construction) and an injected
``ErrorPageRenderer``. Writing a page never raises: if the sink rejects
the body, the partial response is discarded and replaced by a fixed
plain-text 500.
"""

from __future__ import annotations

import logging
import os
from http import HTTPStatus

from perch.errorpage import ErrorPageRenderer
from perch.http.sink import ResponseSink
from perch.pages.loader import load_static_pages
from perch.pages.types import PageName, PageRegistry

logger = logging.getLogger("perch.pages")

INTERNAL_SERVER_ERROR = b"Internal Server Error"


def _reason_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return f"Error {status}"


class PageWriter:
    """Writes well-known static pages and error pages to response sinks.

    Build one per process and hand it to whatever routes requests. It is
    read-only after construction, so concurrent ``write_page`` calls
    need no locking.

    Usage::

        writer = PageWriter("/etc/perch/templates", ErrorPageRenderer())
        writer.write_page(PageName.ROBOTS_TXT, sink)

    Raises:
        PageLoadError: From construction, if an override cannot be read.
    """

    __slots__ = ("_error_renderer", "_pages")

    def __init__(
        self,
        custom_dir: str | os.PathLike[str] | None,
        error_renderer: ErrorPageRenderer,
    ) -> None:
        self._pages: PageRegistry = load_static_pages(custom_dir)
        self._error_renderer = error_renderer

    @property
    def pages(self) -> PageRegistry:
        """The resolved, read-only page registry."""
        return self._pages

    def write_page(self, name: PageName, sink: ResponseSink) -> None:
        """Write page *name* with status 200, or a plain 500 if the write fails."""
        content = self._pages[name]
        sink.set_status(200)
        try:
            sink.write(content)
        except Exception:
            logger.exception("Error writing %s", name.value)
            self._write_internal_error(sink)

    def write_robots_txt(self, sink: ResponseSink) -> None:
        """Write the robots exclusion page."""
        self.write_page(PageName.ROBOTS_TXT, sink)

    def write_error_page(self, sink: ResponseSink, status: int, *, message: str = "") -> None:
        """Render the error template for *status* into *sink*.

        The title is the status's reason phrase. A failed render or write
        falls back to the same plain 500 as ``write_page``.
        """
        sink.set_status(status)
        sink.set_header("Content-Type", "text/html; charset=utf-8")
        try:
            sink.write(self._error_renderer.render(_reason_phrase(status), message=message))
        except Exception:
            logger.exception("Error writing %d error page", status)
            self._write_internal_error(sink)

    def _write_internal_error(self, sink: ResponseSink) -> None:
        # Fixed literal body; the error renderer is not used on this path.
        sink.reset()
        sink.set_status(500)
        sink.set_header("Content-Type", "text/plain; charset=utf-8")
        try:
            sink.write(INTERNAL_SERVER_ERROR)
        except Exception:
            logger.exception("Error writing internal server error response")
