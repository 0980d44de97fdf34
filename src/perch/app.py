"""ASGI host for the static page writer.

Maps request paths to well-known pages and writes them through a
shared ``PageWriter``. Every response is assembled in a ``BufferedSink``
first, so the writer's fallback can replace a failed write before any
byte reaches the client.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from perch._internal.asgi import Receive, Scope, Send
from perch.config import PerchConfig
from perch.errorpage import ErrorPageRenderer
from perch.errors import HTTPError, MethodNotAllowed, NotFound
from perch.http.sink import BufferedSink
from perch.pages.types import PageName
from perch.server.sender import send_response
from perch.writer import PageWriter

logger = logging.getLogger("perch.server")

DEFAULT_ROUTES: Mapping[str, PageName] = MappingProxyType(
    {
        "/robots.txt": PageName.ROBOTS_TXT,
    }
)

_ALLOWED_METHODS = frozenset({"GET", "HEAD"})


class StaticPagesApp:
    """ASGI 3.0 application serving static pages from a ``PageWriter``.

    Usage::

        writer = PageWriter(custom_dir, ErrorPageRenderer())
        app = StaticPagesApp(writer)

        # or, from configuration
        app = StaticPagesApp.from_config(PerchConfig(custom_templates_dir="/etc/perch"))
    """

    __slots__ = ("config", "routes", "writer")

    def __init__(
        self,
        writer: PageWriter,
        *,
        routes: Mapping[str, PageName] = DEFAULT_ROUTES,
        config: PerchConfig | None = None,
    ) -> None:
        self.writer = writer
        self.routes = MappingProxyType(dict(routes))
        self.config = config or PerchConfig()

    @classmethod
    def from_config(cls, config: PerchConfig) -> StaticPagesApp:
        """Build the renderer, writer, and app from *config*.

        Raises:
            ConfigurationError: If an override or the error template is unusable.
        """
        renderer = ErrorPageRenderer.from_directory(config.custom_templates_dir)
        writer = PageWriter(config.custom_templates_dir, renderer)
        return cls(writer, config=config)

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve the app with pounce."""
        from perch.server.runner import run_server

        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            log_level=self.config.log_level,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        method = scope["method"]
        sink = BufferedSink(content_type=self.config.content_type)
        try:
            self._dispatch(method, scope["path"], sink)
        except HTTPError as exc:
            logger.debug("%d %s %s — %s", exc.status, method, scope["path"], exc.detail)
            sink.reset()
            for name, value in exc.headers:
                sink.set_header(name, value)
            self.writer.write_error_page(sink, exc.status, message=exc.detail)

        await send_response(sink.to_response(), send, head=method == "HEAD")

    def _dispatch(self, method: str, path: str, sink: BufferedSink) -> None:
        name = self.routes.get(path)
        if name is None:
            raise NotFound()
        if method not in _ALLOWED_METHODS:
            raise MethodNotAllowed(_ALLOWED_METHODS)
        self.writer.write_page(name, sink)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        There is nothing to start or stop: the writer is fully built
        before the app exists.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
