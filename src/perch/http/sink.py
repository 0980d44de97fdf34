"""Response sinks — the write target for static pages.

A sink accepts a status, headers, and body bytes, and can be reset to
discard everything written so far. ``BufferedSink`` keeps the whole
response in memory until ``to_response()`` commits it, so a failed
first write can always be replaced by a second, complete response.
"""

from __future__ import annotations

from typing import Protocol

from perch.http.response import Response


class ResponseSink(Protocol):
    """Protocol for anything a ``PageWriter`` can write into.

    ``write()`` signals failure by raising; it never returns a short
    count silently.
    """

    def set_status(self, status: int) -> None: ...

    def set_header(self, name: str, value: str) -> None: ...

    def write(self, data: bytes) -> int: ...

    def reset(self) -> None: ...


class BufferedSink:
    """In-memory ``ResponseSink`` that commits to an immutable ``Response``.

    Nothing reaches the client until the ASGI host calls
    ``to_response()`` and sends the result, so ``reset()`` is always
    able to start over.

    Usage::

        sink = BufferedSink(content_type="text/plain; charset=utf-8")
        writer.write_page(PageName.ROBOTS_TXT, sink)
        await send_response(sink.to_response(), send)
    """

    __slots__ = ("_chunks", "_content_type", "_default_content_type", "_headers", "_status")

    def __init__(self, *, content_type: str = "text/plain; charset=utf-8") -> None:
        self._default_content_type = content_type
        self._status = 200
        self._content_type = content_type
        self._headers: list[tuple[str, str]] = []
        self._chunks: list[bytes] = []

    @property
    def status(self) -> int:
        return self._status

    @property
    def body(self) -> bytes:
        return b"".join(self._chunks)

    def set_status(self, status: int) -> None:
        self._status = status

    def set_header(self, name: str, value: str) -> None:
        # Content-Type is carried on the Response itself, not in the header list
        if name.lower() == "content-type":
            self._content_type = value
            return
        self._headers.append((name, value))

    def write(self, data: bytes) -> int:
        self._chunks.append(bytes(data))
        return len(data)

    def reset(self) -> None:
        """Discard status, headers, and body written so far."""
        self._status = 200
        self._content_type = self._default_content_type
        self._headers.clear()
        self._chunks.clear()

    def to_response(self) -> Response:
        """Freeze the buffered state into a ``Response``."""
        return Response(
            body=self.body,
            status=self._status,
            content_type=self._content_type,
            headers=tuple(self._headers),
        )
