"""Perch — well-known static pages with operator overrides.

Serves pages such as ``robots.txt`` from compiled-in defaults unless an
operator drops a replacement file into the override directory. A write
that fails partway through is turned into a plain 500 response instead
of a silent, truncated one.

Basic usage::

    from perch import ErrorPageRenderer, PageName, PageWriter

    writer = PageWriter("/etc/perch/templates", ErrorPageRenderer())
    writer.write_page(PageName.ROBOTS_TXT, sink)

As an ASGI app::

    from perch import PerchConfig, StaticPagesApp

    app = StaticPagesApp.from_config(PerchConfig(custom_templates_dir="/etc/perch"))
    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "BufferedSink",
    "ConfigurationError",
    "ErrorPageRenderer",
    "PageLoadError",
    "PageName",
    "PageWriter",
    "PerchConfig",
    "PerchError",
    "Response",
    "ResponseSink",
    "StaticPagesApp",
    "load_static_pages",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name == "StaticPagesApp":
        from perch.app import StaticPagesApp

        return StaticPagesApp

    if name == "PerchConfig":
        from perch.config import PerchConfig

        return PerchConfig

    if name == "ErrorPageRenderer":
        from perch.errorpage import ErrorPageRenderer

        return ErrorPageRenderer

    if name == "PageWriter":
        from perch.writer import PageWriter

        return PageWriter

    if name in ("PageName", "load_static_pages"):
        from perch import pages as _pages

        return getattr(_pages, name)

    if name == "Response":
        from perch.http.response import Response

        return Response

    if name in ("BufferedSink", "ResponseSink"):
        from perch.http import sink as _sink

        return getattr(_sink, name)

    if name in ("ConfigurationError", "PageLoadError", "PerchError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
