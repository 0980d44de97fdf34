"""Error page rendering.

A single compiled kida template parametrized by ``title`` (and an
optional ``message``). Compilation happens once, at construction; after
that, ``render()`` cannot fail for any string input because every value
is autoescaped.
"""

from __future__ import annotations

import os
from pathlib import Path

from kida import Environment

from perch.errors import ConfigurationError
from perch.pages.loader import read_override
from perch.pages.types import Found

ERROR_TEMPLATE_NAME = "error.html"

DEFAULT_ERROR_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
</head>
<body>
<h1>{{ title }}</h1>
{% if message %}<p>{{ message }}</p>{% end %}
</body>
</html>
"""


class ErrorPageRenderer:
    """Renders a minimal HTML error body for a title.

    The HTTP status is never embedded here; callers set it on the
    response. Instances are read-only and safe to share across requests.

    Usage::

        renderer = ErrorPageRenderer("<h1>{{ title }}</h1>")
        renderer.render("Not Found")  # b"<h1>Not Found</h1>"
    """

    __slots__ = ("_template",)

    def __init__(self, source: str = DEFAULT_ERROR_TEMPLATE) -> None:
        env = Environment(autoescape=True)
        try:
            self._template = env.from_string(source)
        except Exception as exc:
            msg = f"Error page template failed to compile: {exc}"
            raise ConfigurationError(msg) from exc

        # Undefined names only surface at render time; fail here instead
        try:
            self.render("", message="")
        except Exception as exc:
            msg = f"Error page template failed to render: {exc}"
            raise ConfigurationError(msg) from exc

    @classmethod
    def from_directory(cls, custom_dir: str | os.PathLike[str] | None) -> ErrorPageRenderer:
        """Build a renderer from ``error.html`` in *custom_dir*, if present.

        Falls back to the built-in template when the directory is unset or
        has no ``error.html``.

        Raises:
            PageLoadError: If ``error.html`` exists but cannot be read.
            ConfigurationError: If the template is not UTF-8, fails to compile,
                or uses names other than ``title`` and ``message``.
        """
        if not custom_dir:
            return cls()

        lookup = read_override(Path(custom_dir) / ERROR_TEMPLATE_NAME)
        if not isinstance(lookup, Found):
            return cls()
        try:
            source = lookup.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Error page template {lookup.path} is not valid UTF-8"
            raise ConfigurationError(msg) from exc
        return cls(source)

    def render(self, title: str, *, message: str = "") -> bytes:
        """Render the error page body as UTF-8 bytes."""
        return self._template.render({"title": title, "message": message}).encode("utf-8")
