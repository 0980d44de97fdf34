"""Static page loading with operator overrides.

Reads each well-known page from the override directory once, falling
back to the compiled-in default when the file is absent. Any other
filesystem error aborts loading: serving from a half-resolved registry
is never allowed.
"""

import logging
import os
from pathlib import Path
from types import MappingProxyType

from perch.errors import PageLoadError
from perch.pages.types import (
    DEFAULT_PAGES,
    Found,
    Lookup,
    NotFound,
    PageName,
    PageRegistry,
    ResolvedPage,
)

logger = logging.getLogger("perch.pages")


def read_override(path: Path) -> Lookup:
    """Read an override file, distinguishing "missing" from "broken".

    Returns ``Found`` or ``NotFound``. Raises ``PageLoadError`` for every
    other ``OSError`` (permission denied, a directory in the file's place,
    I/O failure).
    """
    try:
        content = path.read_bytes()
    except FileNotFoundError:
        return NotFound(path)
    except OSError as exc:
        raise PageLoadError(path, exc.strerror or str(exc)) from exc
    return Found(content, path)


def resolve_static_pages(custom_dir: str | os.PathLike[str] | None) -> tuple[ResolvedPage, ...]:
    """Resolve every known page, recording whether it was overridden.

    An empty or ``None`` *custom_dir* means "no overrides": the defaults
    are returned without touching the filesystem.
    """
    if not custom_dir:
        return tuple(ResolvedPage(name, DEFAULT_PAGES[name]) for name in PageName)

    directory = Path(custom_dir)
    resolved: list[ResolvedPage] = []
    for name in PageName:
        match read_override(directory / name.value):
            case Found(content=content, path=path):
                logger.info("Using custom %s from %s", name.value, path)
                resolved.append(ResolvedPage(name, content, path))
            case NotFound():
                resolved.append(ResolvedPage(name, DEFAULT_PAGES[name]))
    return tuple(resolved)


def load_static_pages(custom_dir: str | os.PathLike[str] | None) -> PageRegistry:
    """Build the immutable page registry for *custom_dir*.

    Raises:
        PageLoadError: If an override exists but cannot be read.
    """
    pages = {page.name: page.content for page in resolve_static_pages(custom_dir)}
    return MappingProxyType(pages)
