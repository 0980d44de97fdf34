"""Well-known static pages and their override-aware loader."""

from perch.pages.loader import load_static_pages, read_override, resolve_static_pages
from perch.pages.types import (
    DEFAULT_PAGES,
    DEFAULT_ROBOTS_TXT,
    Found,
    NotFound,
    PageName,
    PageRegistry,
    ResolvedPage,
)

__all__ = [
    "DEFAULT_PAGES",
    "DEFAULT_ROBOTS_TXT",
    "Found",
    "NotFound",
    "PageName",
    "PageRegistry",
    "ResolvedPage",
    "load_static_pages",
    "read_override",
    "resolve_static_pages",
]
