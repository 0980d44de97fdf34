"""Page names, built-in defaults, and override lookup results.

Every ``PageName`` has exactly one active content at a time: the bytes
of an override file when the operator supplied one, the compiled-in
default otherwise.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType


class PageName(StrEnum):
    """Well-known static pages. The value doubles as the override file name."""

    ROBOTS_TXT = "robots.txt"


DEFAULT_ROBOTS_TXT = b"User-agent: *\nDisallow: /"

DEFAULT_PAGES: Mapping[PageName, bytes] = MappingProxyType(
    {
        PageName.ROBOTS_TXT: DEFAULT_ROBOTS_TXT,
    }
)

# Resolved, read-only page content keyed by name
type PageRegistry = Mapping[PageName, bytes]


@dataclass(frozen=True, slots=True)
class Found:
    """An override file that exists and was read in full."""

    content: bytes
    path: Path


@dataclass(frozen=True, slots=True)
class NotFound:
    """No override file at ``path``; the default applies."""

    path: Path


type Lookup = Found | NotFound


@dataclass(frozen=True, slots=True)
class ResolvedPage:
    """A page together with where its active content came from.

    ``origin`` is the override file, or ``None`` for the built-in default.
    """

    name: PageName
    content: bytes
    origin: Path | None = None

    @property
    def is_override(self) -> bool:
        return self.origin is not None
