"""Application configuration.

PerchConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class PerchConfig:
    """Static page server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = PerchConfig(custom_templates_dir="/etc/perch", port=4180)
    """

    # Overrides: robots.txt and error.html are looked up here (None = built-ins only)
    custom_templates_dir: str | Path | None = None

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Logging
    log_level: str = "info"

    # Content type sent with static pages
    content_type: str = "text/plain; charset=utf-8"
