"""``perch check`` — resolve pages and the error template, report origins."""

import argparse
import sys

from perch.errorpage import ErrorPageRenderer
from perch.errors import ConfigurationError
from perch.pages.loader import resolve_static_pages


def run_check(args: argparse.Namespace) -> None:
    """Print each page's origin; exit 1 if anything fails to load."""
    try:
        pages = resolve_static_pages(args.custom_templates_dir)
        ErrorPageRenderer.from_directory(args.custom_templates_dir)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for page in pages:
        origin = str(page.origin) if page.is_override else "built-in default"
        print(f"{page.name.value}: {origin} ({len(page.content)} bytes)")
    print("OK")
