"""``perch run`` — build the app from CLI flags and serve it."""

import argparse
import sys

from perch.app import StaticPagesApp
from perch.config import PerchConfig
from perch.errors import ConfigurationError


def build_config(args: argparse.Namespace) -> PerchConfig:
    """CLI flags override the config defaults."""
    defaults = PerchConfig()
    return PerchConfig(
        custom_templates_dir=args.custom_templates_dir,
        host=args.host or defaults.host,
        port=args.port if args.port is not None else defaults.port,
        log_level=args.log_level,
    )


def run_server(args: argparse.Namespace) -> None:
    """Start the server; startup errors exit with status 1."""
    config = build_config(args)
    try:
        app = StaticPagesApp.from_config(config)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Starting server on {config.host}:{config.port}")
    app.run()
