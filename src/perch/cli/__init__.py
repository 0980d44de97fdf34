"""Perch CLI — page resolution check and server.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import logging
import sys

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--custom-templates-dir",
        default=None,
        help="Directory checked for robots.txt and error.html overrides",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="info",
        help="Logging verbosity (default: info)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch — static pages with operator overrides.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch check ------------------------------------------------------
    check_parser = subparsers.add_parser(
        "check", help="Resolve every static page and report where it comes from"
    )
    _add_common_arguments(check_parser)

    # -- perch run --------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the static page server")
    _add_common_arguments(run_parser)
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "check":
        from perch.cli._check import run_check

        run_check(args)
    elif args.command == "run":
        from perch.cli._run import run_server

        run_server(args)
