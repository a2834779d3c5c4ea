"""Burrow CLI — route table listing and server startup.

Entry point registered as ``burrow`` in ``pyproject.toml``::

    [project.scripts]
    burrow = "burrow.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``burrow`` command."""
    parser = argparse.ArgumentParser(
        prog="burrow",
        description="Burrow — a longest-prefix request router for ASGI.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- burrow routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List compiled routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    routes_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI color even on a terminal",
    )

    # -- burrow run -------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the server")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from burrow.cli._routes import run_routes

        run_routes(args)
    elif args.command == "run":
        from burrow.cli._run import run_app

        run_app(args)
