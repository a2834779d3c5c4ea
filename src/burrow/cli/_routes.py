"""``burrow routes`` — print the compiled route table."""

import argparse
import sys

from burrow.cli._resolve import resolve_app
from burrow.server.terminal import format_route_table


def run_routes(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and print every compiled key and its handler."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    color = False if args.no_color else None
    print(format_route_table(app.router, color=color))
