"""``burrow run`` — start the server for an app."""

import argparse
import sys

from burrow.cli._resolve import resolve_app
from burrow.errors import ConfigurationError


def run_app(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it with its own context.

    The app must have been built with ``context=`` since the command line
    has no way to supply one.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        app.run(host=args.host, port=args.port)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
