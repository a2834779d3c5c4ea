"""Terminal formatting for the compiled route table.

Produces the colored listing printed by ``burrow routes`` and at startup
in debug mode. Respects TTY detection — no ANSI codes when piped or
redirected.

Example output (with color)::

    ── burrow routes ────────────────────────────────────────────

      /api                 (placeholder)
      /api/users           user_by_id
      /api/v1              v1
      /health              health

      4 routes · 1 placeholder

    ─────────────────────────────────────────────────────────────

"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from burrow.routing.router import Router

_W = 65


def _use_color(stream: object | None = None) -> bool:
    """True if the output stream supports ANSI color."""
    s = stream or sys.stdout
    try:
        return s.isatty()  # type: ignore[union-attr]
    except (AttributeError, ValueError):
        return False


class _Palette:
    """ANSI escape sequences — empty strings when color is disabled."""

    __slots__ = ("bold", "cyan", "dim", "green", "reset", "yellow")

    def __init__(self, *, enabled: bool) -> None:
        if enabled:
            self.reset = "\033[0m"
            self.bold = "\033[1m"
            self.dim = "\033[2m"
            self.green = "\033[32m"
            self.yellow = "\033[33m"
            self.cyan = "\033[36m"
        else:
            self.reset = ""
            self.bold = ""
            self.dim = ""
            self.green = ""
            self.yellow = ""
            self.cyan = ""


def _banner(title: str, c: _Palette) -> str:
    head = f"── {title} "
    return f"{c.dim}{head}{'─' * (_W - len(head))}{c.reset}"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def format_route_table(router: Router, *, color: bool | None = None) -> str:
    """Render every compiled key with the name of the handler it serves."""
    c = _Palette(enabled=_use_color() if color is None else color)
    lines = [_banner("burrow routes", c), ""]

    routes = router.routes
    if not routes:
        lines.append(f"  {c.yellow}No routes registered.{c.reset}")
    else:
        keys = [key.decode("utf-8", "replace") for key, _ in routes]
        width = max(len(k) for k in keys)
        for key, (_, leaf) in zip(keys, routes, strict=True):
            if leaf.placeholder:
                lines.append(f"  {c.dim}{key:<{width}}  (placeholder){c.reset}")
            else:
                lines.append(f"  {c.cyan}{key:<{width}}{c.reset}  {leaf.name or '?'}")

        placeholders = sum(1 for _, leaf in routes if leaf.placeholder)
        lines.append("")
        summary = _plural(len(routes), "route")
        if placeholders:
            summary = f"{summary} · {_plural(placeholders, 'placeholder')}"
        lines.append(f"  {c.green}{c.bold}{summary}{c.reset}")

    lines.append("")
    lines.append(f"{c.dim}{'─' * _W}{c.reset}")
    return "\n".join(lines)
