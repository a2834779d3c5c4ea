"""Host-side helpers — the pieces a server loop wraps around the app.

The router requires every request to carry a context value. Servers
that know nothing about burrow get it through ``inject_context``.
"""

from typing import Any

from burrow._internal.asgi import ASGIApp, Receive, Scope, Send
from burrow.context import DEFAULT_CONTEXT_KEY


def inject_context(app: ASGIApp, context: Any, *, key: str = DEFAULT_CONTEXT_KEY) -> ASGIApp:
    """Wrap *app* so every HTTP scope carries *context* under *key*.

    The scope is copied rather than mutated, so the server's own dict is
    left untouched.
    """

    async def with_context(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            scope = {**scope, key: context}
        await app(scope, receive, send)

    with_context.__wrapped__ = app  # type: ignore[attr-defined]
    return with_context
