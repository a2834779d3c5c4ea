"""Request-scoped context via ContextVar.

The host injects an opaque context value into every ASGI scope before
routing. The dispatcher extracts it, binds it to ``context_var`` for the
duration of the handler call, and resets it afterwards.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    free-threading. No locks needed.
"""

from contextvars import ContextVar
from typing import Any

from burrow._internal.asgi import Scope

DEFAULT_CONTEXT_KEY = "burrow.context"

context_var: ContextVar[Any] = ContextVar("burrow_context")
"""The current request's context. Set by the dispatcher around each handler."""


def get_context() -> Any:
    """Return the context of the request being handled.

    Raises ``LookupError`` if called outside a handler.
    """
    return context_var.get()


def context_from_scope(scope: Scope, key: str = DEFAULT_CONTEXT_KEY) -> Any | None:
    """Return the context injected into *scope*, or ``None`` if absent."""
    return scope.get(key)
