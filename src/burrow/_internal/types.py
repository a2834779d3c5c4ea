"""Shared type aliases used across burrow modules."""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from burrow.http.request import Request
    from burrow.http.response import Response

Prefix: TypeAlias = bytes
"""A caller-local path segment or a fully-qualified key."""

Remainder: TypeAlias = bytes
"""The request path left over after the matched key."""

# Uniform handler stored in the trie: (remainder, request) -> Response
RouteHandler: TypeAlias = Callable[
    [Remainder, "Request"], "Response | Awaitable[Response]"
]

# User handler for handle_route: request -> Response
RequestHandler: TypeAlias = Callable[["Request"], "Response | Awaitable[Response]"]

# Lifespan hook: sync or async, no arguments
Hook: TypeAlias = Callable[[], Any]
