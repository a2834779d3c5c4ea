"""Route declaration tree — Leaf and Branch frozen dataclasses.

Prefixes given to the constructors are caller-local: they never include
their ancestors' prefixes. Joining them into full paths is the
compiler's job (see ``burrow.routing.router``).

Usage::

    routes = [
        compose(
            literal_route("api"),
            [
                handle_route("status", status),
                capture_route("users", user_by_id),
            ],
        ),
        handle_route("health", health),
    ]
"""

from dataclasses import dataclass
from typing import TypeAlias

from burrow._internal.types import Prefix, Remainder, RequestHandler, RouteHandler
from burrow.errors import ConfigurationError
from burrow.http.request import Request
from burrow.http.response import Response, not_found

SEPARATOR = b"/"


def to_prefix(prefix: str | bytes) -> Prefix:
    """Normalize a user-supplied prefix to bytes.

    Raises ``ConfigurationError`` for anything that cannot be a prefix:
    a non-string value, a string that is not valid UTF-8, or a prefix
    starting with the separator (the compiler adds separators itself).
    """
    if isinstance(prefix, bytes):
        value = prefix
    elif isinstance(prefix, str):
        try:
            value = prefix.encode("utf-8")
        except UnicodeEncodeError as exc:
            msg = f"Route prefix {prefix!r} is not valid UTF-8: {exc.reason}"
            raise ConfigurationError(msg) from exc
    else:
        msg = f"Route prefix must be str or bytes, got {type(prefix).__name__}"
        raise ConfigurationError(msg)

    if value.startswith(SEPARATOR):
        msg = (
            f"Route prefix {prefix!r} starts with '/'. Prefixes are relative; "
            f"write {value.lstrip(SEPARATOR).decode('utf-8', 'replace')!r} instead."
        )
        raise ConfigurationError(msg)
    return value


def not_found_handler(_remainder: Remainder, request: Request) -> Response:
    """Default handler for declared path segments with no handler of their own."""
    return not_found(request.raw_path)


@dataclass(frozen=True, slots=True)
class Leaf:
    """A terminal route: one prefix bound to one handler.

    ``handler`` always has the uniform ``(remainder, request)`` signature;
    the constructors below adapt user handlers to it.
    """

    prefix: Prefix
    handler: RouteHandler
    placeholder: bool = False
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Branch:
    """A parent route grouped with children nested beneath its prefix."""

    parent: "Route"
    children: tuple["Route", ...]

    @property
    def prefix(self) -> Prefix:
        """The prefix children are nested under (the parent's prefix)."""
        return self.parent.prefix


Route: TypeAlias = Leaf | Branch


def _handler_name(handler: object) -> str:
    return getattr(handler, "__qualname__", None) or getattr(handler, "__name__", repr(handler))


def literal_route(prefix: str | bytes) -> Leaf:
    """A path segment that exists in the hierarchy but has no handler.

    If a request lands on it directly, it gets the not-found response.
    Typically used as the parent of a ``compose`` group.
    """
    return Leaf(prefix=to_prefix(prefix), handler=not_found_handler, placeholder=True)


def handle_route(prefix: str | bytes, handler: RequestHandler) -> Leaf:
    """Bind *handler* to *prefix*. The handler receives only the request."""

    def route_handler(_remainder: Remainder, request: Request):
        return handler(request)

    return Leaf(prefix=to_prefix(prefix), handler=route_handler, name=_handler_name(handler))


def capture_route(prefix: str | bytes, handler: RouteHandler) -> Leaf:
    """Bind *handler* to *prefix*, passing it the unmatched remainder too.

    Use this for routes that consume path segments beyond the registered
    prefix, such as resource identifiers::

        def user(remainder: bytes, request: Request) -> Response:
            user_id = remainder.lstrip(b"/")
            ...
    """
    return Leaf(prefix=to_prefix(prefix), handler=handler, name=_handler_name(handler))


def compose(parent: Route, children: list[Route] | tuple[Route, ...]) -> Branch:
    """Nest *children* beneath *parent*'s prefix."""
    if not isinstance(parent, Leaf | Branch):
        msg = f"compose() parent must be a route, got {type(parent).__name__}"
        raise ConfigurationError(msg)
    for child in children:
        if not isinstance(child, Leaf | Branch):
            msg = f"compose() children must be routes, got {type(child).__name__}"
            raise ConfigurationError(msg)
    return Branch(parent=parent, children=tuple(children))
