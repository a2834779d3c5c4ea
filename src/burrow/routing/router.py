"""Compiled router backed by a longest-prefix byte trie.

The route tree is flattened into full paths exactly once, before the app
starts serving, and the resulting trie is frozen.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from burrow._internal.types import Prefix, Remainder, RouteHandler
from burrow.errors import DuplicateRouteError
from burrow.routing.route import SEPARATOR, Branch, Leaf, Route
from burrow.routing.trie import PrefixTrie

logger = logging.getLogger("burrow.routing")


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    key: Prefix
    leaf: Leaf
    remainder: Remainder

    @property
    def handler(self) -> RouteHandler:
        return self.leaf.handler


def _insert(trie: PrefixTrie[Leaf], key: Prefix, leaf: Leaf, *, strict: bool) -> None:
    existing = trie.get(key)
    if existing is None:
        trie.insert(key, leaf)
        return

    # Placeholders never collide: a real handler wins either way round
    if leaf.placeholder:
        return
    if existing.placeholder:
        trie.insert(key, leaf)
        return

    if strict:
        raise DuplicateRouteError(key)
    logger.warning(
        "Route %r registered more than once; %s replaces %s",
        key.decode("utf-8", "replace"),
        leaf.name,
        existing.name,
    )
    trie.insert(key, leaf)


def _walk(
    trie: PrefixTrie[Leaf],
    accumulated: Prefix,
    routes: Iterable[Route],
    *,
    strict: bool,
) -> None:
    for route in routes:
        if isinstance(route, Leaf):
            _insert(trie, accumulated + SEPARATOR + route.prefix, route, strict=strict)
        else:
            # Parent first, under the current prefix; then the children
            # nested beneath it.
            _walk(trie, accumulated, (route.parent,), strict=strict)
            _walk(trie, accumulated + SEPARATOR + route.prefix, route.children, strict=strict)


def build_trie(routes: Iterable[Route], *, strict: bool = False) -> PrefixTrie[Leaf]:
    """Flatten a route tree into a frozen longest-prefix trie.

    Each leaf is stored under the separator-joined prefixes of all its
    ancestors followed by its own prefix. A full path registered twice
    keeps the later leaf, unless *strict* is set, in which case two real
    handlers on one path raise ``DuplicateRouteError``.
    """
    trie: PrefixTrie[Leaf] = PrefixTrie()
    _walk(trie, b"", routes, strict=strict)
    trie.freeze()
    logger.debug("Compiled %d routes", len(trie))
    return trie


class Router:
    """Immutable router over a compiled trie.

    Usage::

        router = Router.from_routes([
            compose(literal_route("api"), [handle_route("v1", v1)]),
        ])
        match = router.match(b"/api/v1/widgets")
        # match.key == b"/api/v1", match.remainder == b"/widgets"
    """

    __slots__ = ("_trie",)

    def __init__(self, trie: PrefixTrie[Leaf]) -> None:
        if not trie.frozen:
            msg = "Router requires a frozen trie; use build_trie() or Router.from_routes()."
            raise RuntimeError(msg)
        self._trie = trie

    @classmethod
    def from_routes(cls, routes: Iterable[Route], *, strict: bool = False) -> "Router":
        return cls(build_trie(routes, strict=strict))

    def match(self, path: bytes) -> RouteMatch | None:
        """Find the longest registered key that is a prefix of *path*.

        Returns ``None`` when no key matches. The remainder is the exact
        byte suffix of *path* after the key; separators are not trimmed.
        """
        found = self._trie.longest_match(path)
        if found is None:
            return None
        return RouteMatch(key=found.key, leaf=found.value, remainder=found.remainder)

    @property
    def routes(self) -> list[tuple[Prefix, Leaf]]:
        """All compiled ``(key, leaf)`` pairs, in key order."""
        return list(self._trie.items())

    def __len__(self) -> int:
        return len(self._trie)

    def __repr__(self) -> str:
        return f"<Router {len(self._trie)} routes>"
