"""Immutable HTTP request.

Frozen metadata with async body access. The request carries the raw
path bytes the router matches on and the per-request context the host
injected before routing.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any

from burrow._internal.asgi import Receive, Scope


def raw_path_from_scope(scope: Scope) -> bytes:
    """Return the undecoded request path for *scope*.

    ASGI servers provide ``raw_path`` (without the query string); older
    servers and hand-built scopes may only carry the decoded ``path``.
    """
    raw = scope.get("raw_path")
    if raw:
        return bytes(raw)
    return scope.get("path", "").encode("utf-8")


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Metadata (method, path, headers, etc.) is frozen at creation.
    Body is accessed asynchronously via ``.body()``, ``.text()``, ``.json()``.
    """

    method: str
    path: str
    raw_path: bytes
    headers: tuple[tuple[bytes, bytes], ...]
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None
    context: Any

    # Private: ASGI receive callable for body streaming
    _receive: Receive

    # Private: mutable cache for the body
    # (dict contents are mutable even though the field reference is frozen)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of header *name* (case-insensitive)."""
        key = name.lower().encode("latin-1")
        for raw_name, raw_value in self.headers:
            if raw_name.lower() == key:
                return raw_value.decode("latin-1")
        return default

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.header("content-type")

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached — the ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def text(self) -> str:
        """Read the body as text (UTF-8)."""
        raw = await self.body()
        return raw.decode("utf-8")

    async def json(self) -> Any:
        """Parse the body as JSON."""
        import json as json_module

        raw = await self.body()
        return json_module.loads(raw)

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive, *, context: Any = None) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope.get("method", "GET"),
            path=scope.get("path", ""),
            raw_path=raw_path_from_scope(scope),
            headers=tuple((bytes(k), bytes(v)) for k, v in scope.get("headers", ())),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
            context=context,
            _receive=receive,
        )
