"""Tests for burrow.http.request — immutable Request built from ASGI scope."""

from typing import Any

import pytest

from burrow.http.request import Request, raw_path_from_scope


def _receiver(*chunks: bytes):
    messages = [
        {"type": "http.request", "body": chunk, "more_body": i < len(chunks) - 1}
        for i, chunk in enumerate(chunks)
    ]

    async def receive() -> dict[str, Any]:
        return messages.pop(0)

    return receive


def _scope(**overrides: Any) -> dict[str, Any]:
    base: dict[str, Any] = {
        "type": "http",
        "method": "POST",
        "path": "/api/v1",
        "raw_path": b"/api/v1",
        "headers": [(b"content-type", b"application/json"), (b"x-multi", b"a"), (b"x-multi", b"b")],
        "server": ("localhost", 8000),
        "client": ("127.0.0.1", 54321),
    }
    base.update(overrides)
    return base


class TestFromAsgi:
    def test_fields(self) -> None:
        request = Request.from_asgi(_scope(), _receiver(b""), context="ctx")

        assert request.method == "POST"
        assert request.path == "/api/v1"
        assert request.raw_path == b"/api/v1"
        assert request.http_version == "1.1"
        assert request.server == ("localhost", 8000)
        assert request.client == ("127.0.0.1", 54321)
        assert request.context == "ctx"

    def test_header_lookup_case_insensitive(self) -> None:
        request = Request.from_asgi(_scope(), _receiver(b""))
        assert request.header("Content-Type") == "application/json"
        assert request.content_type == "application/json"
        assert request.header("x-multi") == "a"
        assert request.header("missing", "fallback") == "fallback"

    def test_frozen(self) -> None:
        request = Request.from_asgi(_scope(), _receiver(b""))
        with pytest.raises(AttributeError):
            request.path = "/other"  # type: ignore[misc]


class TestRawPath:
    def test_prefers_raw_path(self) -> None:
        assert raw_path_from_scope({"path": "/a/b", "raw_path": b"/a%2Fb"}) == b"/a%2Fb"

    def test_falls_back_to_path(self) -> None:
        assert raw_path_from_scope({"path": "/é"}) == "/é".encode()

    def test_empty_scope(self) -> None:
        assert raw_path_from_scope({}) == b""


class TestBody:
    async def test_body_joins_chunks_and_caches(self) -> None:
        request = Request.from_asgi(_scope(), _receiver(b"hel", b"lo"))
        assert await request.body() == b"hello"
        assert await request.body() == b"hello"

    async def test_text(self) -> None:
        request = Request.from_asgi(_scope(), _receiver("héllo".encode()))
        assert await request.text() == "héllo"

    async def test_json(self) -> None:
        request = Request.from_asgi(_scope(), _receiver(b'{"a": 1}'))
        assert await request.json() == {"a": 1}
