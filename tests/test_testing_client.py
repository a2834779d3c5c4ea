"""Tests for burrow.testing.TestClient — in-process ASGI driver."""

from burrow.app import prepare_routes
from burrow.http.request import Request
from burrow.http.response import Response
from burrow.routing.route import capture_route, handle_route
from burrow.testing import TestClient


def _echo_method(request: Request) -> Response:
    return Response(request.method).with_header("X-Seen", request.header("x-test") or "")


class TestClientRequests:
    async def test_methods(self) -> None:
        app = prepare_routes([handle_route("m", _echo_method)])
        async with TestClient(app) as client:
            assert (await client.get("/m")).text == "GET"
            assert (await client.post("/m")).text == "POST"
            assert (await client.put("/m")).text == "PUT"
            assert (await client.delete("/m")).text == "DELETE"

    async def test_headers_round_trip(self) -> None:
        app = prepare_routes([handle_route("m", _echo_method)])
        async with TestClient(app) as client:
            response = await client.get("/m", headers={"X-Test": "yes"})
            assert ("x-seen", "yes") in response.headers

    async def test_bytes_path(self) -> None:
        app = prepare_routes([capture_route("raw", lambda r, q: Response(r))])
        async with TestClient(app) as client:
            response = await client.get(b"/raw/\xff")
            assert response.body == b"/\xff"

    async def test_default_context_is_fresh_dict(self) -> None:
        app = prepare_routes([])
        client = TestClient(app)
        assert client.context == {}

    async def test_app_context_preferred(self) -> None:
        app = prepare_routes([], context="svc")
        assert TestClient(app).context == "svc"

    async def test_explicit_context(self) -> None:
        app = prepare_routes([], context="svc")
        assert TestClient(app, context="other").context == "other"
