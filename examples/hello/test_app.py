"""Tests for the hello example."""

from burrow.testing import TestClient


class TestHelloApp:
    """Verify every route in the hello example works through the ASGI pipeline."""

    async def test_index(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/")
            assert response.status == 200
            assert response.text == "Hello, World!"

    async def test_greet_with_remainder(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/greet/alice")
            assert response.text == "Hello, alice!"

    async def test_greet_without_name(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/greet")
            assert response.text == "Hello, stranger!"

    async def test_json_status(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/api/status")
            assert response.status == 200
            assert "application/json" in response.content_type
            assert '"ok"' in response.text

    async def test_custom_response_status_and_header(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/api/custom")
            assert response.status == 201
            assert ("x-custom", "burrow") in response.headers

    async def test_api_placeholder_is_not_found(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/api")
            assert response.status == 404
            assert response.text == "/api"

    async def test_root_handler_catches_unregistered_paths(self, example_app) -> None:
        # "/" is a prefix of every path, so the index answers anything unclaimed
        async with TestClient(example_app) as client:
            response = await client.get("/nowhere")
            assert response.text == "Hello, World!"
